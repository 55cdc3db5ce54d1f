from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Mapping, MutableMapping, MutableSequence

from pynvim_pp.logging import log
from std2.locale import si_prefixed_smol
from std2.timeit import timeit

from ..consts import DEBUG


@dataclass(frozen=True)
class LoadStat:
    loads: int
    files: int
    parsed: int
    elapsed: float


class LoadStats:
    """
    Per filetype tally of `load_files` calls
    """

    def __init__(self) -> None:
        self._stats: MutableMapping[str, LoadStat] = {}

    @contextmanager
    def record(self, filetype: str) -> Iterator[MutableSequence[bool]]:
        """
        Yields an accumulator, push `True` per parsed file, `False` per cache hit
        """

        acc: MutableSequence[bool] = []
        with timeit() as t:
            yield acc
        delta = t().total_seconds()

        empty = LoadStat(loads=0, files=0, parsed=0, elapsed=0)
        prev = self._stats.get(filetype, empty)
        stat = LoadStat(
            loads=prev.loads + 1,
            files=prev.files + len(acc),
            parsed=prev.parsed + sum(acc),
            elapsed=prev.elapsed + delta,
        )
        self._stats[filetype] = stat

        if DEBUG:
            time = f"{si_prefixed_smol(delta, precision=0)}s"
            msg = f"LOAD -- {filetype} :: {len(acc)} files, {sum(acc)} parsed @ {time}"
            log.debug("%s", msg)

    def snapshot(self) -> Mapping[str, LoadStat]:
        return {**self._stats}
