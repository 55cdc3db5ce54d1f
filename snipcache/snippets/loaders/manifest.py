from dataclasses import dataclass
from pathlib import Path
from typing import (
    AbstractSet,
    Any,
    Callable,
    Iterable,
    Mapping,
    Optional,
    Sequence,
    Union,
)

from pynvim_pp.logging import log
from std2.pickle.decoder import new_decoder
from std2.pickle.types import DecodeError

from ...shared.paths import join, read_bytes
from ..types import FtPaths, LoadError
from .parse import load_json

FtFilter = Callable[[str], bool]


@dataclass(frozen=True)
class _Contribution:
    language: Union[str, Sequence[str]]
    path: str


_DECODER = new_decoder[_Contribution](_Contribution, strict=False)


def ft_filter(
    include: Optional[Iterable[str]] = None, exclude: Optional[Iterable[str]] = None
) -> FtFilter:
    """
    `exclude` wins over `include`

    `include=None` admits every filetype, an empty `include` admits none
    """

    included: Optional[AbstractSet[str]] = None if include is None else {*include}
    excluded: AbstractSet[str] = {*(exclude or ())}

    def cont(filetype: str) -> bool:
        if filetype in excluded:
            return False
        else:
            return included is None or filetype in included

    return cont


def extend_ft_paths(dest: FtPaths, src: Mapping[str, Iterable[Path]]) -> None:
    for filetype, paths in src.items():
        acc = dest.setdefault(filetype, [])
        for path in paths:
            if path not in acc:
                acc.append(path)


def _languages(language: Union[str, Sequence[str]]) -> Sequence[str]:
    if isinstance(language, str):
        return (language,)
    else:
        return tuple(language)


def _contributions(root: Path, manifest: str) -> Sequence[Any]:
    path = root / manifest
    raw = read_bytes(path)
    if raw is None:
        log.debug("%s", f"No manifest :: {path}")
        return ()

    try:
        json = load_json(path, kind="manifest", raw=raw)
    except LoadError as e:
        log.warning("%s", e)
        return ()

    contributes = json.get("contributes") if isinstance(json, Mapping) else None
    snippets = (
        contributes.get("snippets") if isinstance(contributes, Mapping) else None
    )
    if isinstance(snippets, Sequence) and not isinstance(snippets, str):
        return snippets
    else:
        return ()


def package_files(root: Path, filter: FtFilter, manifest: str) -> FtPaths:
    ft_files: FtPaths = {}

    for entry in _contributions(root, manifest=manifest):
        try:
            contribution = _DECODER(entry)
        except DecodeError as e:
            log.warning("%s", f"Bad snippet contribution :: {root / manifest}\n{e}")
        else:
            for filetype in _languages(contribution.language):
                if filter(filetype):
                    path = join(root, contribution.path)
                    extend_ft_paths(ft_files, {filetype: (path,)})

    return ft_files
