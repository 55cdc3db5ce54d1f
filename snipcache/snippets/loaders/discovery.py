from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

from ...consts import PATHS_SEP
from ...shared.paths import exists, expand, join
from ...shared.types import StrPath


def _split(paths: str) -> Iterator[str]:
    for path in paths.split(PATHS_SEP):
        if stripped := path.strip():
            yield stripped


def runtime_roots(runtime: Iterable[StrPath], manifest: str) -> Iterator[StrPath]:
    for path in runtime:
        if exists(join(path, manifest)):
            yield path


def snippet_roots(
    paths: Union[str, Sequence[StrPath], None],
    manifest: str,
    runtime: Iterable[StrPath] = (),
) -> Sequence[Path]:
    if paths is None:
        candidates: Iterable[StrPath] = runtime_roots(runtime, manifest=manifest)
    elif isinstance(paths, str):
        candidates = _split(paths)
    else:
        candidates = paths

    expanded: Iterator[Optional[Path]] = (expand(path) for path in candidates)
    roots = {path: None for path in expanded if path}
    return tuple(roots)
