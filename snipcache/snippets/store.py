from pathlib import Path
from typing import Mapping, MutableMapping, MutableSet, Optional, Sequence

from ..shared.paths import normalize
from ..shared.types import StrPath
from .loaders.manifest import extend_ft_paths
from .types import FtPaths, PathSnippets


class SnippetStore:
    """
    Parsed snippets keyed by path, shared by every filetype referencing the path

    Also tracks which files contribute to which filetype, and the lazy load state
    """

    def __init__(self) -> None:
        self._path_snippets: MutableMapping[Path, PathSnippets] = {}
        self._ft_paths: FtPaths = {}
        self._lazy_load_paths: FtPaths = {}
        self._lazy_loaded_ft: MutableSet[str] = set()

    def get(self, path: StrPath) -> Optional[PathSnippets]:
        return self._path_snippets.get(normalize(path))

    def put(self, path: StrPath, snippets: PathSnippets) -> None:
        self._path_snippets[normalize(path)] = snippets

    def invalidate(self, path: StrPath) -> bool:
        return self._path_snippets.pop(normalize(path), None) is not None

    def add_ft_paths(self, ft_files: Mapping[str, Sequence[Path]]) -> None:
        extend_ft_paths(self._ft_paths, ft_files)

    def ft_paths(self) -> Mapping[str, Sequence[Path]]:
        return {ft: tuple(paths) for ft, paths in self._ft_paths.items()}

    def defer(self, filetype: str, paths: Sequence[Path]) -> None:
        extend_ft_paths(self._lazy_load_paths, {filetype: paths})

    def pending(self, filetype: str) -> Sequence[Path]:
        return tuple(self._lazy_load_paths.get(filetype, ()))

    def materialized(self, filetype: str) -> bool:
        return filetype in self._lazy_loaded_ft

    def materialize(self, filetype: str) -> Sequence[Path]:
        assert filetype not in self._lazy_loaded_ft
        self._lazy_loaded_ft.add(filetype)
        return tuple(self._lazy_load_paths.pop(filetype, ()))
