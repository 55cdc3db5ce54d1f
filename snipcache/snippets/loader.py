from pathlib import Path
from typing import (
    Callable,
    Iterable,
    Mapping,
    MutableSequence,
    Optional,
    Sequence,
    Union,
)

from pynvim_pp.logging import log

from ..shared.paths import exists, normalize, read_bytes
from ..shared.settings import LoadOpts, Settings
from ..shared.types import StrPath
from .loaders.discovery import snippet_roots
from .loaders.manifest import extend_ft_paths, ft_filter, package_files
from .loaders.vscode import load_vscode
from .stats import LoadStat, LoadStats
from .store import SnippetStore
from .types import (
    EMPTY_SNIPPETS,
    FtPaths,
    LoadError,
    PathSnippets,
    RegisterOptions,
    SaveWatcher,
    SnippetEngine,
    SnippetKind,
)


def _key(kind: SnippetKind, filetype: str, path: Path) -> str:
    # one file may contribute to several filetypes
    return f"__{filetype}_{kind.name}_{path}"


class Loader:
    """
    Loads VS Code style snippet packages into a `SnippetEngine`

    Per filetype: unseen -> pending (`lazy_load`) -> loaded (`lazy_materialize`)
    """

    def __init__(
        self,
        settings: Settings,
        store: SnippetStore,
        engine: SnippetEngine,
        watcher: SaveWatcher,
        runtime: Optional[Callable[[], Iterable[StrPath]]] = None,
    ) -> None:
        self._settings = settings
        self._store, self._engine, self._watcher = store, engine, watcher
        self._runtime = runtime or (lambda: settings.runtime_paths)
        self._stats = LoadStats()

    def discover(self, opts: Optional[LoadOpts] = None) -> FtPaths:
        opts = opts or self._settings.load
        manifest = self._settings.manifest
        roots = snippet_roots(opts.paths, runtime=self._runtime(), manifest=manifest)
        filter = ft_filter(include=opts.include, exclude=opts.exclude)

        ft_paths: FtPaths = {}
        for root in roots:
            extend_ft_paths(
                ft_paths, package_files(root, filter=filter, manifest=manifest)
            )
        return ft_paths

    def snippet_files(self) -> Mapping[str, Sequence[Path]]:
        return self._store.ft_paths()

    def stats(self) -> Mapping[str, LoadStat]:
        return self._stats.snapshot()

    def _parse(self, path: Path) -> Optional[PathSnippets]:
        raw = read_bytes(path)
        if raw is None:
            return None

        try:
            return load_vscode(path, raw=raw, extension=self._settings.extension)
        except LoadError as e:
            log.warning("%s", e)
            return EMPTY_SNIPPETS

    def _watch(self, filetype: str, path: Path) -> None:
        def cont() -> None:
            self.reload_file(filetype, path=path)

        self._watcher.on_next_save(filetype, path=path, callback=cont)

    def load_files(self, filetype: str, files: Iterable[StrPath]) -> None:
        with self._stats.record(filetype) as acc:
            for file in files:
                path = normalize(file)
                if not exists(path):
                    log.debug("%s", f"Missing snippets :: {path}")
                    continue

                snips = self._store.get(path)
                if snips is None:
                    snips = self._parse(path)
                    if snips is None:
                        log.debug("%s", f"Unreadable snippets :: {path}")
                        continue
                    self._store.put(path, snips)
                    acc.append(True)
                else:
                    acc.append(False)

                self._watch(filetype, path=path)

                for kind, parsed in (
                    (SnippetKind.snippets, snips.snippets),
                    (SnippetKind.autosnippets, snips.autosnippets),
                ):
                    opts = RegisterOptions(
                        kind=kind,
                        key=_key(kind, filetype=filetype, path=path),
                        refresh_notify=False,
                    )
                    self._engine.register(filetype, parsed, opts=opts)

            self._engine.refresh_notify(filetype)

    def load(self, opts: Optional[LoadOpts] = None) -> None:
        ft_files = self.discover(opts)
        self._store.add_ft_paths(ft_files)

        for filetype, files in ft_files.items():
            self.load_files(filetype, files=files)

    def lazy_load(self, opts: Optional[LoadOpts] = None) -> None:
        ft_files = self.discover(opts)
        self._store.add_ft_paths(ft_files)

        for filetype, files in ft_files.items():
            if self._store.materialized(filetype):
                self.load_files(filetype, files=files)
            else:
                self._store.defer(filetype, paths=files)

    def lazy_materialize(
        self, filetypes: Union[str, Iterable[str], None] = None
    ) -> Sequence[str]:
        if filetypes is None:
            fts: Iterable[str] = self._engine.active_filetypes()
        elif isinstance(filetypes, str):
            fts = (filetypes,)
        else:
            fts = filetypes

        materialized: MutableSequence[str] = []
        for filetype in fts:
            if not self._store.materialized(filetype):
                files = self._store.materialize(filetype)
                self.load_files(filetype, files=files)
                materialized.append(filetype)

        return materialized

    def reload_file(self, filetype: str, path: StrPath) -> bool:
        if self._store.invalidate(path):
            self.load_files(filetype, files=(path,))
            self._engine.clean_invalidated(self._settings.limits.inv_limit)
            return True
        else:
            return False
