from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Callable, MutableMapping, MutableSequence, Protocol, Sequence

FtPaths = MutableMapping[str, MutableSequence[Path]]


class LoadError(Exception):
    ...


class SnippetKind(Enum):
    snippets = auto()
    autosnippets = auto()


@dataclass(frozen=True)
class ParsedSnippet:
    trigger: str
    name: str
    description: str
    body: str
    auto: bool
    word_trig: bool = True


@dataclass(frozen=True)
class PathSnippets:
    snippets: Sequence[ParsedSnippet]
    autosnippets: Sequence[ParsedSnippet]


EMPTY_SNIPPETS = PathSnippets(snippets=(), autosnippets=())


@dataclass(frozen=True)
class RegisterOptions:
    kind: SnippetKind
    key: str
    refresh_notify: bool


class SnippetEngine(Protocol):
    def register(
        self, filetype: str, snippets: Sequence[ParsedSnippet], opts: RegisterOptions
    ) -> None:
        ...

    def refresh_notify(self, filetype: str) -> None:
        ...

    def clean_invalidated(self, inv_limit: int) -> int:
        ...

    def active_filetypes(self) -> Sequence[str]:
        ...


class SaveWatcher(Protocol):
    def on_next_save(
        self, filetype: str, path: Path, callback: Callable[[], None]
    ) -> None:
        ...
