from collections import deque
from typing import (
    Callable,
    Deque,
    Iterator,
    MutableMapping,
    MutableSequence,
    Sequence,
    Tuple,
)

from .types import ParsedSnippet, RegisterOptions, SnippetKind

_Key = Tuple[SnippetKind, str]


class SnippetRegistry:
    def __init__(self) -> None:
        self._registered: MutableMapping[_Key, Tuple[str, Sequence[ParsedSnippet]]] = {}
        self._invalidated: Deque[ParsedSnippet] = deque()
        self._active: MutableSequence[str] = []
        self._listeners: MutableSequence[Callable[[str], None]] = []

    def register(
        self, filetype: str, snippets: Sequence[ParsedSnippet], opts: RegisterOptions
    ) -> None:
        key = (opts.kind, opts.key)
        if prev := self._registered.get(key):
            _, stale = prev
            self._invalidated.extend(stale)

        self._registered[key] = (filetype, tuple(snippets))

        if opts.refresh_notify:
            self.refresh_notify(filetype)

    def snippets(
        self, filetype: str, kind: SnippetKind = SnippetKind.snippets
    ) -> Sequence[ParsedSnippet]:
        def cont() -> Iterator[ParsedSnippet]:
            for (k, _), (ft, snips) in self._registered.items():
                if k == kind and ft == filetype:
                    yield from snips

        return tuple(cont())

    def on_refresh(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)

    def refresh_notify(self, filetype: str) -> None:
        for listener in self._listeners:
            listener(filetype)

    def invalidated(self) -> int:
        return len(self._invalidated)

    def clean_invalidated(self, inv_limit: int) -> int:
        cleaned = 0
        while self._invalidated and cleaned < inv_limit:
            self._invalidated.popleft()
            cleaned += 1
        return cleaned

    def activate(self, *filetypes: str) -> None:
        for filetype in filetypes:
            if filetype not in self._active:
                self._active.append(filetype)

    def active_filetypes(self) -> Sequence[str]:
        return tuple(self._active)
