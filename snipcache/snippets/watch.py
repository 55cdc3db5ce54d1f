from pathlib import Path
from typing import AbstractSet, Callable, MutableMapping, Tuple

from ..shared.paths import normalize
from ..shared.types import StrPath

WatchKey = Tuple[str, Path]


class SaveWatch:
    """
    One shot save hooks, keyed by `(filetype, path)`

    The host calls `saved(path)` after a write, each armed hook fires once and is dropped
    """

    def __init__(self) -> None:
        self._handles: MutableMapping[WatchKey, Callable[[], None]] = {}

    def on_next_save(
        self, filetype: str, path: StrPath, callback: Callable[[], None]
    ) -> None:
        self._handles[(filetype, normalize(path))] = callback

    def cancel(self, filetype: str, path: StrPath) -> bool:
        return self._handles.pop((filetype, normalize(path)), None) is not None

    def armed(self) -> AbstractSet[WatchKey]:
        return {*self._handles}

    def saved(self, path: StrPath) -> int:
        normalized = normalize(path)
        keys = tuple(key for key in self._handles if key[1] == normalized)

        fired = 0
        for key in keys:
            if callback := self._handles.pop(key, None):
                fired += 1
                callback()

        return fired
