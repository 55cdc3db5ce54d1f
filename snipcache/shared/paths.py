from contextlib import suppress
from os.path import abspath, expanduser, expandvars, normcase, normpath
from pathlib import Path
from typing import Optional

from .types import StrPath


def normalize(path: StrPath) -> Path:
    return Path(normcase(normpath(abspath(path))))


def join(root: StrPath, *parts: StrPath) -> Path:
    return normalize(Path(root).joinpath(*parts))


def expand(path: StrPath) -> Optional[Path]:
    """
    `~` and `$VAR` expansion, resolved to a real location

    `None` when the result does not exist
    """

    expanded = Path(expandvars(expanduser(path)))
    with suppress(OSError, RuntimeError):
        resolved = expanded.resolve(strict=True)
        return Path(normcase(resolved))
    return None


def exists(path: StrPath) -> bool:
    with suppress(OSError):
        return Path(path).exists()
    return False


def read_bytes(path: StrPath) -> Optional[bytes]:
    with suppress(OSError):
        return Path(path).read_bytes()
    return None
