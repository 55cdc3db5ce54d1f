from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union


@dataclass(frozen=True)
class LoadOpts:
    paths: Union[str, Sequence[str], None] = None
    include: Optional[Sequence[str]] = None
    exclude: Optional[Sequence[str]] = None


@dataclass(frozen=True)
class Limits:
    inv_limit: int


@dataclass(frozen=True)
class Settings:
    manifest: str
    extension: str
    runtime_paths: Sequence[Path]
    load: LoadOpts
    limits: Limits
