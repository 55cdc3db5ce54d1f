from json import loads
from json.decoder import JSONDecodeError
from pathlib import PurePath
from textwrap import dedent
from typing import Any, NoReturn

from ...shared.types import UTF8
from ..types import LoadError

_BOM = "\ufeff"


def raise_err(
    path: PurePath, kind: str, lineno: int, line: str, reason: str
) -> NoReturn:
    msg = f"""\
    Cannot load {kind}:
    path:   {path}
    lineno: {lineno}
    line:   {line}
    reason: |-
    {reason}
    """
    raise LoadError(dedent(msg))


def load_json(path: PurePath, kind: str, raw: bytes) -> Any:
    try:
        text = raw.decode(UTF8)
    except UnicodeDecodeError as e:
        raise_err(path, kind=kind, lineno=0, line="", reason=str(e))

    try:
        return loads(text.lstrip(_BOM))
    except JSONDecodeError as e:
        lines = e.doc.splitlines()
        line = lines[e.lineno - 1] if 0 < e.lineno <= len(lines) else ""
        raise_err(path, kind=kind, lineno=e.lineno, line=line, reason=e.msg)
    except RecursionError:
        raise_err(path, kind=kind, lineno=0, line="", reason="Nesting too deep")
