from dataclasses import dataclass
from pathlib import PurePath
from typing import Any, Iterator, Mapping, MutableSequence, Sequence, Union

from pynvim_pp.logging import log
from std2.pickle.decoder import new_decoder
from std2.pickle.types import DecodeError

from ...consts import SNIP_LINE_SEP
from ..types import ParsedSnippet, PathSnippets
from .parse import load_json, raise_err


@dataclass(frozen=True)
class _Unit:
    prefix: Union[str, Sequence[str]]
    body: Union[str, Sequence[str]]
    description: Union[str, Sequence[str], None] = None


@dataclass(frozen=True)
class _Extension:
    autotrigger: bool = False


_UNIT_DECODER = new_decoder[_Unit](_Unit, strict=False)
_EXT_DECODER = new_decoder[_Extension](_Extension, strict=False)
_KIND = "snippets"


def _lines(lines: Union[str, Sequence[str]]) -> str:
    if isinstance(lines, str):
        return lines
    else:
        return SNIP_LINE_SEP.join(lines)


def _prefixes(prefix: Union[str, Sequence[str]]) -> Sequence[str]:
    if isinstance(prefix, str):
        return (prefix,)
    else:
        return tuple(prefix)


def _parse_one(name: str, values: Any, extension: str) -> Iterator[ParsedSnippet]:
    unit = _UNIT_DECODER(values)
    ext = _EXT_DECODER(values.get(extension) or {})

    body = _lines(unit.body)
    description = name if unit.description is None else _lines(unit.description)

    for prefix in _prefixes(unit.prefix):
        yield ParsedSnippet(
            trigger=prefix,
            name=name,
            description=description,
            body=body,
            auto=ext.autotrigger,
        )


def load_vscode(path: PurePath, raw: bytes, extension: str) -> PathSnippets:
    json = load_json(path, kind=_KIND, raw=raw)
    if not isinstance(json, Mapping):
        reason = "Expected a mapping of snippets"
        raise_err(path, kind=_KIND, lineno=1, line="", reason=reason)

    snippets: MutableSequence[ParsedSnippet] = []
    autosnippets: MutableSequence[ParsedSnippet] = []

    for name, values in json.items():
        try:
            parsed = tuple(_parse_one(name, values=values, extension=extension))
        except DecodeError as e:
            log.warning("%s", f"Skipping snippet :: {name} @ {path}{SNIP_LINE_SEP}{e}")
        else:
            for snip in parsed:
                if snip.auto:
                    autosnippets.append(snip)
                else:
                    snippets.append(snip)

    return PathSnippets(snippets=tuple(snippets), autosnippets=tuple(autosnippets))
