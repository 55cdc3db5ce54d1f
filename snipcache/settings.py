from typing import Any, Mapping, Optional

from pynvim_pp.lib import decode
from std2.graphlib import merge
from std2.pickle.decoder import new_decoder
from std2.pickle.types import DecodeError
from yaml import safe_load

from .consts import CONFIG_YML
from .shared.settings import LoadOpts, Settings

_OPTS_DECODER = new_decoder[LoadOpts](LoadOpts)


class ValidationError(Exception):
    ...


def load_settings(user_config: Optional[Mapping[str, Any]] = None) -> Settings:
    yml = safe_load(decode(CONFIG_YML.read_bytes()))
    merged = merge(yml, user_config or {}, replace=True)

    try:
        config = new_decoder[Settings](Settings)(merged)
    except DecodeError as e:
        raise ValidationError(e) from e

    if not config.manifest:
        raise ValidationError("manifest is empty")

    if config.limits.inv_limit <= 0:
        raise ValidationError("limits.inv_limit <= 0")

    return config


def decode_opts(opts: Optional[Mapping[str, Any]]) -> LoadOpts:
    try:
        return _OPTS_DECODER(opts or {})
    except DecodeError as e:
        raise ValidationError(e) from e
