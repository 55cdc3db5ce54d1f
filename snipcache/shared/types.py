from os import PathLike
from typing import Literal, Union

UTF8: Literal["UTF-8"] = "UTF-8"

StrPath = Union[str, "PathLike[str]"]
