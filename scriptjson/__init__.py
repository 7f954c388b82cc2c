"""scriptjson - JSON codec for an embedded scripting runtime's values."""

__version__ = "0.1.0"
__author__ = "YC Math"

# 주요 API export
from .models import (
    Table,
    Function,
    Channel,
    State,
    UserData,
    lua_type,
    tostring,
)
from .errors import (
    JSONCodecError,
    JSONDecodeError,
    JSONEncodeError,
    UnsupportedValueError,
    NestedTableError,
)
from .decoder import JSONDecoder
from .encoder import JSONEncoder
from .module import api_decode as decode, api_encode as encode, loader, preload

__all__ = [
    "Table",
    "Function",
    "Channel",
    "State",
    "UserData",
    "lua_type",
    "tostring",
    "JSONCodecError",
    "JSONDecodeError",
    "JSONEncodeError",
    "UnsupportedValueError",
    "NestedTableError",
    "JSONDecoder",
    "JSONEncoder",
    "decode",
    "encode",
    "loader",
    "preload",
]
