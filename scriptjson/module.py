"""The ``json`` module as scripts see it.

Scripts get two values back from every call, ``(result, nil)`` or
``(nil, message)``; codec exceptions stop here.

    state = State()
    preload(state)
    json = state.require("json")
    text, err = json["encode"](value)
"""
from __future__ import annotations
import logging
from typing import Any, Optional, Tuple

from .decoder import JSONDecoder
from .encoder import JSONEncoder
from .errors import JSONCodecError
from .models import Function, State, Table

LOGGER = logging.getLogger("scriptjson.module")
LOGGER.addHandler(logging.NullHandler())

MODULE_NAME = "json"

_DECODER = JSONDecoder()
_ENCODER = JSONEncoder()

_DEPTH_MESSAGE = "cannot convert JSON: maximum nesting depth exceeded"


def api_decode(text) -> Tuple[Any, Optional[str]]:
    try:
        return _DECODER.decode(text), None
    except JSONCodecError as e:
        LOGGER.debug("decode failed: %s", e)
        return None, str(e)
    except RecursionError:
        LOGGER.debug("decode failed: nesting too deep")
        return None, _DEPTH_MESSAGE


def api_encode(value: Any) -> Tuple[Optional[str], Optional[str]]:
    try:
        return _ENCODER.encode(value), None
    except JSONCodecError as e:
        LOGGER.debug("encode failed: %s", e)
        return None, str(e)
    except RecursionError:
        LOGGER.debug("encode failed: nesting too deep")
        return None, _DEPTH_MESSAGE


def loader(state: Optional[State] = None) -> Table:
    """Build the module table."""
    mod = Table()
    mod["decode"] = Function(api_decode, "decode")
    mod["encode"] = Function(api_encode, "encode")
    return mod


def preload(state: State) -> None:
    """Make ``state.require("json")`` return the module table."""
    state.preload[MODULE_NAME] = loader
