"""JSON text → script values.

orjson parses the whole document into plain Python objects first; the
resulting tree is then walked bottom-up and rebuilt as :class:`Table`
values.  Once parsing succeeds the conversion cannot fail.
"""
from __future__ import annotations
import logging
from typing import Any

from . import json_util
from .errors import JSONDecodeError
from .models import Table, is_number, lua_type, tostring

# ── logger (무소음 기본) ───────────────────────────────
LOGGER = logging.getLogger("scriptjson.decoder")
LOGGER.addHandler(logging.NullHandler())

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def from_json(node: Any) -> Any:
    """Convert one generic JSON node (and its children) to a script value."""
    if node is None:
        return None
    if isinstance(node, (bool, str)) or is_number(node):
        return node
    if isinstance(node, list):
        arr = Table()
        for item in node:
            # nil items append nothing, as in the runtime
            arr.append(from_json(item))
        return arr
    if isinstance(node, dict):
        tbl = Table()
        for key, item in node.items():
            tbl[key] = from_json(item)
        return tbl
    # orjson never yields anything else
    LOGGER.debug("Unrecognized JSON node %r decoded as nil", type(node).__name__)
    return None


class JSONDecoder:
    def decode(self, text) -> Any:
        # numbers coerce to strings, as in the host's argument check
        if is_number(text):
            text = tostring(text)
        if not isinstance(text, _TEXT_TYPES):
            try:
                got = lua_type(text)
            except TypeError:
                got = type(text).__name__
            raise TypeError(f"bad argument #1 to 'decode' (string expected, got {got})")
        try:
            tree = json_util.loads(text)
        except json_util.JSONDecodeError as e:
            raise JSONDecodeError(str(e)) from e
        value = from_json(tree)
        LOGGER.debug("Decoded JSON text (%d chars) to %s", len(text), lua_type(value))
        return value
