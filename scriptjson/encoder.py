"""Script values → JSON text.

Tables carry no array/object tag, so each one is classified while it is
walked: it stays an array as long as its keys arrive as 1, 2, 3, … and
flips to an object for good on the first key that breaks the run.  Entries
collected before the flip are relabeled ``"1"``, ``"2"``, ….
"""
from __future__ import annotations
import logging
import math
from typing import Any, Dict, List, Optional, Set

from . import json_util
from .config import CODEC_CONFIG
from .errors import JSONEncodeError, NestedTableError, UnsupportedValueError
from .models import Channel, Function, State, Table, UserData, is_number, tostring

# ── logger (무소음 기본) ───────────────────────────────
LOGGER = logging.getLogger("scriptjson.encoder")
LOGGER.addHandler(logging.NullHandler())

ARRAY_MODE = "array"
OBJECT_MODE = "object"

_UNSUPPORTED = (
    (Function, "function"),
    (Channel, "channel"),
    (State, "state"),
    (UserData, "userdata"),
)


def to_json(value: Any, visited: Set[int], *, float_limit: float = float(2**53)) -> Any:
    """Convert *value* into a tree orjson can serialize.

    *visited* holds the ids of the tables currently being converted; it is
    shared by every recursive call of one top-level encode.
    """
    if value is None or isinstance(value, (bool, str)):
        return value
    if is_number(value):
        return _number(value, float_limit)
    if isinstance(value, Table):
        return _table(value, visited, float_limit)
    for cls, kind in _UNSUPPORTED:
        if isinstance(value, cls):
            raise UnsupportedValueError(kind)
    raise UnsupportedValueError(type(value).__name__)


def _number(n, float_limit: float):
    if isinstance(n, int):
        return n
    if not math.isfinite(n):
        raise UnsupportedValueError("non-finite number")
    if n.is_integer() and abs(n) < float_limit:
        return int(n)
    return n


def _table(tbl: Table, visited: Set[int], float_limit: float):
    ident = id(tbl)
    if ident in visited:
        raise NestedTableError()
    visited.add(ident)
    try:
        mode = ARRAY_MODE
        arr: List[Any] = []
        obj: Dict[str, Any] = {}
        for key, val in tbl.pairs():
            item = to_json(val, visited, float_limit=float_limit)
            if mode == ARRAY_MODE:
                if is_number(key) and key == len(arr) + 1:
                    arr.append(item)
                    continue
                # out of sequence → relabel what we have and stay an object
                obj = {str(i): v for i, v in enumerate(arr, 1)}
                mode = OBJECT_MODE
            obj[tostring(key)] = item
        return arr if mode == ARRAY_MODE else obj
    finally:
        visited.discard(ident)


class JSONEncoder:
    def __init__(
        self,
        sort_keys: Optional[bool] = None,
        indent: Optional[bool] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        # 부분 config 허용: 누락 키는 기본값
        self.config = {**CODEC_CONFIG, **(config or {})}
        self.sort_keys = self.config["sort_keys"] if sort_keys is None else sort_keys
        self.indent = self.config["indent"] if indent is None else indent
        self.float_limit = self.config["integral_float_limit"]

    def encode(self, value: Any) -> str:
        visited: Set[int] = set()
        tree = to_json(value, visited, float_limit=self.float_limit)
        try:
            text = json_util.dumps(tree, sort_keys=self.sort_keys, indent=self.indent)
        except json_util.JSONEncodeError as e:
            raise JSONEncodeError(str(e)) from e
        LOGGER.debug("Encoded %s to JSON (%d chars)", type(value).__name__, len(text))
        return text
