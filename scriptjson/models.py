"""Dynamic value model of the embedded scripting runtime.

The union is closed: ``None`` (nil), ``bool``, ``int``/``float`` (number),
``str``, :class:`Table`, :class:`Function`, :class:`Channel`,
:class:`State` and :class:`UserData`.  Everything else is foreign to the
runtime and rejected by :func:`lua_type`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

__all__ = [
    "Table",
    "Function",
    "Channel",
    "State",
    "UserData",
    "is_number",
    "lua_type",
    "tostring",
]


def is_number(value: Any) -> bool:
    """``bool`` is an ``int`` subclass in Python but never a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def lua_type(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Table):
        return "table"
    if isinstance(value, Function):
        return "function"
    if isinstance(value, Channel):
        return "channel"
    if isinstance(value, State):
        return "thread"
    if isinstance(value, UserData):
        return "userdata"
    raise TypeError(f"{type(value).__name__} is not a script value")


def _format_number(n) -> str:
    if isinstance(n, int):
        return str(n)
    if math.isfinite(n) and n.is_integer() and abs(n) < 2**63:
        return str(int(n))
    if math.isnan(n):
        return "nan"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    return "%.14g" % n


def tostring(value: Any) -> str:
    """Render *value* the way the runtime's ``tostring`` does."""
    kind = lua_type(value)
    if kind == "nil":
        return "nil"
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "number":
        return _format_number(value)
    if kind == "string":
        return value
    return f"{kind}: 0x{id(value):08x}"


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------
_Slot = Tuple[str, Any]


def _slot(key: Any) -> _Slot:
    """Hashable slot for *key*; keeps ``True`` and ``1`` apart."""
    if key is None:
        raise KeyError("table index is nil")
    if isinstance(key, bool):
        return ("b", key)
    if is_number(key):
        if isinstance(key, float):
            if math.isnan(key):
                raise KeyError("table index is NaN")
            if key.is_integer():
                return ("n", int(key))
        return ("n", key)
    if isinstance(key, str):
        return ("s", key)
    lua_type(key)  # rejects foreign objects
    return ("r", id(key))


def _normalize_key(key: Any) -> Any:
    if isinstance(key, float) and key.is_integer():
        return int(key)
    return key


class Table:
    """Mutable key/value container compared by identity.

    Iteration follows the order in which keys were first assigned; this is
    the order the encoder sees.
    """

    __slots__ = ("_entries", "__weakref__")

    def __init__(self, *items: Any, **fields: Any):
        # slot -> (key, value); reference keys are kept alive by the entry
        self._entries: Dict[_Slot, Tuple[Any, Any]] = {}
        for item in items:
            self.append(item)
        for k, v in fields.items():
            self[k] = v

    # ── access ─────────────────────────────────────────────
    def __getitem__(self, key: Any) -> Any:
        if key is None:
            return None
        try:
            slot = _slot(key)
        except KeyError:
            return None
        entry = self._entries.get(slot)
        return None if entry is None else entry[1]

    def __setitem__(self, key: Any, value: Any) -> None:
        slot = _slot(key)
        if value is None:
            self._entries.pop(slot, None)
            return
        lua_type(value)
        entry = self._entries.get(slot)
        if entry is None:
            self._entries[slot] = (_normalize_key(key), value)
        else:
            self._entries[slot] = (entry[0], value)

    def __delitem__(self, key: Any) -> None:
        self[key] = None

    def __contains__(self, key: Any) -> bool:
        return self[key] is not None

    def get(self, key: Any, default: Any = None) -> Any:
        value = self[key]
        return default if value is None else value

    # ── sequence part ──────────────────────────────────────
    def length(self) -> int:
        """Border of the array part (the runtime's ``#`` operator)."""
        n = 0
        while ("n", n + 1) in self._entries:
            n += 1
        return n

    def append(self, value: Any) -> None:
        self[self.length() + 1] = value

    def ipairs(self) -> Iterator[Tuple[int, Any]]:
        i = 1
        while True:
            entry = self._entries.get(("n", i))
            if entry is None:
                return
            yield i, entry[1]
            i += 1

    # ── traversal ──────────────────────────────────────────
    def pairs(self) -> Iterator[Tuple[Any, Any]]:
        # snapshot so callers may assign while walking
        return iter(list(self._entries.values()))

    def keys(self):
        return [k for k, _ in self._entries.values()]

    def values(self):
        return [v for _, v in self._entries.values()]

    def __iter__(self):
        return iter(self.keys())

    def __len__(self) -> int:
        """Number of entries, not the border; see :meth:`length`."""
        return len(self._entries)

    def __bool__(self) -> bool:
        # an empty table is still a truthy script value
        return True

    def __repr__(self) -> str:
        return f"<Table 0x{id(self):08x} entries={len(self._entries)}>"


# ---------------------------------------------------------------------------
# Reference kinds that never cross into JSON
# ---------------------------------------------------------------------------
@dataclass(eq=False)
class Function:
    """Callable script value backed by a Python function."""
    fn: Callable[..., Any]
    name: str = "?"

    def __call__(self, *args: Any) -> Any:
        return self.fn(*args)


@dataclass(eq=False)
class Channel:
    capacity: int = 0


@dataclass(eq=False)
class UserData:
    value: Any = None
    metatable: Optional[Table] = None


@dataclass(eq=False)
class State:
    """Interpreter handle; also owns the module loader registry."""
    preload: Dict[str, Callable[["State"], Any]] = field(default_factory=dict)
    loaded: Dict[str, Any] = field(default_factory=dict)

    def require(self, name: str) -> Any:
        if name in self.loaded:
            return self.loaded[name]
        try:
            loader = self.preload[name]
        except KeyError:
            raise ModuleNotFoundError(f"module '{name}' not found") from None
        module = loader(self)
        self.loaded[name] = True if module is None else module
        return self.loaded[name]
