"""Thin adapter over orjson, the trusted JSON primitive."""
import json
import orjson

JSONDecodeError = orjson.JSONDecodeError
JSONEncodeError = orjson.JSONEncodeError


def loads(text):
    return orjson.loads(text)


def dumps(o, *, sort_keys: bool = False, indent: bool = False) -> str:
    option = 0
    if sort_keys:
        option |= orjson.OPT_SORT_KEYS
    if indent:
        option |= orjson.OPT_INDENT_2
    try:
        return orjson.dumps(o, option=option).decode()
    except orjson.JSONEncodeError as e:
        # orjson stops at 254 levels; stdlib json has no fixed depth limit
        if "Recursion limit" not in str(e):
            raise
    return json.dumps(
        o,
        ensure_ascii=False,
        separators=(",", ": ") if indent else (",", ":"),
        sort_keys=sort_keys,
        indent=2 if indent else None,
    )
