"""
Decoder ↔ Encoder end-to-end round-trip.

• JSON → decode() → table
• table → encode() → JSON'
• JSON' must equal JSON, up to nil removal and {} → []
"""
from concurrent.futures import ThreadPoolExecutor

import orjson
from hypothesis import given, settings, strategies as st

from scriptjson import decode, encode
from scriptjson.models import Table

json_values = st.recursive(
    st.none()
    | st.booleans()
    | st.integers(min_value=-(2**53), max_value=2**53)
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(max_size=10),
    lambda children: st.lists(children, max_size=5)
    | st.dictionaries(st.text(max_size=5), children, max_size=5),
    max_leaves=20,
)


def _normalize(v):
    if isinstance(v, list):
        return [_normalize(x) for x in v if x is not None]
    if isinstance(v, dict):
        d = {k: _normalize(x) for k, x in v.items() if x is not None}
        return d if d else []
    return v


@settings(max_examples=200, deadline=None)
@given(json_values)
def test_roundtrip_property(doc):
    value, err = decode(orjson.dumps(doc))
    assert err is None
    text, err = encode(value)
    assert err is None
    assert orjson.loads(text) == _normalize(doc)


def test_roundtrip_sample():
    original = {
        "car": {
            "wheels": [{"tire": "summer", "size": 18}] * 4,
            "doors": 4,
            "meta": {"vin": "XYZ123", "price": 12.5},
        }
    }
    value, _ = decode(orjson.dumps(original))
    text, _ = encode(value)
    assert orjson.loads(text) == original


def test_empty_object_comes_back_as_array():
    value, _ = decode("{}")
    assert encode(value) == ("[]", None)


def test_concurrent_encodes_share_nothing():
    shared = Table("x", "y")
    t = Table(shared, shared, Table(a=shared))
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: encode(t), range(64)))
    assert all(r == results[0] for r in results)
    assert results[0][1] is None
