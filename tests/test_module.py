"""The ``json`` module registered in an interpreter state."""
import pytest

from scriptjson.models import Function, State, Table
from scriptjson.module import MODULE_NAME, api_encode, loader, preload


@pytest.fixture
def json_mod():
    st = State()
    preload(st)
    return st.require("json")


def test_preload_registers_json():
    st = State()
    preload(st)
    assert MODULE_NAME == "json"
    assert "json" in st.preload
    assert st.require("json") is st.require("json")


def test_module_table_shape(json_mod):
    assert isinstance(json_mod, Table)
    assert isinstance(json_mod["decode"], Function)
    assert isinstance(json_mod["encode"], Function)
    assert sorted(json_mod.keys()) == ["decode", "encode"]


def test_calls_through_module(json_mod):
    value, err = json_mod["decode"]('{"list":[1,2,3]}')
    assert err is None
    text, err = json_mod["encode"](value)
    assert err is None
    assert text == '{"list":[1,2,3]}'


def test_error_values_through_module(json_mod):
    assert json_mod["encode"](json_mod) == (None, "cannot encode function to JSON")
    value, err = json_mod["decode"]("{invalid")
    assert value is None and err


def test_loader_builds_fresh_tables():
    assert loader() is not loader()


def test_module_table_cannot_encode_itself():
    # the module table holds functions, not a cycle
    assert api_encode(loader())[1] == "cannot encode function to JSON"


def test_table_deeper_than_the_stack_is_an_error_value():
    t = Table()
    cur = t
    for _ in range(5000):
        nxt = Table()
        cur.append(nxt)
        cur = nxt
    text, err = api_encode(t)
    assert text is None
    assert err
