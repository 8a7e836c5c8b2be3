import pytest

from arbordesk.location import (
    Definition,
    IExprDefinition,
    LocsetDefinition,
    RegionDefinition,
    Symbol,
)
from arbordesk.utils import DefState


def _all_kinds(name, text):
    return [
        IExprDefinition(name, text),
        LocsetDefinition(name, text),
        RegionDefinition(name, text),
    ]


def test_kinds_are_definitions():
    for d in _all_kinds("n", "(all)"):
        assert isinstance(d, Definition)
        assert d.name == "n"
        assert d.definition == "(all)"


@pytest.mark.parametrize("text", ["", "   ", "\t\n", "\0junk"])
def test_blank_is_empty(text):
    for d in _all_kinds("lbl", text):
        assert d.state is DefState.EMPTY
        assert d.message == "Empty."
        assert d.data is None


def test_good_expression():
    for d in _all_kinds("soma", "  (tag 1)  "):
        assert d.state is DefState.GOOD
        assert d.message == "Ok."
        assert d.data == ("tag", 1)
        assert isinstance(d.data[0], Symbol)


def test_quoted_string_is_not_symbol():
    d = RegionDefinition("r", '"soma"')
    assert d.data == "soma"
    assert not isinstance(d.data, Symbol)


def test_nested_and_float_values():
    d = LocsetDefinition("l", "(distal-translate (join (tag 1) (tag 2)) 1.5)")
    assert d.state is DefState.GOOD
    assert d.data[1] == ("join", ("tag", 1), ("tag", 2))
    assert d.data[2] == 1.5


def test_negative_number_and_lone_minus():
    d = IExprDefinition("ie", "(scalar -2)")
    assert d.data == ("scalar", -2)
    assert IExprDefinition("ie", "(- 1)").data[0] == "-"


@pytest.mark.parametrize("text", ["(tag 1", ")", "(a) (b)", '"unterminated', "(tag (1)"])
def test_malformed_is_error(text):
    d = RegionDefinition("bad", text)
    assert d.state is DefState.ERROR
    assert d.data is None
    assert d.message not in ("", "Ok.", "Empty.")


def test_update_tracks_definition_changes():
    d = RegionDefinition("r", "(all)")
    assert d.state is DefState.GOOD
    d.definition = "(all"
    d.update()
    assert d.state is DefState.ERROR
    d.definition = ""
    d.update()
    assert d.state is DefState.EMPTY and d.message == "Empty."


def test_set_error():
    d = LocsetDefinition("l", "(root)")
    d.set_error("boom")
    assert d.state is DefState.ERROR
    assert d.message == "boom"
    assert d.data is None


def test_iexpr_info_defaults():
    d = IExprDefinition("ie", "(scalar 1)")
    assert d.info.min > d.info.max
    assert d.info.values == {}
    assert IExprDefinition().info is not d.info