# test_assignment.py

from smartcalc.assignment import assign
from smartcalc.status import Status
from smartcalc.variables import VariableTable


def test_literal_binding_and_overwrite():
    table = VariableTable()
    assert assign("a=5", table) == Status.OK
    assert table.get("a") == 5
    assert assign("a=-123456789012345678901234567890", table) == Status.OK
    assert table.get("a") == -123456789012345678901234567890


def test_copy_from_bound_variable(variables):
    assert assign("c=a", variables) == Status.OK
    assert variables.get("c") == 5
    # the copy is by value
    assign("a=9", variables)
    assert variables.get("c") == 5


def test_unbound_source_leaves_table_unchanged(variables):
    before = list(variables.items())
    assert assign("c=nope", variables) == Status.UNKNOWN_VAR
    assert "c" not in variables
    assert assign("a=nope", variables) == Status.UNKNOWN_VAR
    assert list(variables.items()) == before


def test_self_assignment_keeps_value(variables):
    assert assign("a=a", variables) == Status.OK
    assert variables.get("a") == 5


def test_table_lists_bindings_in_name_order():
    table = VariableTable({"b": 2, "a": -1})
    assert list(table.items()) == [("a", -1), ("b", 2)]
    assert repr(table) == "VariableTable(a=-1, b=2)"
    assert len(table) == 2 and "a" in table and "c" not in table
