import pytest
from pydantic import ValidationError

from contracts import AlgExprAdapter, Add, Div, Int, Neg, Var


def test_int_rejects_negative_value():
    with pytest.raises(ValidationError):
        Int(value=-1)


def test_nodes_are_immutable():
    node = Int(value=1)

    with pytest.raises(ValidationError):
        node.value = 2


def test_nodes_compare_and_hash_by_structure():
    a = Add(arg1=Int(value=1), arg2=Var(name="x"))
    b = Add(arg1=Int(value=1), arg2=Var(name="x"))

    assert a == b
    assert len({a, b}) == 1
    assert a != Add(arg1=Var(name="x"), arg2=Int(value=1))


def test_variable_equality_is_case_sensitive():
    assert Var(name="x") != Var(name="X")


def test_tree_json_round_trip_uses_node_type_discriminator():
    tree = Div(arg1=Neg(arg=Var(name="x")), arg2=Int(value=3))

    payload = tree.model_dump()

    assert payload == {
        "node_type": "div",
        "arg1": {"node_type": "neg", "arg": {"node_type": "var", "name": "x"}},
        "arg2": {"node_type": "int", "value": 3},
    }
    assert AlgExprAdapter.validate_python(payload) == tree
    assert AlgExprAdapter.validate_json(tree.model_dump_json()) == tree


def test_unknown_node_type_is_rejected():
    with pytest.raises(ValidationError):
        AlgExprAdapter.validate_python({"node_type": "pow", "arg1": 1, "arg2": 2})
