import math

import pytest

from formula_evaluator import (
  Expression, Environment, ValueNode, VariableNode, AddNode, SubtractNode, MultiplyNode,
  DivideNode, FunctionNode, PersistenceError,
  dump_expression, load_expression, save_expression, read_expression
)
from formula_evaluator.persistence import expression_to_data, expression_from_data


def test_dump_format():
  assert dump_expression(ValueNode(1.0)) == "Value: 1.0\n"
  assert dump_expression(AddNode(ValueNode(1.0), ValueNode(2.0))) == "Add:\n- Value: 1.0\n- Value: 2.0\n"


def test_data_form():
  tree = FunctionNode("exp", [SubtractNode(VariableNode("x"), ValueNode(1.0))])
  assert expression_to_data(tree) == {
    'Function': ['exp', [{'Subtract': [{'Variable': 'x'}, {'Value': 1.0}]}]]
  }


def test_round_trip_preserves_tree_and_result():
  tree = MultiplyNode(
    AddNode(ValueNode(1.0), VariableNode("x")),
    DivideNode(FunctionNode("pow", [VariableNode("x"), ValueNode(2.0)]), FunctionNode("rand")),
  )
  loaded = load_expression(dump_expression(Expression(tree)))
  assert isinstance(loaded, Expression)
  assert loaded.root == tree


def test_round_trip_special_floats():
  for value in (float('inf'), float('-inf')):
    assert load_expression(dump_expression(ValueNode(value))).root.value == value
  assert math.isnan(load_expression(dump_expression(ValueNode(float('nan')))).root.value)


def test_loaded_tree_evaluates():
  text = "Multiply:\n- Add:\n  - Value: 1.0\n  - Value: 2.0\n- Value: 2.0\n"
  assert load_expression(text).evaluate(Environment()) == 6.0


def test_integer_values_accepted():
  assert expression_from_data({'Value': 3}) == ValueNode(3.0)


@pytest.mark.parametrize("text", [
  "Bogus: 1",
  "Value: true",
  "Value: one",
  "Variable: 3",
  "Add:\n- Value: 1.0\n",
  "Function: [exp]",
  "Function: [3, []]",
  "Function: [exp, {Value: 1.0}]",
  "- Value: 1.0",
  "{Value: 1.0, Variable: x}",
  "Add: [{Value: [1.0, 2.0]}, {Value: 1.0}]",
  "Value: [unclosed",
])
def test_malformed_documents(text):
  with pytest.raises(PersistenceError):
    load_expression(text)


def test_persistence_error_is_value_error():
  assert issubclass(PersistenceError, ValueError)


def test_save_and_read(tmp_path):
  tree = Expression(FunctionNode("exp", [VariableNode("t")]))
  path = save_expression(tree, tmp_path / "formula.yaml")
  assert path.exists()
  assert read_expression(path) == tree


def test_oversized_integer_value():
  with pytest.raises(PersistenceError):
    expression_from_data({'Value': 10**400})
  with pytest.raises(PersistenceError):
    load_expression("Value: 1" + "0" * 400)


def test_exponent_without_dot():
  assert load_expression("Value: 1e5").root == ValueNode(100000.0)
  assert load_expression("Value: 1.0e+5").root == ValueNode(100000.0)
  assert expression_from_data({'Value': '-2.5E-3'}) == ValueNode(-0.0025)
