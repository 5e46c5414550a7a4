import math

import pytest

from formula_evaluator import (
  Environment, Callable, ExponentialFunction, UnaryFunction, PowerFunction, IfPositive,
  PythonFunction, default_functions, evaluate, evaluate_argument,
  ValueNode, VariableNode, AddNode, DivideNode, FunctionNode,
  UnknownVariableError, UnknownFunctionError, ArityMismatchError
)


class CountingCallable(Callable):
  """Evaluates its single argument twice and counts invocations"""

  name = 'twice'

  def __init__(self):
    self.calls = 0

  def compute(self, arguments, environment):
    self.calls += 1
    self.check_arity(arguments, 1)
    return evaluate_argument(arguments[0], environment) + evaluate_argument(arguments[0], environment)


class ConstantCallable(Callable):
  """Ignores its arguments entirely"""

  name = 'seven'

  def compute(self, arguments, environment):
    return 7.0


def test_lookup_variable_and_function():
  exp = ExponentialFunction()
  environment = Environment({"x": 2}, {"exp": exp})
  assert environment.lookup_variable("x") == 2.0
  assert isinstance(environment.lookup_variable("x"), float)
  assert environment.lookup_function("exp") is exp


def test_lookup_errors_are_distinct():
  environment = Environment()
  with pytest.raises(UnknownVariableError) as var_err:
    environment.lookup_variable("a")
  with pytest.raises(UnknownFunctionError) as fn_err:
    environment.lookup_function("a")
  assert var_err.value.name == fn_err.value.name == "a"
  assert not isinstance(var_err.value, UnknownFunctionError)
  assert isinstance(fn_err.value, LookupError)
  assert "variable" in str(var_err.value)
  assert "function" in str(fn_err.value)


def test_environment_copies_its_inputs():
  variables = {"x": 1.0}
  environment = Environment(variables)
  variables["x"] = 5.0
  variables["y"] = 2.0
  assert environment.lookup_variable("x") == 1.0
  assert not environment.has_variable("y")


def test_with_variables_returns_new_environment():
  base = Environment.with_defaults({"x": 1.0})
  extended = base.with_variables({"y": 2.0}, x=3.0)
  assert base.lookup_variable("x") == 1.0
  assert not base.has_variable("y")
  assert extended.lookup_variable("x") == 3.0
  assert extended.lookup_variable("y") == 2.0
  assert extended.lookup_function("exp") is base.lookup_function("exp")


def test_with_functions():
  base = Environment({"x": 1.0})
  extended = base.with_functions({"seven": ConstantCallable()})
  assert not base.has_function("seven")
  assert extended.function_names == ("seven",)
  assert extended.variable_names == ("x",)


def test_non_callable_rejected():
  with pytest.raises(TypeError):
    Environment(functions={"exp": math.exp})


def test_callable_shared_across_environments():
  twice = CountingCallable()
  tree = FunctionNode("twice", [VariableNode("x")])
  first = Environment({"x": 1.0}, {"twice": twice})
  second = Environment({"x": 10.0}, {"twice": twice})
  assert evaluate(tree, first) == 2.0
  assert evaluate(tree, second) == 20.0
  assert twice.calls == 2


def test_callable_receives_unevaluated_arguments():
  # the argument references an unbound variable but is never evaluated
  tree = FunctionNode("seven", [VariableNode("unbound"), FunctionNode("missing")])
  assert evaluate(tree, Environment(functions={"seven": ConstantCallable()})) == 7.0


def test_exp_arity():
  environment = Environment.with_defaults()
  with pytest.raises(ArityMismatchError) as exc_info:
    evaluate(FunctionNode("exp", []), environment)
  assert exc_info.value.function_name == "exp"
  assert exc_info.value.expected == 1
  assert exc_info.value.received == 0
  with pytest.raises(ArityMismatchError):
    evaluate(FunctionNode("exp", [ValueNode(1.0), ValueNode(2.0)]), environment)


def test_exp_overflow_is_infinite():
  assert evaluate(FunctionNode("exp", [ValueNode(1000.0)]), Environment.with_defaults()) == float('inf')


@pytest.mark.parametrize("name, arg, expected", [
  ("sin", 0.0, 0.0),
  ("cos", 0.0, 1.0),
  ("tan", 0.0, 0.0),
  ("log", math.e, 1.0),
  ("sqrt", 9.0, 3.0),
  ("abs", -2.5, 2.5),
  ("neg", 4.0, -4.0),
  ("sinh", 0.0, 0.0),
  ("cosh", 0.0, 1.0),
  ("tanh", 0.0, 0.0),
])
def test_default_unary_functions(name, arg, expected):
  result = evaluate(FunctionNode(name, [ValueNode(arg)]), Environment.with_defaults())
  assert result == pytest.approx(expected)


def test_unary_functions_follow_ieee():
  environment = Environment.with_defaults()
  assert evaluate(FunctionNode("log", [ValueNode(0.0)]), environment) == float('-inf')
  assert math.isnan(evaluate(FunctionNode("sqrt", [ValueNode(-1.0)]), environment))


def test_pow():
  environment = Environment.with_defaults()
  assert evaluate(FunctionNode("pow", [ValueNode(2.0), ValueNode(10.0)]), environment) == 1024.0
  with pytest.raises(ArityMismatchError):
    evaluate(FunctionNode("pow", [ValueNode(2.0)]), environment)


def test_if_positive_only_evaluates_selected_branch():
  environment = Environment.with_defaults({"x": 2.0})
  tree = FunctionNode("if_positive", [
    VariableNode("x"),
    DivideNode(ValueNode(1.0), VariableNode("x")),
    VariableNode("unbound"),
  ])
  assert evaluate(tree, environment) == 0.5
  with pytest.raises(UnknownVariableError):
    evaluate(tree, environment.with_variables(x=-1.0))


def test_python_function_adapter():
  hypot = PythonFunction("hypot", math.hypot, arity=2)
  environment = Environment({"a": 3.0}, {"hypot": hypot})
  assert evaluate(FunctionNode("hypot", [VariableNode("a"), ValueNode(4.0)]), environment) == 5.0
  with pytest.raises(ArityMismatchError):
    evaluate(FunctionNode("hypot", [ValueNode(1.0)]), environment)


def test_python_function_variadic():
  total = PythonFunction("sum", lambda *values: sum(values))
  environment = Environment(functions={"sum": total})
  tree = FunctionNode("sum", [ValueNode(1.0), ValueNode(2.0), AddNode(ValueNode(3.0), ValueNode(4.0))])
  assert evaluate(tree, environment) == 10.0
  assert evaluate(FunctionNode("sum"), environment) == 0.0


def test_default_functions_is_fresh_each_call():
  first = default_functions()
  second = default_functions()
  assert set(first) == {"exp", "sin", "cos", "tan", "log", "sqrt", "abs", "neg",
                        "sinh", "cosh", "tanh", "pow", "if_positive"}
  first.pop("exp")
  assert "exp" in second
  assert isinstance(second["exp"], UnaryFunction)
  assert isinstance(second["pow"], PowerFunction)
  assert isinstance(second["if_positive"], IfPositive)


def test_evaluate_argument_outside_evaluation():
  assert evaluate_argument(AddNode(ValueNode(1.0), ValueNode(1.0)), Environment()) == 2.0
