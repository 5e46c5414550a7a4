import math

from formula_evaluator import (
  Expression, Environment, Callable, PythonFunction, evaluate_argument,
  ValueNode, VariableNode, AddNode, MultiplyNode, DivideNode, FunctionNode,
  UnknownVariableError, dump_expression, load_expression
)
from formula_evaluator.logging_system import LogLevel, configure_logging


class Clamp(Callable):
  """clamp(value, low, high) - the upper bound is only evaluated when needed"""

  name = 'clamp'

  def compute(self, arguments, environment):
    self.check_arity(arguments, 3)
    value = evaluate_argument(arguments[0], environment)
    low = evaluate_argument(arguments[1], environment)
    if value < low:
      return low
    high = evaluate_argument(arguments[2], environment)
    return min(value, high)


def build_decay_formula() -> Expression:
  """N0 * exp(-t / tau), clamped to [0, cap]"""
  decay = MultiplyNode(
    VariableNode("N0"),
    FunctionNode("exp", [DivideNode(MultiplyNode(ValueNode(-1.0), VariableNode("t")), VariableNode("tau"))]),
  )
  return Expression(FunctionNode("clamp", [decay, ValueNode(0.0), VariableNode("cap")]))


def main():
  configure_logging(LogLevel.DETAILED)

  formula = build_decay_formula()
  print(f"Formula: {formula}")
  print(f"Variables: {sorted(formula.variables())}, functions: {sorted(formula.function_names())}")

  base = Environment.with_defaults({"N0": 100.0, "tau": 2.0, "cap": 80.0})
  base = base.with_functions({"clamp": Clamp(), "hypot": PythonFunction("hypot", math.hypot, arity=2)})

  for t in (0.0, 1.0, 2.0, 5.0):
    print(f"t={t:4.1f}  N={formula.evaluate(base.with_variables(t=t)):.4f}")

  # zero time constant: -1/0 -> -inf, exp(-inf) -> 0.0
  print(f"tau=0: {formula.evaluate(base.with_variables(t=1.0, tau=0.0))}")

  try:
    formula.evaluate(base)
  except UnknownVariableError as e:
    print(f"Missing binding: {e.name}")

  text = dump_expression(formula)
  print("Persisted form:")
  print(text)
  restored = load_expression(text)
  print(f"Round trip equal: {restored == formula}")

  distance = Expression(AddNode(FunctionNode("hypot", [ValueNode(3.0), ValueNode(4.0)]), ValueNode(1.0)))
  print(f"{distance} = {distance.evaluate(base)}")


if __name__ == "__main__":
  main()
