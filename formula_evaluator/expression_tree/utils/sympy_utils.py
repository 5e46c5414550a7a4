import sympy as sp
from typing import Dict

from ..core.node import Node, ValueNode, VariableNode, BinaryOpNode, FunctionNode

# Function names with a direct sympy counterpart; anything else becomes an
# undefined sympy Function of the same name.
SYMPY_FUNCTIONS: Dict[str, object] = {
  'exp': sp.exp,
  'sin': sp.sin,
  'cos': sp.cos,
  'tan': sp.tan,
  'log': sp.log,
  'sqrt': sp.sqrt,
  'abs': sp.Abs,
  'sinh': sp.sinh,
  'cosh': sp.cosh,
  'tanh': sp.tanh,
  'pow': sp.Pow,
}


def to_sympy(node: Node) -> sp.Expr:
  """
  Convert a tree to an unevaluated sympy expression for display (str, latex).
  No simplification is applied.
  """
  with sp.evaluate(False):
    return _to_sympy(node)


def _to_sympy(node: Node) -> sp.Expr:
  if isinstance(node, ValueNode):
    return sp.Float(node.value)
  elif isinstance(node, VariableNode):
    return sp.Symbol(node.name)
  elif isinstance(node, BinaryOpNode):
    left = _to_sympy(node.left)
    right = _to_sympy(node.right)
    if node.operator == '+':
      return sp.Add(left, right)
    elif node.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif node.operator == '*':
      return sp.Mul(left, right)
    elif node.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
  elif isinstance(node, FunctionNode):
    arguments = [_to_sympy(argument) for argument in node.arguments]
    if node.name == 'neg' and len(arguments) == 1:
      return sp.Mul(-1, arguments[0])
    expected = 2 if node.name == 'pow' else 1
    if node.name in SYMPY_FUNCTIONS and len(arguments) == expected:
      return SYMPY_FUNCTIONS[node.name](*arguments)
    return sp.Function(node.name)(*arguments)
  raise RuntimeWarning(f"to_sympy reached unexpected node {type(node).__name__}")


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the tree"""
  return sp.latex(to_sympy(node))
