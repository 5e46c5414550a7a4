"""Formula Evaluator Package

Immutable arithmetic expression trees reduced to a float against an
environment of variable bindings and pluggable named functions.
"""

from .expression_tree import (
  Expression, Node, ValueNode, VariableNode, BinaryOpNode,
  AddNode, SubtractNode, MultiplyNode, DivideNode, FunctionNode,
  Environment, Callable, UnaryFunction, ExponentialFunction, PowerFunction,
  IfPositive, PythonFunction, default_functions,
  Evaluator, evaluate, evaluate_argument,
  EvaluationError, UnknownNameError, UnknownVariableError, UnknownFunctionError,
  ArityMismatchError, ExpressionDepthError, UnsupportedNodeError,
  ExpressionValidator, to_sympy
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging
from .persistence import (
  PersistenceError, dump_expression, load_expression, save_expression, read_expression
)

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "ValueNode", "VariableNode", "BinaryOpNode",
  "AddNode", "SubtractNode", "MultiplyNode", "DivideNode", "FunctionNode",
  "Environment", "Callable", "UnaryFunction", "ExponentialFunction", "PowerFunction",
  "IfPositive", "PythonFunction", "default_functions",
  "Evaluator", "evaluate", "evaluate_argument",
  "EvaluationError", "UnknownNameError", "UnknownVariableError", "UnknownFunctionError",
  "ArityMismatchError", "ExpressionDepthError", "UnsupportedNodeError",
  "ExpressionValidator", "to_sympy",
  "LogLevel", "get_logger", "set_log_level", "configure_logging",
  "PersistenceError", "dump_expression", "load_expression", "save_expression", "read_expression"
]
