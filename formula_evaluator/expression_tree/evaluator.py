"""
Recursive reduction of expression trees to a float.

Children are evaluated eagerly, left before right. Binary arithmetic follows
IEEE-754 double semantics, so division by zero yields +-inf or nan rather
than an error. Function arguments are never evaluated here: the resolved
Callable receives them as nodes.
"""

from contextvars import ContextVar
from typing import Optional, Tuple, Union, TYPE_CHECKING
from .core.node import Node, ValueNode, VariableNode, BinaryOpNode, FunctionNode
from .core.operators import apply_binary_op
from .errors import ExpressionDepthError, UnsupportedNodeError
from ..logging_system import LogLevel, get_logger, log_debug, log_failure

if TYPE_CHECKING:
  from .core.environment import Environment
  from .expression import Expression

# Evaluator and depth of the FunctionNode whose callable is running, so that
# arguments evaluated by the callable continue the same depth count.
_active_call: ContextVar[Optional[Tuple['Evaluator', int]]] = ContextVar('_active_call', default=None)


class Evaluator:
  """
  Evaluates trees against an Environment.

  Args:
      max_depth: Optional limit on tree depth reached during evaluation. The
          root is depth 1. None leaves depth bounded only by the interpreter's
          recursion limit.
  """

  def __init__(self, max_depth: Optional[int] = None):
    if max_depth is not None and max_depth < 1:
      raise ValueError(f"max_depth must be at least 1, got {max_depth}")
    self.max_depth = max_depth

  def evaluate(self, expression: Union['Expression', Node], environment: 'Environment') -> float:
    root = getattr(expression, 'root', expression)
    return self._evaluate(root, environment, 1)

  def _evaluate(self, node: Node, environment: 'Environment', depth: int) -> float:
    if self.max_depth is not None and depth > self.max_depth:
      log_failure(f"Depth limit {self.max_depth} exceeded at {type(node).__name__}")
      raise ExpressionDepthError(self.max_depth)

    if isinstance(node, ValueNode):
      return node.value

    elif isinstance(node, VariableNode):
      return environment.lookup_variable(node.name)

    elif isinstance(node, BinaryOpNode):
      left_val = self._evaluate(node.left, environment, depth + 1)
      right_val = self._evaluate(node.right, environment, depth + 1)
      return apply_binary_op(left_val, right_val, node.op_type)

    elif isinstance(node, FunctionNode):
      function = environment.lookup_function(node.name)
      if get_logger()._should_log(LogLevel.VERBOSE):
        log_debug(f"Calling {function!r} with {len(node.arguments)} argument(s)")
      token = _active_call.set((self, depth))
      try:
        return float(function.compute(node.arguments, environment))
      finally:
        _active_call.reset(token)

    log_failure(f"Unsupported node type {type(node).__name__}")
    raise UnsupportedNodeError(node)


def evaluate_argument(argument: Node, environment: 'Environment') -> float:
  """
  Evaluate a function argument from inside a Callable.

  The running evaluator and depth are held in a ContextVar. A callable that
  evaluates arguments on a thread it starts itself must run that work under
  contextvars.copy_context().run; otherwise the argument is evaluated by a
  fresh Evaluator without a depth limit.
  """
  active = _active_call.get()
  if active is None:
    return Evaluator()._evaluate(argument, environment, 1)
  evaluator, depth = active
  return evaluator._evaluate(argument, environment, depth + 1)


def evaluate(expression: Union['Expression', Node], environment: 'Environment',
             max_depth: Optional[int] = None) -> float:
  return Evaluator(max_depth=max_depth).evaluate(expression, environment)
