"""Evaluation errors.

Arithmetic anomalies (division by zero, overflow, NaN) are not errors here:
they follow IEEE-754 and propagate through the result.
"""

from typing import Optional


class EvaluationError(Exception):
  """Base class for evaluation errors."""
  pass


class UnknownNameError(EvaluationError, LookupError):
  """A name has no entry in the relevant Environment table."""

  kind = "name"

  def __init__(self, name: str):
    super().__init__(f"Unknown {self.kind} '{name}'")
    self.name = name


class UnknownVariableError(UnknownNameError):
  """Reference to a variable missing from the variable table."""

  kind = "variable"


class UnknownFunctionError(UnknownNameError):
  """Call to a function missing from the function table."""

  kind = "function"


class ArityMismatchError(EvaluationError, TypeError):
  """A callable received an argument list it cannot accept."""

  def __init__(self, function_name: str, expected, received: int):
    super().__init__(
      f"Function '{function_name}' expects {expected} argument(s), got {received}"
    )
    self.function_name = function_name
    self.expected = expected
    self.received = received


class ExpressionDepthError(EvaluationError, RecursionError):
  """Expression nesting exceeds the configured max_depth."""

  def __init__(self, max_depth: int, message: Optional[str] = None):
    super().__init__(message or f"Expression depth exceeds limit of {max_depth}")
    self.max_depth = max_depth


class UnsupportedNodeError(EvaluationError, TypeError):
  """Object in the tree is not a known node type."""

  def __init__(self, node):
    super().__init__(f"Cannot evaluate object of type {type(node).__name__}")
    self.node = node
