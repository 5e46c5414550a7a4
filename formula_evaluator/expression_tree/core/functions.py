"""
Callable capability and the built-in function registry.

A Callable receives the unevaluated argument nodes of a FunctionNode plus the
Environment in effect, and decides for itself which arguments to evaluate,
in what order, and how many times. Arity checking is the callable's job.
"""

from abc import ABC, abstractmethod
from typing import Callable as PyCallable, Dict, Optional, Sequence, Tuple, TYPE_CHECKING
from .operators import OpType, UNARY_OP_MAP, apply_unary_op, apply_binary_op
from ..errors import ArityMismatchError

if TYPE_CHECKING:
  from .node import Node
  from .environment import Environment


def evaluate_argument(argument: 'Node', environment: 'Environment') -> float:
  # Import here to avoid circular imports
  from ..evaluator import evaluate_argument as _evaluate_argument
  return _evaluate_argument(argument, environment)


class Callable(ABC):
  """Pluggable numeric function bound by name in an Environment"""

  name: str = ''

  @abstractmethod
  def compute(self, arguments: Sequence['Node'], environment: 'Environment') -> float:
    pass

  def check_arity(self, arguments: Sequence['Node'], expected: int):
    if len(arguments) != expected:
      raise ArityMismatchError(self.name, expected, len(arguments))

  def __repr__(self) -> str:
    return f"<{type(self).__name__} '{self.name}'>"


class UnaryFunction(Callable):
  """Strict one-argument function backed by a unary operator kernel"""

  def __init__(self, name: str, op_type: Optional[OpType] = None):
    self.name = name
    self.op_type = op_type if op_type is not None else UNARY_OP_MAP[name]

  def compute(self, arguments, environment) -> float:
    self.check_arity(arguments, 1)
    return apply_unary_op(evaluate_argument(arguments[0], environment), self.op_type)


class ExponentialFunction(UnaryFunction):
  """e**x of its single argument"""

  def __init__(self, name: str = 'exp'):
    super().__init__(name, OpType.EXP)


class PowerFunction(Callable):
  """pow(base, exponent)"""

  def __init__(self, name: str = 'pow'):
    self.name = name

  def compute(self, arguments, environment) -> float:
    self.check_arity(arguments, 2)
    base = evaluate_argument(arguments[0], environment)
    exponent = evaluate_argument(arguments[1], environment)
    return apply_binary_op(base, exponent, OpType.POW)


class IfPositive(Callable):
  """
  if_positive(condition, then, otherwise)

  Evaluates the condition, then only the selected branch. The other branch
  is never evaluated, so it may reference unbound names.
  """

  def __init__(self, name: str = 'if_positive'):
    self.name = name

  def compute(self, arguments, environment) -> float:
    self.check_arity(arguments, 3)
    condition = evaluate_argument(arguments[0], environment)
    branch = arguments[1] if condition > 0.0 else arguments[2]
    return evaluate_argument(branch, environment)


class PythonFunction(Callable):
  """Adapts a plain Python function; arguments are evaluated left to right"""

  def __init__(self, name: str, func: PyCallable[..., float], arity: Optional[int] = None):
    self.name = name
    self.func = func
    self.arity = arity

  def compute(self, arguments, environment) -> float:
    if self.arity is not None:
      self.check_arity(arguments, self.arity)
    values = [evaluate_argument(argument, environment) for argument in arguments]
    return float(self.func(*values))


# Unary functions registered by default, in addition to exp
DEFAULT_UNARY_FUNCTIONS: Tuple[str, ...] = (
  'sin', 'cos', 'tan', 'log', 'sqrt', 'abs', 'neg', 'sinh', 'cosh', 'tanh'
)


def default_functions() -> Dict[str, Callable]:
  """Fresh name -> Callable table of the built-in functions"""
  functions: Dict[str, Callable] = {'exp': ExponentialFunction()}
  for name in DEFAULT_UNARY_FUNCTIONS:
    functions[name] = UnaryFunction(name)
  functions['pow'] = PowerFunction()
  functions['if_positive'] = IfPositive()
  return functions
