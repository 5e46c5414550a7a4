from typing import Optional, Set, TYPE_CHECKING
import sympy as sp
from .core.node import Node
from .utils.tree_utils import calculate_tree_depth, get_variables, get_function_names

if TYPE_CHECKING:
  from .core.environment import Environment


class Expression:
  """Immutable formula wrapping a root node"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    object.__setattr__(self, 'root', root)
    object.__setattr__(self, '_string_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError("Expression is immutable")

  def __delattr__(self, name):
    raise AttributeError("Expression is immutable")

  def evaluate(self, environment: 'Environment', max_depth: Optional[int] = None) -> float:
    from .evaluator import evaluate
    return evaluate(self.root, environment, max_depth=max_depth)

  def to_string(self) -> str:
    if self._string_cache is None:
      object.__setattr__(self, '_string_cache', self.root.to_string())
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> Set[str]:
    return get_variables(self.root)

  def function_names(self) -> Set[str]:
    return get_function_names(self.root)

  def to_sympy(self) -> sp.Expr:
    from .utils.sympy_utils import to_sympy
    return to_sympy(self.root)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"
