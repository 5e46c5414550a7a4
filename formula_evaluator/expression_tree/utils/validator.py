from typing import Dict, Set, TYPE_CHECKING
from ..core.node import Node, ValueNode, VariableNode, BinaryOpNode, FunctionNode
from .tree_utils import get_variables, get_function_names

if TYPE_CHECKING:
  from ..core.environment import Environment


class ExpressionValidator:
  """
  Static checks on trees. Evaluation never calls these; they let a caller
  find problems up front instead of at the first failing lookup.
  """

  @staticmethod
  def is_structurally_valid(node: Node) -> bool:
    """Every node is a known node type with well-typed fields"""
    stack = [node]
    while stack:
      current = stack.pop()
      if isinstance(current, ValueNode):
        continue
      elif isinstance(current, VariableNode):
        if not isinstance(current.name, str):
          return False
      elif isinstance(current, BinaryOpNode):
        if not (isinstance(current.left, Node) and isinstance(current.right, Node)):
          return False
      elif isinstance(current, FunctionNode):
        if not isinstance(current.name, str):
          return False
        if not all(isinstance(argument, Node) for argument in current.arguments):
          return False
      else:
        return False
      stack.extend(current.children())
    return True

  @staticmethod
  def find_unbound_names(node: Node, environment: 'Environment') -> Dict[str, Set[str]]:
    """
    Names referenced by the tree but missing from the environment.

    Lazy callables may never evaluate some of their arguments, so a name
    reported here does not always mean evaluation will fail.
    """
    return {
      'variables': {name for name in get_variables(node) if not environment.has_variable(name)},
      'functions': {name for name in get_function_names(node) if not environment.has_function(name)},
    }

  @staticmethod
  def is_sufficient(node: Node, environment: 'Environment') -> bool:
    unbound = ExpressionValidator.find_unbound_names(node, environment)
    return not unbound['variables'] and not unbound['functions']
