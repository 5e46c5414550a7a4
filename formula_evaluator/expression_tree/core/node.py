from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple
from .operators import NodeType, OpType, BINARY_OP_MAP


class Node(ABC):
  """Base node class. Nodes are immutable once constructed."""

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)
    object.__setattr__(self, '_size_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  def size(self) -> int:
    """Node count of the subtree rooted here"""
    if self._size_cache is None:
      object.__setattr__(self, '_size_cache', 1 + sum(child.size() for child in self.children()))
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', self._compute_hash())
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __eq__(self, other) -> bool:
    if type(self) is not type(other):
      return NotImplemented
    return self._key() == other._key()

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class ValueNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    object.__setattr__(self, 'value', float(value))

  def to_string(self) -> str:
    return repr(self.value)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _key(self) -> tuple:
    # repr keeps nan == nan for structural comparison
    return (NodeType.VALUE, repr(self.value))

  def _compute_hash(self) -> int:
    return hash(self._key())


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    object.__setattr__(self, 'name', name)

  def to_string(self) -> str:
    return self.name

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _key(self) -> tuple:
    return (NodeType.VARIABLE, self.name)

  def _compute_hash(self) -> int:
    return hash(self._key())


class BinaryOpNode(Node):
  """Binary arithmetic node. Concrete subclasses fix the operator."""

  __slots__ = ('left', 'right')

  operator: str = ''

  def __init__(self, left: Node, right: Node):
    super().__init__()
    object.__setattr__(self, 'left', left)
    object.__setattr__(self, 'right', right)

  @property
  def op_type(self) -> OpType:
    return BINARY_OP_MAP[self.operator]

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def _key(self) -> tuple:
    return (NodeType.BINARY_OP, self.operator, self.left, self.right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))


class AddNode(BinaryOpNode):
  __slots__ = ()
  operator = '+'


class SubtractNode(BinaryOpNode):
  __slots__ = ()
  operator = '-'


class MultiplyNode(BinaryOpNode):
  __slots__ = ()
  operator = '*'


class DivideNode(BinaryOpNode):
  __slots__ = ()
  operator = '/'

  def __init__(self, numerator: Node, denominator: Node):
    super().__init__(numerator, denominator)

  @property
  def numerator(self) -> Node:
    return self.left

  @property
  def denominator(self) -> Node:
    return self.right


class FunctionNode(Node):
  """Named call; arguments are handed to the callable unevaluated."""

  __slots__ = ('name', 'arguments')

  def __init__(self, name: str, arguments: Optional[Iterable[Node]] = None):
    super().__init__()
    object.__setattr__(self, 'name', name)
    object.__setattr__(self, 'arguments', tuple(arguments) if arguments is not None else ())

  def to_string(self) -> str:
    args = ", ".join(argument.to_string() for argument in self.arguments)
    return f"{self.name}({args})"

  def children(self) -> Tuple[Node, ...]:
    return self.arguments

  def _key(self) -> tuple:
    return (NodeType.FUNCTION, self.name, self.arguments)

  def _compute_hash(self) -> int:
    return hash((NodeType.FUNCTION, self.name, tuple(hash(a) for a in self.arguments)))

