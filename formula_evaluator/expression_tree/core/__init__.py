"""Core expression tree components."""

from .node import (
    Node, ValueNode, VariableNode, BinaryOpNode,
    AddNode, SubtractNode, MultiplyNode, DivideNode, FunctionNode
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP,
    evaluate_binary_op, evaluate_unary_op, apply_binary_op, apply_unary_op
)
from .environment import Environment
from .functions import (
    Callable, UnaryFunction, ExponentialFunction, PowerFunction, IfPositive,
    PythonFunction, default_functions, evaluate_argument
)

__all__ = [
    'Node', 'ValueNode', 'VariableNode', 'BinaryOpNode',
    'AddNode', 'SubtractNode', 'MultiplyNode', 'DivideNode', 'FunctionNode',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP',
    'evaluate_binary_op', 'evaluate_unary_op', 'apply_binary_op', 'apply_unary_op',
    'Environment',
    'Callable', 'UnaryFunction', 'ExponentialFunction', 'PowerFunction', 'IfPositive',
    'PythonFunction', 'default_functions', 'evaluate_argument'
]
