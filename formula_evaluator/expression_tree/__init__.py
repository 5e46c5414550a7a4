"""Expression Tree Module

Expression data model, environment, callables and the evaluator.
"""

from .expression import Expression
from .core.node import (
    Node,
    ValueNode,
    VariableNode,
    BinaryOpNode,
    AddNode,
    SubtractNode,
    MultiplyNode,
    DivideNode,
    FunctionNode
)
from .core.operators import NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP
from .core.environment import Environment
from .core.functions import (
    Callable,
    UnaryFunction,
    ExponentialFunction,
    PowerFunction,
    IfPositive,
    PythonFunction,
    default_functions
)
from .evaluator import Evaluator, evaluate, evaluate_argument
from .errors import (
    EvaluationError,
    UnknownNameError,
    UnknownVariableError,
    UnknownFunctionError,
    ArityMismatchError,
    ExpressionDepthError,
    UnsupportedNodeError
)
from .utils import ExpressionValidator, to_sympy

__all__ = [
    "Expression",
    "Node", "ValueNode", "VariableNode", "BinaryOpNode",
    "AddNode", "SubtractNode", "MultiplyNode", "DivideNode", "FunctionNode",
    "NodeType", "OpType", "BINARY_OP_MAP", "UNARY_OP_MAP",
    "Environment",
    "Callable", "UnaryFunction", "ExponentialFunction", "PowerFunction", "IfPositive",
    "PythonFunction", "default_functions",
    "Evaluator", "evaluate", "evaluate_argument",
    "EvaluationError", "UnknownNameError", "UnknownVariableError", "UnknownFunctionError",
    "ArityMismatchError", "ExpressionDepthError", "UnsupportedNodeError",
    "ExpressionValidator", "to_sympy"
]
