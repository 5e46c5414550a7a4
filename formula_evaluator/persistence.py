"""
YAML persistence for expression trees.

Trees are written in an externally tagged form, one single-key mapping per
node:

    Multiply:
    - Add:
      - Value: 1.0
      - Value: 2.0
    - Value: 2.0

Functions are stored as ``Function: [name, [arguments...]]``. Loading
rebuilds ordinary immutable nodes; nothing is evaluated. Value payloads may
be numbers or strings that parse as floats, so hand-written exponents such
as ``1e5`` load too.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .expression_tree.core.node import (
    Node, ValueNode, VariableNode, BinaryOpNode, FunctionNode,
    AddNode, SubtractNode, MultiplyNode, DivideNode
)
from .expression_tree.expression import Expression
from .logging_system import log_debug

BINARY_TAGS = {
    'Add': AddNode,
    'Subtract': SubtractNode,
    'Multiply': MultiplyNode,
    'Divide': DivideNode,
}
_TAG_FOR_BINARY = {node_type: tag for tag, node_type in BINARY_TAGS.items()}


class PersistenceError(ValueError):
    """Document does not describe a well-formed expression tree."""
    pass


def expression_to_data(expression: Union[Expression, Node]) -> Dict[str, Any]:
    """Convert a tree to plain YAML-ready data"""
    node = expression.root if isinstance(expression, Expression) else expression
    if isinstance(node, ValueNode):
        return {'Value': node.value}
    elif isinstance(node, VariableNode):
        return {'Variable': node.name}
    elif isinstance(node, BinaryOpNode):
        tag = _TAG_FOR_BINARY.get(type(node))
        if tag is None:
            raise PersistenceError(f"No tag for binary node type {type(node).__name__}")
        return {tag: [expression_to_data(node.left), expression_to_data(node.right)]}
    elif isinstance(node, FunctionNode):
        return {'Function': [node.name, [expression_to_data(a) for a in node.arguments]]}
    raise PersistenceError(f"Cannot serialize object of type {type(node).__name__}")


def expression_from_data(data: Any) -> Node:
    """Rebuild a tree from data produced by expression_to_data"""
    if not isinstance(data, dict) or len(data) != 1:
        raise PersistenceError(f"Expected a single-key mapping, got {data!r}")
    (tag, payload), = data.items()

    if tag == 'Value':
        if isinstance(payload, str):
            # YAML 1.1 reads exponents without a dot (1e5) as strings
            try:
                payload = float(payload)
            except ValueError:
                raise PersistenceError(f"Value must be a number, got {payload!r}") from None
        if isinstance(payload, bool) or not isinstance(payload, (int, float)):
            raise PersistenceError(f"Value must be a number, got {payload!r}")
        try:
            return ValueNode(payload)
        except OverflowError as e:
            raise PersistenceError(f"Value {payload!r} does not fit in a float") from e

    elif tag == 'Variable':
        if not isinstance(payload, str):
            raise PersistenceError(f"Variable name must be a string, got {payload!r}")
        return VariableNode(payload)

    elif tag in BINARY_TAGS:
        if not isinstance(payload, list) or len(payload) != 2:
            raise PersistenceError(f"{tag} expects two operands, got {payload!r}")
        return BINARY_TAGS[tag](expression_from_data(payload[0]), expression_from_data(payload[1]))

    elif tag == 'Function':
        if not isinstance(payload, list) or len(payload) != 2:
            raise PersistenceError(f"Function expects [name, arguments], got {payload!r}")
        name, arguments = payload
        if not isinstance(name, str):
            raise PersistenceError(f"Function name must be a string, got {name!r}")
        if not isinstance(arguments, list):
            raise PersistenceError(f"Function arguments must be a list, got {arguments!r}")
        return FunctionNode(name, [expression_from_data(a) for a in arguments])

    raise PersistenceError(f"Unknown node tag '{tag}'")


def dump_expression(expression: Union[Expression, Node], default_flow_style: bool = False) -> str:
    """Serialize a tree to a YAML string"""
    return yaml.safe_dump(expression_to_data(expression), default_flow_style=default_flow_style,
                          sort_keys=False)


def load_expression(text: str) -> Expression:
    """Parse a YAML string into an Expression"""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PersistenceError(f"Invalid YAML: {e}") from e
    return Expression(expression_from_data(data))


def save_expression(expression: Union[Expression, Node], path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(dump_expression(expression), encoding="utf-8")
    log_debug(f"Saved expression to {path}")
    return path


def read_expression(path: Union[str, Path]) -> Expression:
    path = Path(path)
    log_debug(f"Reading expression from {path}")
    return load_expression(path.read_text(encoding="utf-8"))
