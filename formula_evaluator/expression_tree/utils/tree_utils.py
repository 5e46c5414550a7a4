"""
Tree Utility Functions

Traversal and analysis helpers for expression trees. None of these
evaluate anything; they only inspect structure.
"""

from typing import List, Set, Callable, TypeVar

from ..core.node import Node, BinaryOpNode, FunctionNode, ValueNode, VariableNode

T = TypeVar('T', bound=Node)


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []
    index = 0

    while index < len(nodes_to_visit):
        current_node = nodes_to_visit[index]
        index += 1
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative, so deep trees are safe)"""
    stack = [node]
    nodes = []

    while stack:
        current_node = stack.pop()
        nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    max_depth = 0
    stack = [(node, 1)]
    while stack:
        current_node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        stack.extend((child, depth + 1) for child in current_node.children())
    return max_depth


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """
    Find all nodes of a specific type in the tree, in depth-first order.
    """
    return [n for n in _depth_first_traversal(node) if isinstance(n, node_type)]


def get_values(node: Node) -> List[ValueNode]:
    return find_nodes_by_type(node, ValueNode)


def get_binary_ops(node: Node) -> List[BinaryOpNode]:
    return find_nodes_by_type(node, BinaryOpNode)


def get_variables(node: Node) -> Set[str]:
    """Names of all variables referenced anywhere in the tree"""
    return {n.name for n in find_nodes_by_type(node, VariableNode)}


def get_function_names(node: Node) -> Set[str]:
    """Names of all functions called anywhere in the tree"""
    return {n.name for n in find_nodes_by_type(node, FunctionNode)}


def apply_to_all_nodes(node: Node, func: Callable[[Node], None],
                       traversal_order: str = 'depth_first') -> None:
    for n in get_all_nodes(node, traversal_order):
        func(n)
