"""Utilities for expression trees."""

from .sympy_utils import to_sympy, latex_representation
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_values, get_binary_ops, get_variables, get_function_names,
    apply_to_all_nodes
)
from .validator import ExpressionValidator

__all__ = [
    'to_sympy', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'get_values', 'get_binary_ops', 'get_variables', 'get_function_names',
    'apply_to_all_nodes',
    'ExpressionValidator'
]
