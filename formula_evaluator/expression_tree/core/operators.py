import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  VALUE = 0
  VARIABLE = 1
  BINARY_OP = 2
  FUNCTION = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  SIN = 5
  COS = 6
  EXP = 7
  LOG = 8
  SQRT = 9
  ABS = 10
  TAN = 11
  NEG = 12
  SINH = 13
  COSH = 14
  TANH = 15

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {
    'sin': OpType.SIN, 'cos': OpType.COS, 'tan': OpType.TAN,
    'exp': OpType.EXP, 'log': OpType.LOG, 'sqrt': OpType.SQRT,
    'abs': OpType.ABS, 'neg': OpType.NEG,
    'sinh': OpType.SINH, 'cosh': OpType.COSH, 'tanh': OpType.TANH
}

# Kernels work on float64 scalars. error_model='numpy' keeps IEEE-754 results
# (x/0 -> +-inf, 0/0 -> nan) instead of raising ZeroDivisionError, and
# fastmath stays off so NaN and infinities propagate unchanged.

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    return np.power(left_val, right_val)
  return np.nan

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op(operand_val, op_type):
  if op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  elif op_type == OpType.EXP:
    return np.exp(operand_val)
  elif op_type == OpType.LOG:
    return np.log(operand_val)
  elif op_type == OpType.SQRT:
    return np.sqrt(operand_val)
  elif op_type == OpType.ABS:
    return np.abs(operand_val)
  elif op_type == OpType.TAN:
    return np.tan(operand_val)
  elif op_type == OpType.NEG:
    return -operand_val
  elif op_type == OpType.SINH:
    return np.sinh(operand_val)
  elif op_type == OpType.COSH:
    return np.cosh(operand_val)
  elif op_type == OpType.TANH:
    return np.tanh(operand_val)
  return np.nan


def apply_binary_op(left_val: float, right_val: float, op_type: OpType) -> float:
  return float(evaluate_binary_op(np.float64(left_val), np.float64(right_val), int(op_type)))


def apply_unary_op(operand_val: float, op_type: OpType) -> float:
  return float(evaluate_unary_op(np.float64(operand_val), int(op_type)))
