import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  SYMBOL = 0
  CONSTANT = 1
  BINARY_OP = 2

class OpType(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}
OP_SYMBOLS = {op_type: symbol for symbol, op_type in BINARY_OP_MAP.items()}

# Plain ints so the jitted kernels see compile-time constants
_ADD = int(OpType.ADD)
_SUB = int(OpType.SUB)
_MUL = int(OpType.MUL)
_DIV = int(OpType.DIV)

# error_model='numpy': x / 0.0 gives +-inf or nan instead of raising.
# No fastmath, inf/nan must propagate exactly.
@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == _ADD:
    return left_val + right_val
  elif op_type == _SUB:
    return left_val - right_val
  elif op_type == _MUL:
    return left_val * right_val
  elif op_type == _DIV:
    return left_val / right_val
  return np.nan

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op_array(left_val, right_val, op_type):
  if op_type == _ADD:
    return left_val + right_val
  elif op_type == _SUB:
    return left_val - right_val
  elif op_type == _MUL:
    return left_val * right_val
  elif op_type == _DIV:
    return left_val / right_val
  return np.full_like(left_val, np.nan)

@numba.njit(cache=True)
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

def apply_binary_op(left_val: float, right_val: float, op_type: OpType) -> float:
  return float(evaluate_binary_op(float(left_val), float(right_val), int(op_type)))

def apply_binary_op_array(left_val: np.ndarray, right_val: np.ndarray, op_type: OpType) -> np.ndarray:
  return evaluate_binary_op_array(left_val, right_val, int(op_type))

def op_symbol(op_type: OpType) -> str:
  return OP_SYMBOLS[OpType(op_type)]
