from typing import Dict, Mapping, Optional, Tuple
from .functions import Callable, default_functions
from ..errors import UnknownVariableError, UnknownFunctionError
from ...logging_system import log_debug, log_failure


class Environment:
  """
  Variable and function bindings for one or more evaluations.

  The two tables are independent: a name may be bound in both, either or
  neither. Lookups are pure reads. Callables are held by reference and may be
  shared between environments.
  """

  __slots__ = ('_variables', '_functions')

  def __init__(self, variables: Optional[Mapping[str, float]] = None,
               functions: Optional[Mapping[str, Callable]] = None):
    self._variables: Dict[str, float] = {name: float(value) for name, value in (variables or {}).items()}
    self._functions: Dict[str, Callable] = dict(functions or {})
    for name, function in self._functions.items():
      if not isinstance(function, Callable):
        raise TypeError(f"Function '{name}' must implement Callable, got {type(function).__name__}")
    log_debug(f"Environment created: variables={list(self._variables)} functions={list(self._functions)}")

  @classmethod
  def with_defaults(cls, variables: Optional[Mapping[str, float]] = None) -> 'Environment':
    """Environment holding the built-in function registry"""
    return cls(variables, default_functions())

  def lookup_variable(self, name: str) -> float:
    try:
      return self._variables[name]
    except KeyError:
      log_failure(f"Unknown variable '{name}'")
      raise UnknownVariableError(name) from None

  def lookup_function(self, name: str) -> Callable:
    try:
      return self._functions[name]
    except KeyError:
      log_failure(f"Unknown function '{name}'")
      raise UnknownFunctionError(name) from None

  def has_variable(self, name: str) -> bool:
    return name in self._variables

  def has_function(self, name: str) -> bool:
    return name in self._functions

  @property
  def variable_names(self) -> Tuple[str, ...]:
    return tuple(self._variables)

  @property
  def function_names(self) -> Tuple[str, ...]:
    return tuple(self._functions)

  def with_variables(self, variables: Optional[Mapping[str, float]] = None, **kwargs: float) -> 'Environment':
    """Copy of this environment with extra or replaced variable bindings"""
    merged = dict(self._variables)
    merged.update(variables or {})
    merged.update(kwargs)
    return Environment(merged, self._functions)

  def with_functions(self, functions: Mapping[str, Callable]) -> 'Environment':
    """Copy of this environment with extra or replaced function bindings"""
    merged = dict(self._functions)
    merged.update(functions)
    return Environment(self._variables, merged)

  def __repr__(self) -> str:
    return f"Environment(variables={list(self._variables)}, functions={list(self._functions)})"
