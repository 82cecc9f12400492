import numbers
from dataclasses import dataclass
from typing import Iterable, Optional, Union

import numpy as np

from .tags import IdentityTag


@dataclass(frozen=True)
class Binding:
  """Numeric value for one tag, consumed by evaluate()."""
  tag: IdentityTag
  value: float

  def __post_init__(self):
    if not isinstance(self.tag, IdentityTag):
      raise TypeError(f"Binding tag must be an IdentityTag, got {type(self.tag).__name__}")
    if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
      raise TypeError(f"Binding value must be a real number, got {type(self.value).__name__}")
    object.__setattr__(self, 'value', float(self.value))


@dataclass(frozen=True)
class Naming:
  """Display name for one tag, consumed by render()."""
  tag: IdentityTag
  name: str

  def __post_init__(self):
    if not isinstance(self.tag, IdentityTag):
      raise TypeError(f"Naming tag must be an IdentityTag, got {type(self.tag).__name__}")
    if not isinstance(self.name, str):
      raise TypeError(f"Naming name must be a str, got {type(self.name).__name__}")


@dataclass(frozen=True, eq=False)
class ArrayBinding:
  """One column of samples for a tag, consumed by evaluate_array()."""
  tag: IdentityTag
  value: np.ndarray


class UnresolvedSymbolError(LookupError):
  """A symbol's tag has no entry in the supplied binding set."""

  def __init__(self, tag: IdentityTag, label: Optional[str] = None):
    self.tag = tag
    self.label = label
    what = f"'{label}' ({tag!r})" if label else repr(tag)
    super().__init__(f"undefined symbol in expression: {what}")


@dataclass(frozen=True)
class EvaluationResult:
  """Outcome of Expression.evaluate: either a value or the failure."""
  value: Optional[float] = None
  error: Optional[UnresolvedSymbolError] = None

  @property
  def ok(self) -> bool:
    return self.error is None

  def unwrap(self) -> float:
    if self.error is not None:
      raise self.error
    return self.value


def lookup_value(tag: IdentityTag, bindings: Iterable[Union[Binding, ArrayBinding]], label: Optional[str] = None):
  # First match wins, later entries for the same tag are shadowed.
  for binding in bindings:
    if binding.tag is tag:
      return binding.value
  raise UnresolvedSymbolError(tag, label)


def lookup_name(tag: IdentityTag, namings: Iterable[Naming]) -> Optional[str]:
  for naming in namings:
    if naming.tag is tag:
      return naming.name
  return None


def check_entries(entries, kind: type, operation: str) -> tuple:
  entries = tuple(entries)
  for entry in entries:
    if not isinstance(entry, kind):
      raise TypeError(f"{operation}() expects {kind.__name__} entries, got {type(entry).__name__}")
  return entries
