import itertools
import threading


class IdentityTag:
  """Opaque resolution key for a symbol or nameable constant.

  Tags compare by identity only. The serial is informational and shows up in
  ``repr``; it is never used for lookup.
  """

  __slots__ = ('_serial',)

  def __init__(self, serial: int):
    self._serial = serial

  @property
  def serial(self) -> int:
    return self._serial

  def __copy__(self) -> 'IdentityTag':
    return self

  def __deepcopy__(self, memo) -> 'IdentityTag':
    return self

  def __reduce__(self):
    raise TypeError("IdentityTag cannot be pickled")

  def __repr__(self) -> str:
    return f"<IdentityTag #{self._serial}>"


_serials = itertools.count(1)
_serial_lock = threading.Lock()


def mint() -> IdentityTag:
  """Return a tag distinct from every other tag minted in this process."""
  with _serial_lock:
    serial = next(_serials)
  return IdentityTag(serial)


def tag_equals(a: IdentityTag, b: IdentityTag) -> bool:
  return a is b
