from __future__ import annotations

from functools import cached_property

# Field prime: the scalar field of BN256, over which BabyJubjub is defined
p = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# Encoded size of a field element in bytes
FIELD_SIZE = 32


class fe:
  """A prime field element modulo p"""
  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(FIELD_SIZE, 'big')

  @staticmethod
  def from_bytes(b: bytes) -> fe:
    """Big-endian decoding, reducing values that exceed p."""
    if len(b) != FIELD_SIZE: raise ValueError(f"Field element should be exactly {FIELD_SIZE} bytes")
    return fe(int.from_bytes(b, 'big'))

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self if o == one else self * o.inv

  def __pow__(self, s: int) -> fe:
    return self.sq if s == 2 else fe(pow(self.val, s, p))

  @cached_property
  def inv(self) -> fe:
    if self.val == 0: raise ZeroDivisionError("Zero has no inverse")
    return self**-1

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return self * self


zero, one, minus1 = fe(0), fe(1), fe(-1)


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and s == val:
      return name
  return f"fe({s.val})"
