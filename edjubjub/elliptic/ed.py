from __future__ import annotations

from functools import cached_property
from typing import NamedTuple, Optional

from .scalar import FIELD_SIZE, fe, one, zero

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2

# Points are represented as tuples (X, Y, Z, T) of extended
# coordinates, with x = X/Z, y = Y/Z, x*y = T/Z


class TwistedEdwards(NamedTuple):
  """Curve parameters. Immutable, passed explicitly wherever curve math is needed."""
  name: str
  a: fe
  d: fe
  order: int  # Prime subgroup order (scalars of signatures are mod this)
  cofactor: int
  base_x: fe
  base_y: fe

  @property
  def base(self) -> EdPoint:
    """Generator of the prime order subgroup"""
    return EdPoint(self, self.base_x, self.base_y)

  @property
  def zero(self) -> EdPoint:
    """Neutral element"""
    return EdPoint(self, zero, one)

  def __repr__(self): return f"TwistedEdwards({self.name})"


class EdPoint:
  def __init__(self, curve: TwistedEdwards, x: fe, y: fe, z: fe = one, t: Optional[fe] = None):
    self.curve = curve
    # Expand to projective coordinates for faster adds
    self.X = x
    self.Y = y
    self.Z = z
    self.T = x * y if t is None else t

  @staticmethod
  def from_bytes(curve: TwistedEdwards, b: bytes) -> EdPoint:
    """Read x || y as big-endian field elements. The point is not validated."""
    if len(b) != 2 * FIELD_SIZE: raise ValueError(f"Point should be exactly {2 * FIELD_SIZE} bytes")
    return EdPoint(curve, fe.from_bytes(b[:FIELD_SIZE]), fe.from_bytes(b[FIELD_SIZE:]))

  def __repr__(self): return f"EdPoint({self.x!r}, {self.y!r})"
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return bytes(self.x) + bytes(self.y)
  def __hash__(self): return hash((self.x, self.y))

  @cached_property
  def norm(self) -> EdPoint:
    """Return a normalized point, with Z=1."""
    return EdPoint(self.curve, self.x, self.y)

  @cached_property
  def x(self) -> fe: return self.X / self.Z

  @cached_property
  def y(self) -> fe: return self.Y / self.Z

  @cached_property
  def is_on_curve(self) -> bool:
    # Z is never zero for curve points because the addition law is complete
    if self.Z == zero: return False
    x2, y2 = self.x.sq, self.y.sq
    return self.curve.a * x2 + y2 == one + self.curve.d * x2 * y2

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    a, d = self.curve.a, self.curve.d
    A = self.X * othr.X
    B = self.Y * othr.Y
    C = self.T * d * othr.T
    D = self.Z * othr.Z
    E = (self.X + self.Y) * (othr.X + othr.Y) - A - B
    F, G, H = D - C, D + C, B - a * A
    return EdPoint(self.curve, E * F, G * H, F * G, E * H)

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint(self.curve, -self.X, self.Y, self.Z, -self.T)

  def __mul__(self, s: int) -> EdPoint:
    """Multiply the point by an arbitrary size non-negative integer."""
    if not isinstance(s, int): return NotImplemented
    if s < 0: return -self * -s
    Q = self.curve.zero
    P = self
    while s > 0:
      if s & 1: Q += P
      P += P
      s >>= 1
    return Q

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
    return (
      (self.X * othr.Z - othr.X * self.Z) == zero and
      (self.Y * othr.Z - othr.Y * self.Z) == zero
    )


# BabyJubjub, the twisted Edwards curve defined over the scalar field of BN256
# https://eips.ethereum.org/EIPS/eip-2494
BN256 = TwistedEdwards(
  name="BN256",
  a=fe(168700),
  d=fe(168696),
  order=2736030358979909402780800718157159386076813972158567259200215660948447373041,
  cofactor=8,
  base_x=fe(5299619240641551281634865583518297030282874472190772894086521144482721001553),
  base_y=fe(16950150798460657717958625567821834550301663161624707787222815936182638968203),
)
assert BN256.base.is_on_curve
