from secrets import token_bytes

import pytest

from edjubjub.elliptic import *


def test_fe():
  assert one + zero == one
  assert zero - one == minus1
  assert fe(1234) / fe(324123) == (fe(324123) / fe(1234)).inv
  assert repr(fe(1234)) == "fe(1234)"
  assert repr(fe(-1)) == "minus1"
  assert bytes(zero) == bytes(32)
  # Big-endian encoding
  assert str(one) == 31 * "00" + "01"
  assert fe.from_bytes(bytes(31) + b"\x02") == fe(2)

  x = fe(toint(token_bytes(32)))
  assert x.inv.inv == x
  assert x**3 == x * x * x
  assert x * fe(2) == x + x
  assert fe.from_bytes(bytes(x)) == x

  # Values of p and above are reduced
  assert fe.from_bytes(p.to_bytes(32, "big")) == zero
  assert fe(p + 5) == fe(5)

  with pytest.raises(ValueError):
    fe.from_bytes(bytes(31))

  with pytest.raises(ZeroDivisionError):
    zero.inv

  with pytest.raises(TypeError):
    one == 1


def test_curve_params():
  assert BN256.cofactor == 8
  assert BN256.a == fe(168700)
  assert BN256.d == fe(168696)
  assert repr(BN256) == "TwistedEdwards(BN256)"
  # The parameter value is immutable
  with pytest.raises(AttributeError):
    BN256.cofactor = 4


def test_base_point():
  G = BN256.base
  O = BN256.zero
  assert G.is_on_curve
  assert O.is_on_curve
  assert G != O
  assert BN256.order * G == O
  assert (BN256.order + 1) * G == G
  assert 0 * G == O


def test_group_law():
  G = BN256.base
  O = BN256.zero
  assert G + O == G
  assert O + G == G
  assert G - G == O
  assert 2 * G == G + G
  assert 3 * G == G + G + G
  assert G * 5 == 5 * G
  assert -2 * G == -(2 * G)
  a = toint(token_bytes(32))
  b = toint(token_bytes(32))
  assert a * G + b * G == (a + b) * G
  assert a * (b * G) == (a * b) * G
  assert (a * G).is_on_curve
  # Affine coordinates of the sum of inverses
  P = (a * G).norm
  assert P.Z == one
  assert (P + -P).x == zero
  assert (P + -P).y == one


def test_low_order():
  # (0, -1) has order 2 and is cleared by cofactor multiplication
  T = EdPoint(BN256, zero, minus1)
  assert T.is_on_curve
  assert T != BN256.zero
  assert 2 * T == BN256.zero
  assert BN256.cofactor * (BN256.base + T) == BN256.cofactor * BN256.base


def test_not_on_curve():
  P = EdPoint(BN256, one, one)
  assert not P.is_on_curve
  assert not EdPoint(BN256, zero, zero).is_on_curve
  assert not EdPoint(BN256, one, one, zero, zero).is_on_curve


def test_point_bytes():
  P = toint(token_bytes(32)) * BN256.base
  b = bytes(P)
  assert len(b) == 64
  assert b[:32] == bytes(P.x)
  assert b[32:] == bytes(P.y)
  assert EdPoint.from_bytes(BN256, b) == P
  assert str(P) == b.hex()
  assert len({P, P.norm, 1 * P}) == 1

  with pytest.raises(ValueError):
    EdPoint.from_bytes(BN256, b[:63])

  with pytest.raises(TypeError):
    P == b


def test_prune():
  h = bytes(range(200, 232))
  pruned = prune(h)
  assert pruned[0] & 7 == 0
  assert pruned[31] & 0x80 == 0
  assert pruned[31] & 0x40 == 0x40
  assert pruned[1:31] == h[1:31]
  assert prune(32 * b"\xFF") == b"\xF8" + 30 * b"\xFF" + b"\x7F"
  assert prune(bytes(32)) == bytes(31) + b"\x40"

  with pytest.raises(ValueError):
    prune(bytes(64))


def test_int_conversions():
  assert toint(b"\x01\x00") == 256
  assert toint(5) == 5
  assert tobytes(256) == bytes(30) + b"\x01\x00"
  assert tobytes(1, 2) == b"\x00\x01"
