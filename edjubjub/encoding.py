from __future__ import annotations

from typing import Tuple

from edjubjub import armor
from edjubjub.elliptic import BN256, FIELD_SIZE, EdPoint, TwistedEdwards
from edjubjub.exceptions import MalformedKeyError, NotOnCurveError, ShortBufferError
from edjubjub.hashing import NONCE_SEED_SIZE

# All encodings are big-endian and fixed width, without any framing
SIZE_POINT = 2 * FIELD_SIZE
SIZE_PUBLIC_KEY = SIZE_POINT
SIZE_SIGNATURE = SIZE_POINT + FIELD_SIZE
SIZE_PRIVATE_KEY = SIZE_POINT + FIELD_SIZE + NONCE_SEED_SIZE

KEY_TYPE = "ED JUBJUB BN256 PUBLIC KEY"


def check_size(buf: bytes, size: int, what: str) -> None:
  if len(buf) < size:
    raise ShortBufferError(f"{what} needs {size} bytes, got {len(buf)}")


def read_point(buf: bytes, curve: TwistedEdwards) -> EdPoint:
  """Decode x || y from the beginning of buf and require the point to be on the curve."""
  P = EdPoint.from_bytes(curve, bytes(buf[:SIZE_POINT]))
  if not P.is_on_curve:
    raise NotOnCurveError("Point not on curve")
  return P


def fixed(b: bytes, size: int, what: str) -> bytes:
  b = bytes(b)
  if len(b) != size:
    raise ValueError(f"{what} must be exactly {size} bytes, got {len(b)}")
  return b


class PublicKey:
  """The point A = scalar * base, encoded as x || y"""
  size = SIZE_PUBLIC_KEY

  def __init__(self, A: EdPoint):
    self.A = A

  @classmethod
  def decode(cls, buf: bytes, curve: TwistedEdwards = BN256) -> Tuple[PublicKey, int]:
    """Returns the key and the number of bytes consumed from buf."""
    check_size(buf, SIZE_PUBLIC_KEY, "Public key")
    return cls(read_point(buf, curve)), SIZE_PUBLIC_KEY

  @classmethod
  def from_bytes(cls, buf: bytes, curve: TwistedEdwards = BN256) -> PublicKey:
    return cls.decode(buf, curve)[0]

  def __bytes__(self):
    return bytes(self.A)

  def __eq__(self, other):
    if not isinstance(other, PublicKey): return NotImplemented
    return self.A == other.A

  def __hash__(self):
    return hash(bytes(self))

  def __repr__(self):
    return f"PublicKey[{bytes(self).hex()[:8]}]"

  def to_pem(self) -> str:
    return armor.pem_encode(KEY_TYPE, bytes(self))

  @classmethod
  def from_pem(cls, text: str, curve: TwistedEdwards = BN256) -> PublicKey:
    data = armor.pem_decode(text, KEY_TYPE)
    if len(data) != SIZE_PUBLIC_KEY:
      raise MalformedKeyError(f"Invalid PEM public key: expected {SIZE_PUBLIC_KEY} bytes, got {len(data)}")
    return cls.from_bytes(data, curve)

  def dump_pem(self, filename) -> None:
    with open(filename, "w") as f:
      f.write(self.to_pem())

  @classmethod
  def load_pem(cls, filename, curve: TwistedEdwards = BN256) -> PublicKey:
    with open(filename) as f:
      return cls.from_pem(f.read(), curve)


class PrivateKey:
  """
  Secret key material: public key || scalar || rand_src

  scalar is the pruned secret exponent in big endian and rand_src seeds the
  deterministic per-message nonces. The public key is trusted as given and not
  recalculated from the scalar.
  """
  size = SIZE_PRIVATE_KEY

  def __init__(self, pub_key: PublicKey, scalar: bytes, rand_src: bytes):
    self.pub_key = pub_key
    self.scalar = fixed(scalar, FIELD_SIZE, "Scalar")
    self.rand_src = fixed(rand_src, NONCE_SEED_SIZE, "Nonce seed")

  @classmethod
  def decode(cls, buf: bytes, curve: TwistedEdwards = BN256) -> Tuple[PrivateKey, int]:
    """Returns the key and the number of bytes consumed from buf."""
    check_size(buf, SIZE_PRIVATE_KEY, "Private key")
    pub_key = PublicKey(read_point(buf, curve))
    scalar = buf[SIZE_POINT:SIZE_POINT + FIELD_SIZE]
    rand_src = buf[SIZE_POINT + FIELD_SIZE:SIZE_PRIVATE_KEY]
    return cls(pub_key, scalar, rand_src), SIZE_PRIVATE_KEY

  @classmethod
  def from_bytes(cls, buf: bytes, curve: TwistedEdwards = BN256) -> PrivateKey:
    return cls.decode(buf, curve)[0]

  def __bytes__(self):
    return bytes(self.pub_key) + self.scalar + self.rand_src

  def __eq__(self, other):
    if not isinstance(other, PrivateKey): return NotImplemented
    return self.pub_key == other.pub_key and self.scalar == other.scalar and self.rand_src == other.rand_src

  def __hash__(self):
    return hash(bytes(self))

  def __repr__(self):
    # Never show any secrets
    return f"PrivateKey[{bytes(self.pub_key).hex()[:8]}:SK]"


class Signature:
  """
  The commitment point R and s = r + H(R, A, M) * scalar mod order, as x || y || s

  s is stored verbatim as 32 big-endian bytes. It is below the group order
  when produced by signing but decoding does not check that.
  """
  size = SIZE_SIGNATURE

  def __init__(self, R: EdPoint, S: bytes):
    self.R = R
    self.S = fixed(S, FIELD_SIZE, "Signature s")

  @classmethod
  def decode(cls, buf: bytes, curve: TwistedEdwards = BN256) -> Tuple[Signature, int]:
    """Returns the signature and the number of bytes consumed from buf."""
    check_size(buf, SIZE_SIGNATURE, "Signature")
    R = read_point(buf, curve)
    return cls(R, buf[SIZE_POINT:SIZE_SIGNATURE]), SIZE_SIGNATURE

  @classmethod
  def from_bytes(cls, buf: bytes, curve: TwistedEdwards = BN256) -> Signature:
    return cls.decode(buf, curve)[0]

  def __bytes__(self):
    return bytes(self.R) + self.S

  def __eq__(self, other):
    if not isinstance(other, Signature): return NotImplemented
    return self.R == other.R and self.S == other.S

  def __hash__(self):
    return hash(bytes(self))

  def __repr__(self):
    return f"Signature[{bytes(self).hex()[:8]}]"
