from typing import Tuple

from edjubjub.elliptic import BN256, FIELD_SIZE, EdPoint, TwistedEdwards, prune, tobytes, toint
from edjubjub.encoding import PrivateKey, PublicKey, Signature
from edjubjub.exceptions import HashWriteError, NotOnCurveError
from edjubjub.hashing import NONCE_SEED_SIZE, SEED_HASH_SIZE, HashFunction, seed_hash

# EdDSA over a twisted Edwards curve with 256-bit scalars (cofactor 4 or 8)
# https://en.wikipedia.org/wiki/EdDSA for the notation

SEED_SIZE = 32


def new_keypair(seed: bytes, curve: TwistedEdwards = BN256) -> Tuple[PublicKey, PrivateKey]:
  """Derive a key pair from 32 bytes of secret seed. Same seed, same keys."""
  if len(seed) != SEED_SIZE:
    raise ValueError(f"Seed must be exactly {SEED_SIZE} bytes")
  h = seed_hash(seed)
  split = SEED_HASH_SIZE - NONCE_SEED_SIZE
  scalar_half, rand_src = h[:split], h[split:]
  # Pruned in the little-endian order of the digest, stored big-endian
  scalar = prune(scalar_half)[::-1]
  A = toint(scalar) * curve.base
  pub = PublicKey(A.norm)
  return pub, PrivateKey(pub, scalar, rand_src)


def challenge_hash(hfunc: HashFunction, R: EdPoint, A: EdPoint, message: bytes) -> int:
  """H(R, A, M) as a big-endian integer. Resets hfunc first."""
  data = bytes(R) + bytes(A) + bytes(message)
  hfunc.reset()
  try:
    hfunc.write(data)
  except HashWriteError:
    raise
  except Exception as e:
    raise HashWriteError(f"Writing to hash function {hfunc!r} failed: {e}") from e
  return toint(hfunc.sum())


def sign(message: bytes, priv: PrivateKey, hfunc: HashFunction, curve: TwistedEdwards = BN256) -> Signature:
  """Deterministic signature: the nonce is derived from rand_src and the message."""
  message = bytes(message)
  r = toint(seed_hash(priv.rand_src + message)[:FIELD_SIZE])
  R = r * curve.base
  if not R.is_on_curve:
    raise NotOnCurveError("Commitment R not on curve")
  R = R.norm
  h = challenge_hash(hfunc, R, priv.pub_key.A, message)
  # Reduced by the group order, not the field prime
  s = (r + h * toint(priv.scalar)) % curve.order
  return Signature(R, tobytes(s))


def verify(sig: Signature, message: bytes, pub: PublicKey, hfunc: HashFunction, curve: TwistedEdwards = BN256) -> bool:
  """
  Check cofactor * s * base == cofactor * (R + H(R, A, M) * A).

  Returns False on signature mismatch.

  :raises NotOnCurveError: if the public key or either side of the equation is not on the curve
  :raises HashWriteError: if hfunc fails
  """
  message = bytes(message)
  if not pub.A.is_on_curve:
    raise NotOnCurveError("Public key not on curve")
  h = challenge_hash(hfunc, sig.R, pub.A, message)
  lhs = curve.cofactor * (toint(sig.S) * curve.base)
  if not lhs.is_on_curve:
    raise NotOnCurveError("cofactor * s * base not on curve")
  rhs = curve.cofactor * (sig.R + h * pub.A)
  if not rhs.is_on_curve:
    raise NotOnCurveError("cofactor * (R + h * A) not on curve")
  return lhs.x == rhs.x and lhs.y == rhs.y
