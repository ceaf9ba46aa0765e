from typing import Protocol, Union

import nacl.bindings as sodium
from cryptography.hazmat.primitives import hashes

# Output size of the fixed seed expansion hash, and the half of it used as nonce seed
SEED_HASH_SIZE = 64
NONCE_SEED_SIZE = 32

algorithms = {
  "sha256": hashes.SHA256,
  "sha384": hashes.SHA384,
  "sha512": hashes.SHA512,
  "sha3-256": hashes.SHA3_256,
  "sha3-512": hashes.SHA3_512,
  "blake2b": lambda: hashes.BLAKE2b(64),
  "blake2s": lambda: hashes.BLAKE2s(32),
}


class HashFunction(Protocol):
  """The challenge hash capability: a stateful object that signing and verification reset before use."""

  def reset(self) -> None: ...

  def write(self, data: bytes) -> int: ...

  def sum(self) -> bytes: ...


class Hasher:
  """
  Adapts a cryptography hash algorithm to the reset/write/sum interface.

  The same instance may be passed to any number of sign and verify calls but it
  must not be used by two threads at once.
  """

  def __init__(self, algorithm: Union[str, hashes.HashAlgorithm] = "sha256"):
    if isinstance(algorithm, str):
      try:
        algorithm = algorithms[algorithm.lower()]()
      except KeyError:
        raise ValueError(f"Unsupported hash {algorithm!r}, choose one of {', '.join(algorithms)}")
    self.algorithm = algorithm
    self.reset()

  def __repr__(self):
    return f"Hasher({self.algorithm.name})"

  @property
  def digest_size(self) -> int:
    return self.algorithm.digest_size

  def reset(self) -> None:
    self._ctx = hashes.Hash(self.algorithm)

  def write(self, data: bytes) -> int:
    self._ctx.update(bytes(data))
    return len(data)

  def sum(self) -> bytes:
    """Digest of everything written so far. Further writes continue from the same state."""
    return self._ctx.copy().finalize()


def seed_hash(data: bytes) -> bytes:
  """The fixed 64 byte hash for seed expansion and nonce derivation (BLAKE2b-512)"""
  return sodium.crypto_generichash_blake2b_salt_personal(bytes(data), digest_size=SEED_HASH_SIZE)
