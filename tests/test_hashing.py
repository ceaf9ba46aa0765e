import hashlib
from secrets import token_bytes

import pytest
from cryptography.hazmat.primitives import hashes

from edjubjub.hashing import Hasher, algorithms, seed_hash


def test_seed_hash():
  data = token_bytes(50)
  assert seed_hash(data) == hashlib.blake2b(data, digest_size=64).digest()
  assert len(seed_hash(b"")) == 64


@pytest.mark.parametrize("name,ref", [
  ("sha256", hashlib.sha256),
  ("SHA512", hashlib.sha512),
  ("sha3-256", hashlib.sha3_256),
  ("blake2s", hashlib.blake2s),
  ("blake2b", hashlib.blake2b),
])
def test_hasher_matches_hashlib(name, ref):
  h = Hasher(name)
  assert h.write(b"hello ") == 6
  h.write(b"world")
  assert h.sum() == ref(b"hello world").digest()
  assert h.digest_size == ref().digest_size


def test_hasher_state():
  h = Hasher()
  assert repr(h) == "Hasher(sha256)"
  h.write(b"foo")
  # sum does not end the hash
  assert h.sum() == hashlib.sha256(b"foo").digest()
  h.write(b"bar")
  assert h.sum() == hashlib.sha256(b"foobar").digest()
  h.reset()
  assert h.sum() == hashlib.sha256(b"").digest()
  h.write(memoryview(b"baz"))
  assert h.sum() == hashlib.sha256(b"baz").digest()


def test_hasher_algorithm_object():
  h = Hasher(hashes.SHA384())
  h.write(b"x")
  assert h.sum() == hashlib.sha384(b"x").digest()
  assert set(algorithms) >= {"sha256", "sha512", "sha3-256", "blake2b", "blake2s"}


def test_unsupported_hash():
  with pytest.raises(ValueError) as exc:
    Hasher("md4")
  assert "Unsupported hash 'md4'" in str(exc.value)
