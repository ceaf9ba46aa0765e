import os

from edjubjub.armor import armor_decode, armor_encode
from edjubjub.encoding import KEY_TYPE, PrivateKey, PublicKey, Signature
from edjubjub.exceptions import MalformedKeyError


def _decode_exact(cls, keystr: str, what: str):
  try:
    data = armor_decode(keystr)
  except ValueError:
    raise MalformedKeyError(f"Unrecognized {what} {keystr!r}")
  if len(data) != cls.size:
    raise MalformedKeyError(f"Invalid {what}: expected {cls.size} bytes, got {len(data)}")
  return cls.from_bytes(data)


def encode_pk(pub: PublicKey) -> str:
  return armor_encode(bytes(pub))


def encode_sk(priv: PrivateKey) -> str:
  return armor_encode(bytes(priv))


def encode_sig(sig: Signature) -> str:
  return armor_encode(bytes(sig))


def decode_pk(keystr: str) -> PublicKey:
  """Public key from a PEM block or a single armored token."""
  if f"-----BEGIN {KEY_TYPE}-----" in keystr:
    return PublicKey.from_pem(keystr)
  return _decode_exact(PublicKey, keystr.strip(), "public key")


def decode_sk(keystr: str) -> PrivateKey:
  return _decode_exact(PrivateKey, keystr.strip(), "private key")


def decode_sig(sigstr: str) -> Signature:
  return _decode_exact(Signature, sigstr.strip(), "signature")


def _read_text(filename: str, what: str) -> str:
  if not os.path.isfile(filename):
    raise ValueError(f"{what} {filename} not found")
  with open(filename, "rb") as f:
    try:
      return f.read().decode().replace('\r\n', '\n')
    except ValueError:
      raise ValueError(f"{what} {filename} could not be decoded. Only UTF-8 text is supported.")


def read_pk_file(filename: str) -> PublicKey:
  data = _read_text(filename, "Keyfile")
  if not data.strip():
    raise ValueError(f'Nothing found in {filename}')
  return decode_pk(data)


def read_sk_file(filename: str) -> PrivateKey:
  data = _read_text(filename, "Secret key file")
  # A single token, except skip comments and empty lines
  lines = [l for l in data.split('\n') if l.strip() and not l.startswith('#')]
  if len(lines) != 1:
    raise MalformedKeyError(f"Secret key file {filename} should contain exactly one key")
  return decode_sk(lines[0])


def read_pk_any(keystr: str) -> PublicKey:
  """Public key file, or the key itself as a string."""
  if os.path.isfile(keystr):
    return read_pk_file(keystr)
  return decode_pk(keystr)


def read_sk_any(keystr: str) -> PrivateKey:
  if os.path.isfile(keystr):
    return read_sk_file(keystr)
  return decode_sk(keystr)


def read_sig_any(sigstr: str) -> Signature:
  if os.path.isfile(sigstr):
    return decode_sig(_read_text(sigstr, "Signature file"))
  return decode_sig(sigstr)
