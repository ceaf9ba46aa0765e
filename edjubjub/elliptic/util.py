from .scalar import FIELD_SIZE


def prune(h: bytes) -> bytes:
  """EdDSA standard clamping of 32 little-endian bytes (RFC 8032 5.1.5)"""
  # 256 bits 01[x]000, the byte order is still that of the digest
  if len(h) != 32: raise ValueError("Should be exactly 32 bytes")
  b = bytearray(h)
  b[0] &= 0xF8
  b[31] &= 0x7F
  b[31] |= 0x40
  return bytes(b)


def toint(x) -> int:
  """Big-endian bytes of any length to a non-negative integer"""
  if isinstance(x, int): return x
  return int.from_bytes(x, "big")


def tobytes(x: int, size: int = FIELD_SIZE) -> bytes:
  """Integer to big-endian bytes, left-padded with zeroes to size"""
  return x.to_bytes(size, "big")
