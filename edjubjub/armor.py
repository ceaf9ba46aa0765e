import re
from base64 import b64decode, b64encode

from edjubjub.exceptions import MalformedKeyError

PEM_LINE = 64
pem_re = re.compile(r"-----BEGIN ([^-\n]+)-----\s*(.*?)\s*-----END \1-----", re.DOTALL)


def armor_decode(data: str) -> bytes:
  """Base64 decode."""
  # Fix CRLF, remove any surrounding BOM, whitespace and code block markers
  data = data.replace('\r\n', '\n').strip('\uFEFF`> \t\n')
  if not data.isascii():
    raise ValueError("Invalid armored encoding: data is not ASCII/Base64")
  # Strip indent and quote marks, trailing whitespace and empty lines
  lines = [line for l in data.split('\n') if (line := l.lstrip('\t >').rstrip())]
  if not lines:
    return b''
  r = re.compile("^[A-Za-z0-9+/]+={0,2}$")
  for i, line in enumerate(lines):
    if not r.match(line):
      raise ValueError(f"Invalid armored encoding: unrecognized data on line {i + 1}")
  data = "".join(lines).rstrip('=')
  padding = -len(data) % 4
  if padding == 3:
    raise ValueError("Invalid armored encoding: invalid length for Base64 sequence")
  return b64decode(data + padding*'=', validate=True)


def armor_encode(data: bytes) -> str:
  """Base64 without the padding nonsense, on a single line."""
  return b64encode(data).decode().rstrip('=')


def pem_encode(label: str, data: bytes) -> str:
  """PEM block (RFC 7468) of the given type label."""
  d = b64encode(data).decode()
  body = '\n'.join(d[i:i + PEM_LINE] for i in range(0, len(d), PEM_LINE))
  return f"-----BEGIN {label}-----\n{body}\n-----END {label}-----\n"


def pem_decode(text: str, label: str) -> bytes:
  """Return the contents of the first PEM block, which must be of the given type."""
  m = pem_re.search(text.replace('\r\n', '\n'))
  if not m:
    raise MalformedKeyError("No PEM block found")
  if m[1] != label:
    raise MalformedKeyError(f"Expected PEM type {label!r} but found {m[1]!r}")
  try:
    return b64decode("".join(m[2].split()), validate=True)
  except ValueError:
    raise MalformedKeyError(f"Invalid Base64 data in {label} PEM block")
