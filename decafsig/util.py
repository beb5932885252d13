import re
import unicodedata
from base64 import b64decode, b64encode

import rlp
from blake3 import blake3

from .consttime import mod
from .exceptions import CliArgError


def canonical(*items) -> bytes:
  """RLP encoding of a list of byte strings, unambiguous about item boundaries."""
  # memoryview refuses ints, which bytes() would turn into zero-filled buffers
  return rlp.encode([memoryview(item).tobytes() for item in items])


def hashq(*items, order) -> bytearray:
  """
  Hash items into a scalar modulo order.

  The items are RLP encoded and hashed with BLAKE3 in XOF mode to 32 bytes more
  than the order, so that the reduction bias stays below 2^-256.
  """
  h = blake3()
  h.update(canonical(*items))
  return mod(h.digest(length=len(order) + 32), order)


def armor_decode(data: str) -> bytes:
  """Base64 decode."""
  # Fix CRLF, remove any surrounding BOM, whitespace and code block markers
  data = data.replace('\r\n', '\n').strip('\uFEFF`> \t\n')
  if not data.isascii():
    raise ValueError(f"Invalid armored encoding: data is not ASCII/Base64")
  # Strip indent and quote marks, trailing whitespace and empty lines
  lines = [line for l in data.split('\n') if (line := l.lstrip('\t >').rstrip())]
  if not lines:
    return b''
  r = re.compile(f"^[A-Za-z0-9+/]+$")
  for i, line in enumerate(lines):
    if not r.match(line):
      raise ValueError(f"Invalid armored encoding: unrecognized data on line {i + 1}")
  data = "".join(lines)
  padding = -len(data) % 4
  if padding == 3:
    raise ValueError(f"Invalid armored encoding: invalid length for Base64 sequence")
  return b64decode(data + padding*'=', validate=True)


def armor_encode(data: bytes) -> str:
  """Base64 without the padding nonsense."""
  return b64encode(data).decode().rstrip('=')


def hex_decode(data: str, name: str) -> bytes:
  """Parse hex given on the command line, with a readable error."""
  try:
    return bytes.fromhex(data.strip())
  except ValueError:
    raise CliArgError(f"Invalid {name}: expected a hex string") from None


def encode(s: str) -> bytes:
  """Unicode-normalizing UTF-8 encode."""
  return unicodedata.normalize("NFKC", s.lstrip("\uFEFF")).encode()
