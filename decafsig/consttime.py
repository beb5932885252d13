"""
Fixed-width modular arithmetic on little-endian byte buffers.

None of the loops or branches here depend on the values being processed, only
on buffer lengths, which are public. Choices that depend on values (keep the
sum or the difference) go through select() which masks rather than branches.
This is an algorithmic property only: CPython itself makes no timing promises.
"""
from typing import Optional, Tuple

from .exceptions import LengthMismatchError, ZeroModulusError

BYTE_MASK = 0xFF


def select(flag: int, x, y) -> bytearray:
  """Bytewise x if flag == 1 else y (flag must be 0 or 1)."""
  mask = -flag & BYTE_MASK
  inv = ~mask & BYTE_MASK
  return bytearray((x[i] & mask) | (y[i] & inv) for i in range(len(x)))


def _add(a, b) -> Tuple[bytearray, int]:
  """Ripple-carry a + b, returning the sum and the carry-out bit."""
  out = bytearray(len(a))
  carry = 0
  for i in range(len(a)):
    t = a[i] + b[i] + carry
    out[i] = t & BYTE_MASK
    carry = t >> 8
  return out, carry


def _sub(a, b) -> Tuple[bytearray, int]:
  """Ripple-borrow a - b, returning the difference and the borrow bit."""
  out = bytearray(len(a))
  borrow = 0
  for i in range(len(a)):
    t = a[i] - b[i] - borrow
    out[i] = t & BYTE_MASK
    borrow = t >> 8 & 1
  return out, borrow


def _shl(a, bit: int) -> Tuple[bytearray, int]:
  """Shift left by one bit, inserting bit at the bottom. Returns the bit shifted out."""
  out = bytearray(len(a))
  carry = bit
  for i in range(len(a)):
    out[i] = (a[i] << 1 | carry) & BYTE_MASK
    carry = a[i] >> 7
  return out, carry


def add(a, b, m) -> bytearray:
  """
  Modular addition (a + b) % m.

  All three must have the same length. Both a and b must already be less than
  m; this is not checked (it would need a comparison of secret values) and
  the result is unspecified otherwise.
  """
  if len(a) != len(m) or len(b) != len(m):
    raise LengthMismatchError("Inputs must have the same length as modulus")
  total, carry = _add(a, b)
  diff, borrow = _sub(total, m)
  # Keep the sum only if it did not overflow and is below m
  return select((1 - carry) & borrow, total, diff)


def mod(a, m) -> bytearray:
  """
  Reduction a % m by restoring binary long division.

  Runs exactly 8 * len(a) rounds. The result has len(m) bytes.
  """
  if not any(m):
    raise ZeroModulusError("Modulus must be nonzero")
  run = bytearray(len(m))
  for i in reversed(range(8 * len(a))):
    bit = a[i >> 3] >> (i & 7) & 1
    run, overflow = _shl(run, bit)
    diff, borrow = _sub(run, m)
    run = select(overflow | (1 ^ borrow), diff, run)
  return run


def mult(a, b, m) -> bytearray:
  """Modular multiplication (a * b) % m. Operand lengths are free."""
  # Column sums fit Python ints without overflow; carries are resolved after
  acc = [0] * (len(a) + len(b))
  for i in range(len(a)):
    for j in range(len(b)):
      acc[i + j] += a[i] * b[j]
  product = bytearray(len(acc))
  carry = 0
  for i in range(len(acc)):
    t = acc[i] + carry
    product[i] = t & BYTE_MASK
    carry = t >> 8
  return mod(product, m)


def clone(source) -> bytearray:
  """Copy byte by byte, without any content-dependent shortcuts."""
  copy = bytearray(len(source))
  for i in range(len(source)):
    copy[i] = source[i]
  return copy


def wipe(*bufs: Optional[bytearray]) -> None:
  """
  Best-effort zeroing of secret buffers.

  Only mutable buffers can be wiped. Copies made elsewhere by the interpreter
  (ints, bytes objects, freed memory) are out of reach.
  """
  for buf in bufs:
    if isinstance(buf, bytearray):
      buf[:] = bytes(len(buf))
