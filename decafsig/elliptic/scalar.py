from __future__ import annotations

from functools import cached_property
from typing import Tuple

# Field prime (Ed448-Goldilocks)
p = 2**448 - 2**224 - 1

# p = 3 mod 4, so square roots are a single exponentiation
p14 = (p + 1) // 4
p34 = (p - 3) // 4

# Prime order of the decaf448 group (the Ed448 prime subgroup)
q = 2**446 - 13818066809895115352007386748515426880336692474882178609894547503885


class fe:
  """A prime field element modulo p = 2^448 - 2^224 - 1"""
  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(56, 'little')

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __abs__(self): return -self if self.is_negative else self
  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self if o == one else fe(self.val * o.inv.val)

  def __pow__(self, s: int) -> fe:
    return self.sq if s == 2 else fe(pow(self.val, s, p))

  @cached_property
  def inv(self) -> fe: return self**-1

  # Decaf448 defines the sign as the low bit of the canonical encoding
  @cached_property
  def is_negative(self) -> bool: return bool(self.val & 1)

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return self * self

  @cached_property
  def sqrt(self) -> fe:
    """The non-negative square root. Raises ValueError if there is none."""
    root = self**p14
    if root.sq != self: raise ValueError('Not a square!')
    return abs(root)


def sqrt_ratio(u: fe, v: fe) -> Tuple[bool, fe]:
  """
  Non-negative sqrt(u / v) without an inversion.

  Returns (True, root) if u / v is a square, otherwise (False, r) where r is
  some unspecified value. With u == 0 or v == 0 the root is zero.
  """
  r = u * (u * v)**p34
  was_square = v * r.sq == u
  return was_square, abs(r)


zero, one, minus1 = fe(0), fe(1), fe(-1)


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and s == val:
      return name
  for name, val in globals().items():
    if isinstance(val, fe) and s == -val:
      return f"-{name}"
  return f"fe({s.val})"
