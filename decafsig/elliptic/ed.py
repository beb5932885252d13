from __future__ import annotations

from typing import Optional

from ..exceptions import DecodeError
from .scalar import fe, one, p, q, sqrt_ratio, zero
from .util import tobytes, toint

# Edwards curve x2 + y2 = 1 + d x2 y2 (Ed448-Goldilocks, a = 1)
d = fe(-39081)

# Decaf448 constants. The sign of INVSQRT_MINUS_D only picks which of P and -P
# a string decodes to; encoding undoes it, so any consistent choice works.
ONE_MINUS_D = one - d
SQRT_MINUS_D = (-d).sqrt
INVSQRT_MINUS_D = SQRT_MINUS_D.inv

# Points are represented as tuples (X, Y, Z, T) of extended
# coordinates, with x = X/Z, y = Y/Z, x*y = T/Z

class DecafPoint:
  """
  An element of the decaf448 prime order group.

  Internally an Ed448 point. Points differing by the 2-torsion point (0, -1)
  are the same group element: they compare equal and have the same encoding.
  """
  def __init__(self, x: fe, y: fe, z: fe = one, t: Optional[fe] = None):
    self.X = x
    self.Y = y
    self.Z = z
    self.T = x * y if t is None else t

  @staticmethod
  def from_bytes(b) -> DecafPoint:
    """Decode the 56-byte canonical encoding. Raises DecodeError on invalid input."""
    if len(b) != 56:
      raise DecodeError("Invalid decaf448 encoding (wrong length)")
    sval = toint(b)
    if sval >= p or sval & 1:
      raise DecodeError("Invalid decaf448 encoding (not canonical)")
    s = fe(sval)
    ss = s.sq
    u1 = one + ss
    u1sq = u1.sq
    u2 = u1sq - fe(4) * d * ss
    was_square, invsqrt = sqrt_ratio(one, u2 * u1sq)
    if not was_square:
      raise DecodeError("Invalid decaf448 encoding (not a point)")
    u3 = abs(fe(2) * s * invsqrt * u1 * SQRT_MINUS_D)
    x = u3 * invsqrt * u2 * INVSQRT_MINUS_D
    y = (one - ss) * invsqrt * u1
    return DecafPoint(x, y)

  def __bytes__(self):
    u1 = (self.X + self.T) * (self.X - self.T)
    _, invsqrt = sqrt_ratio(one, u1 * ONE_MINUS_D * self.X.sq)
    ratio = abs(invsqrt * u1 * SQRT_MINUS_D)
    u2 = INVSQRT_MINUS_D * ratio * self.Z - self.T
    s = abs(ONE_MINUS_D * invsqrt * self.X * u2)
    return tobytes(s.val)

  def __repr__(self): return point_name(self)
  def __str__(self): return bytes(self).hex()
  def __hash__(self): return hash(bytes(self))

  def __add__(self, othr: DecafPoint) -> DecafPoint:
    if not isinstance(othr, DecafPoint): return NotImplemented
    A = self.X * othr.X
    B = self.Y * othr.Y
    C = self.T * d * othr.T
    D = self.Z * othr.Z
    E = (self.X + self.Y) * (othr.X + othr.Y) - A - B
    F, G, H = D - C, D + C, B - A
    return DecafPoint(E * F, G * H, F * G, E * H)

  def __sub__(self, othr: DecafPoint) -> DecafPoint:
    return self + -othr

  def __neg__(self) -> DecafPoint:
    return DecafPoint(-self.X, self.Y, self.Z, -self.T)

  def __mul__(self, s: int) -> DecafPoint:
    """Multiply the point by scalar (not constant time)."""
    if not isinstance(s, int): return NotImplemented
    Q = ZERO  # Neutral element
    P = self
    s %= q
    while s > 0:
      if s & 1: Q += P
      P += P
      s >>= 1
    return Q

  def __rmul__(self, s: int) -> DecafPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, DecafPoint): raise TypeError(f"DecafPoints cannot be compared with {type(othr)}")
    # Equal up to the 2-torsion: x1 * y2 == y1 * x2
    return self.X * othr.Y - self.Y * othr.X == zero

# Neutral element
ZERO = DecafPoint(zero, one)

# Group generator (the standard decaf448 base point)
G = DecafPoint.from_bytes(bytes.fromhex(28 * "66" + 28 * "33"))


def point_name(P: DecafPoint) -> str:
  """Return variable names rather than the encoding for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, DecafPoint) and P == val:
      return name
  return f"DecafPoint({P})"
