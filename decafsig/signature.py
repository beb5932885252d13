from __future__ import annotations

from secrets import token_bytes
from typing import NamedTuple, Optional

from .consttime import add, clone, mod, mult, wipe
from .elliptic import ZERO, DecafPoint, G, q, tobytes, toint
from .exceptions import LengthMismatchError
from .util import hashq

# Hedged-nonce Schnorr signatures over decaf448, hashed with BLAKE3.
#
# Every hash input is RLP encoded together with a domain separation tag, so
# that hashes for different purposes, or with shifted item boundaries, can
# never coincide. The tags must stay byte-identical for interoperability.

SCALAR_BYTES = 56
POINT_BYTES = 56
RANDOMIZER_BYTES = 32

ORDER_BYTES = tobytes(q)

E_HASH_DST = b"DST:type=signature,curve=curve448-decaf,hash=blake3,nonce=hedged,for=e-hash"
NONCE_DST = b"DST:type=signature,curve=curve448-decaf,hash=blake3,nonce=hedged,for=nonce-hash"
DERIVE_DST = b"DST:type=signature,curve=curve448-decaf,hash=blake3,nonce=hedged,for=derive-secret"


class Signature(NamedTuple):
  s: bytes
  R: bytes

  def __bytes__(self):
    return bytes(self.s) + bytes(self.R)

  @staticmethod
  def from_bytes(data) -> Signature:
    if len(data) != SCALAR_BYTES + POINT_BYTES:
      raise ValueError(f"Signature should be exactly {SCALAR_BYTES + POINT_BYTES} bytes")
    return Signature(bytes(data[:SCALAR_BYTES]), bytes(data[SCALAR_BYTES:]))


class KeyPair(NamedTuple):
  sk: bytes
  pk: bytes


def create_secret(order=ORDER_BYTES) -> bytearray:
  """A uniformly random scalar, oversampled by 32 bytes before reduction."""
  return mod(token_bytes(len(order) + 32), order)


def derive_secret(secret, order=ORDER_BYTES) -> bytearray:
  """
  Derives the signing scalar from a high-entropy secret value.

  Deterministic and one-way. The same scalar is used for signing and, through
  derive_public_key, for the public key.
  """
  return hashq(DERIVE_DST, secret, order=order)


def nonce(derived, randomness, message, order=ORDER_BYTES) -> bytearray:
  """Hedged nonce k = H(DST, secret, randomness, message) mod order"""
  return hashq(NONCE_DST, derived, randomness, message, order=order)


def challenge(R, P, message, order=ORDER_BYTES) -> bytearray:
  """Challenge e = H(DST, R, P, message) mod order"""
  return hashq(E_HASH_DST, R, P, message, order=order)


def derive_public_key(sk) -> bytes:
  """The public key of a derived secret scalar, as a point encoding."""
  return bytes(G * toint(bytes(sk)))


def generate_keypair() -> KeyPair:
  sk = bytes(create_secret())
  return KeyPair(sk, derive_public_key(derive_secret(sk)))


def sign(message: bytes, secret: bytes, public_key: Optional[bytes] = None, randomizer: Optional[bytes] = None) -> Signature:
  """
  Sign a message.

  :param message: the message to be signed
  :param secret: the secret key (the seed, not the derived scalar)
  :param public_key: the signer's public key; derived from secret if not given.
    A given key is trusted as is, and a wrong one only shows up as signatures
    that do not verify.
  :param randomizer: 32 bytes of nonce randomness; fresh random if not given.
    Providing it makes signing deterministic.
  :raises LengthMismatchError: if the randomizer is not 32 bytes
  """
  if randomizer is not None and len(randomizer) != RANDOMIZER_BYTES:
    raise LengthMismatchError(f"Randomizer should be exactly {RANDOMIZER_BYTES} bytes")
  x = k = e = xe = randomness = None
  try:
    x = derive_secret(secret)
    # Allow callers to skip re-deriving the public key on repeated signing
    P = derive_public_key(x) if public_key is None else bytes(public_key)
    randomness = bytearray(token_bytes(RANDOMIZER_BYTES)) if randomizer is None else clone(randomizer)
    k = nonce(x, randomness, message)
    R = bytes(G * toint(bytes(k)))
    e = challenge(R, P, message)
    # s = k + x * e
    xe = mult(x, e, ORDER_BYTES)
    s = add(k, xe, ORDER_BYTES)
    return Signature(bytes(s), R)
  finally:
    # Best-effort: only our own bytearrays can be cleared
    wipe(x, k, e, xe, randomness)


def verify(signature: Signature, message: bytes, public_key: bytes) -> bool:
  """
  Verify that a signature on a message was made by the holder of public_key.

  Returns False for any invalid input, without telling which check failed.
  """
  try:
    s, Rs = signature
    if len(s) != SCALAR_BYTES or len(Rs) != POINT_BYTES:
      return False
    R = DecafPoint.from_bytes(Rs)
    P = DecafPoint.from_bytes(public_key)
    if R == ZERO or P == ZERO:
      return False
    sval = toint(bytes(s))
    if sval >= q:
      return False
    e = toint(bytes(challenge(Rs, public_key, message)))
    # s * G == R + e * P
    return G * sval == R + P * e
  except (TypeError, ValueError):  # DecodeError is a ValueError
    return False
