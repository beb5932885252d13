"""Hedged-nonce Schnorr signatures over decaf448, with constant-time scalar arithmetic."""

__version__ = "0.1.0"

from .signature import KeyPair, Signature, derive_public_key, derive_secret, generate_keypair, sign, verify
