# A plain Python submodule for the decaf448 prime order group.

# Follows the decaf448 encoding of RFC 9496 on top of Ed448-Goldilocks
# (RFC 8032 curve, a = 1, d = -39081).
# https://datatracker.ietf.org/doc/html/rfc9496

# Not constant time: scalar multiplication branches on the scalar bits. The
# byte-level scalar arithmetic of decafsig.consttime is where the signing
# secrets are combined; the points produced from them are public anyway but a
# side channel on k * G would still leak the nonce.

# Public symbols are imported here. Lower case constants are scalars (int or
# fe), upper case are DecafPoints.

from .ed import G, ZERO, DecafPoint, d
from .scalar import fe, minus1, one, p, q, sqrt_ratio, zero
from .util import tobytes, toint
