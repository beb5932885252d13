from secrets import token_bytes

import pytest
import rlp
from blake3 import blake3

from decafsig import KeyPair, Signature, derive_public_key, derive_secret, generate_keypair, sign, verify
from decafsig import signature as signmodule
from decafsig.elliptic import ZERO, G, q, tobytes, toint
from decafsig.exceptions import LengthMismatchError
from decafsig.signature import E_HASH_DST, NONCE_DST, ORDER_BYTES, challenge, create_secret, nonce

# Signatures made by an independent implementation (fresh nonce randomness)
GOLDEN_VECTORS = [
  dict(
    sk="d3038219539d7f542656e39cae386984b6c8fbfd94bbdae2137b368da886f2931f9aa921badc5b714d3d88c81aef701954311b83efb28e26",
    pk="ee93c4c8f2d58c57ec6f22e8624f4bcb132441638b3001d92f7c8be9a9e55c356e0834790c8348a233c2b3c6d09c8a11351491305c098059",
    msg="Golden Vector Test",
    s="4894eade4a5fec705d6bf9350a1b07915405b80c0b3de811bad6d819814e53736b95d1ccf897f366ca3493f71a5ca9dc75fc7f26b9460d34",
    R="2811c04c396574f3880587831f63ff65330eba583223f22d0a29cf057a0bd3d3a5273af2e5b0cc3342b39e24ed1a88bb708982e359a3431e",
  ),
  dict(
    sk="28c8c25ddaca004835640a0d76dffd2eb7e3b53758e7a323d849d81fbaf00dbb57ceced87557f06c126dc857f2eb66acd6188609c59bb608",
    pk="6082c782c08b46aa03043835788196f00b3569d642dad892e087ea453b833b5124e053f38efed0f8c330b8147de7e3891ee7ad2d61d03bee",
    msg="Hello, world!",
    s="3b11a2e417bae236e28e95fa5c68354475c1f030a81ae9a35030579c077b5cd27f750432c258173168a30b86fdf2ff768a7e82e45def502f",
    R="d45e9ac47e2d74b803e26080e0a656ddc8c253cd096c955b8cc089d9a333f191b39df11ccecb92a6aab1510b163c2d89627c7cad805089f7",
  ),
  dict(
    sk="cc736d766b718ec37547fc4743e5e84648dc993c839f76025aaec60bf7ceea3151c846270ffd923b655203f52ad9a53a1ea637bc97377628",
    pk="244a69894b6d6e8e6e14ddab25225824742deaf8dbf0ee2defd750f2722f7f9ef0b80d7e75d01242727999e015b22aae6148a43bd079390c",
    msg="",
    s="667331f829c01fc99c3e42488cd37d20b41858a54b64ebaf29bd0ca91c6b8b83887f0de11873bcb97d71cf02b6e63752920e9ea26ca65130",
    R="2eca632f118e3e278088c36c7c3e54700837df11e875a770e2f97725f694eced77bb5f42f27932a9c754f0be86b29e21a5709341e14fa99d",
  ),
  dict(
    sk="431ae2d0ea6fc99190069a037dc23b5e9708fd8ee7b3c4421684576e5d1b946c84fb72ff2b9ee7489d4306fcc2fca45c44213b5cc0d8da22",
    pk="de2f0f03d7902a93c59bc365b9c66f3926d55a5227b9ebac8ddff132da5495507b7d7149c87f13c6030d852526df1c5e1cc805ef3e2e7159",
    msg="                              ",
    s="0bd699220e0a70f0d08235c9c3778229783bc79431b81681de80bbeb58612bee7c8cfe67bfdd5721444b315f6ed685381253c51414711f11",
    R="72d6e97df26fc8a68258d96ccdb33f4f64aabefb135952b9708cfe63502bd0f2b5934e137a45e588091d5d37e5e84c326ec4e2a7d976e2e4",
  ),
  dict(
    sk="bb01be9bbe4a8aa0f9d2cd2cb9d398d1d0dcfadf6d860b636ed97872359be6d28b90bfc34145b313af73bc0ad47796831569455848b02d2f",
    pk="326ab5ea0961657cda26f0f8c81f29b092cbdefa44d954c42632edc52f6bf1c236825feb4a232cbf3d60050ecadf100b26542f3f086b397a",
    msg="The quick brown fox jumps over the lazy dog",
    s="86e7f39ffea7b3eb79f443c6b7829dcd25b9813932c9ddb82ba4a31fd30e4a4429c579bc134ee3b924e8a9e26a39eadc0978da1cc63d332b",
    R="cc5fa8d00c0efe48db56feab38c79075178fd60dd984564d1d02ce4064d67375d3519481b05b392d19b35ec17435bc71ca4d80b4bef4b07c",
  ),
]


@pytest.fixture(scope="module")
def keypair():
  return generate_keypair()


def flipbit(data: bytes, bit: int) -> bytes:
  b = bytearray(data)
  b[bit >> 3] ^= 1 << (bit & 7)
  return bytes(b)


@pytest.mark.parametrize("vector", GOLDEN_VECTORS, ids=lambda v: repr(v["msg"]))
def test_golden_vectors(vector):
  sk, pk = bytes.fromhex(vector["sk"]), bytes.fromhex(vector["pk"])
  sig = Signature(bytes.fromhex(vector["s"]), bytes.fromhex(vector["R"]))
  msg = vector["msg"].encode()
  assert verify(sig, msg, pk)
  # Key derivation reproduces the public key
  assert derive_public_key(derive_secret(sk)) == pk
  # And the signature is bound to this message and key
  assert not verify(sig, msg + b".", pk)
  assert not verify(sig, msg, bytes(G))


def test_math_model(keypair):
  sk, pk = keypair
  message = b"Math Check"
  randomizer = bytes([0x55]) * 32
  sig = sign(message, sk, pk, randomizer)

  # Recalculate everything with plain integers
  xbytes = bytes(derive_secret(sk))
  x = toint(xbytes)
  kdigest = blake3(rlp.encode([NONCE_DST, xbytes, randomizer, message])).digest(length=88)
  k = int.from_bytes(kdigest, "little") % q
  R = bytes(k * G)
  assert sig.R == R

  edigest = blake3(rlp.encode([E_HASH_DST, R, pk, message])).digest(length=88)
  e = int.from_bytes(edigest, "little") % q
  assert sig.s == tobytes((k + x * e) % q)

  # The helpers agree with the above
  assert toint(nonce(xbytes, randomizer, message)) == k
  assert toint(challenge(R, pk, message)) == e


def test_scalar_constraints():
  for _ in range(10):
    sk = token_bytes(56)
    scalar = derive_secret(sk)
    assert len(scalar) == 56
    assert toint(scalar) < q
    assert derive_public_key(scalar) == bytes(toint(scalar) * G)
  for _ in range(10):
    s = create_secret()
    assert len(s) == 56
    assert toint(s) < q
  assert derive_secret(b"seed") == derive_secret(b"seed")
  assert derive_secret(b"seed") != derive_secret(b"seed2")


def test_generate_keypair():
  kp = generate_keypair()
  assert isinstance(kp, KeyPair)
  assert len(kp.sk) == 56 and len(kp.pk) == 56
  assert toint(kp.sk) < q
  assert kp.pk == derive_public_key(derive_secret(kp.sk))
  assert generate_keypair().sk != kp.sk


def test_roundtrip(keypair):
  sk, pk = keypair
  for message in [b"", b"Example Message 123", token_bytes(1000)]:
    sig = sign(message, sk, pk)
    assert len(sig.s) == 56 and len(sig.R) == 56
    assert verify(sig, message, pk)
  # Public key derived when not given
  sig = sign(b"no pk", sk)
  assert verify(sig, b"no pk", pk)


def test_deterministic(keypair):
  sk, pk = keypair
  message = b"Deterministic Test"
  randomizer = bytes([0x42]) * 32
  sig1 = sign(message, sk, pk, randomizer)
  sig2 = sign(message, sk, pk, randomizer)
  assert sig1 == sig2
  # Without the randomizer the nonce is fresh each time
  sig3 = sign(message, sk, pk)
  sig4 = sign(message, sk, pk)
  assert sig3.R != sig4.R
  assert verify(sig3, message, pk) and verify(sig4, message, pk)
  # A different randomizer gives a different but valid signature
  sig5 = sign(message, sk, pk, bytes(32))
  assert sig5.R != sig1.R
  assert verify(sig5, message, pk)


def test_randomizer_not_modified(keypair):
  sk, pk = keypair
  randomizer = bytearray(b"\x07" * 32)
  sign(b"msg", sk, pk, randomizer)
  assert randomizer == b"\x07" * 32


def test_randomizer_length(keypair):
  sk, pk = keypair
  with pytest.raises(LengthMismatchError):
    sign(b"msg", sk, pk, bytes(31))
  with pytest.raises(LengthMismatchError):
    sign(b"msg", sk, pk, bytes(33))


def test_secrets_wiped(keypair, mocker):
  sk, pk = keypair
  wipe = mocker.spy(signmodule, "wipe")
  sign(b"msg", sk, pk, bytes(32))
  wipe.assert_called_once()
  buffers = wipe.call_args.args
  assert len(buffers) == 5
  for buf in buffers:
    assert buf == bytes(len(buf))


def test_secrets_wiped_on_error(keypair, mocker):
  sk, pk = keypair
  wipe = mocker.spy(signmodule, "wipe")
  mocker.patch.object(signmodule, "challenge", side_effect=RuntimeError("boom"))
  with pytest.raises(RuntimeError):
    sign(b"msg", sk, pk, bytes(32))
  wipe.assert_called_once()
  x, k, e, xe, randomness = wipe.call_args.args
  assert e is None and xe is None
  assert x == bytes(56) and k == bytes(56) and randomness == bytes(32)


def test_domain_separation(keypair):
  sk, pk = keypair
  message = b"Example Message 123"
  sig = sign(message, sk, pk)
  assert verify(sig, message, pk)
  assert not verify(sig, b"Example MessagE 123", pk)
  # Wrong public key
  assert not verify(sig, message, generate_keypair().pk)
  # Tags differ so the same inputs hash differently per purpose
  x = derive_secret(sk)
  assert nonce(x, bytes(32), message) != challenge(x, bytes(32), message)


def test_tamper(keypair):
  sk, pk = keypair
  message = b"Tamper sensitivity"
  sig = sign(message, sk, pk)
  for bit in [0, 7, 8, 100, 8 * len(message) - 1]:
    assert not verify(sig, flipbit(message, bit), pk)
  for bit in [0, 1, 200, 445, 447]:
    assert not verify(Signature(flipbit(sig.s, bit), sig.R), message, pk)
  for bit in [0, 1, 200, 400, 447]:
    assert not verify(Signature(sig.s, flipbit(sig.R, bit)), message, pk)
  assert verify(sig, message, pk)


def test_malformed(keypair):
  sk, pk = keypair
  message = b"Strictness"
  sig = sign(message, sk, pk)
  # Truncated and padded
  assert not verify(Signature(sig.s[:55], sig.R), message, pk)
  assert not verify(Signature(sig.s + b"\0", sig.R), message, pk)
  assert not verify(Signature(sig.s, sig.R[:55]), message, pk)
  assert not verify(Signature(sig.s, sig.R + b"\0"), message, pk)
  assert not verify(sig, message, pk[:55])
  # Garbage R and public key
  assert not verify(Signature(sig.s, bytes(56 * [1])), message, pk)
  assert not verify(sig, message, b"\xff" * 56)
  # Identity points
  assert not verify(Signature(sig.s, bytes(ZERO)), message, pk)
  assert not verify(sig, message, bytes(ZERO))
  # s not reduced modulo q
  assert not verify(Signature(tobytes(toint(sig.s) + q), sig.R), message, pk)
  assert not verify(Signature(ORDER_BYTES, sig.R), message, pk)
  # Not even a signature
  assert not verify(None, message, pk)
  assert not verify((sig.s,), message, pk)
  assert not verify(Signature(None, sig.R), message, pk)


def test_forged_identity_key():
  # With the identity as public key, R = s * G would verify any message
  s = tobytes(12345)
  forged = Signature(s, bytes(toint(s) * G))
  assert not verify(forged, b"anything", bytes(ZERO))


def test_signature_bytes(keypair):
  sk, pk = keypair
  sig = sign(b"serialize", sk, pk)
  data = bytes(sig)
  assert data == sig.s + sig.R
  assert Signature.from_bytes(data) == sig
  with pytest.raises(ValueError):
    Signature.from_bytes(data[:-1])


def test_integers_rejected(keypair):
  sk, pk = keypair
  # bytes(56) would be a well-known all-zero seed
  with pytest.raises(TypeError):
    derive_secret(56)
  with pytest.raises(TypeError):
    sign(b"msg", 56, pk)
  with pytest.raises(TypeError):
    sign(5, sk, pk)
  sig = sign(bytes(5), sk, pk)
  assert verify(sig, bytes(5), pk)
  assert not verify(sig, 5, pk)
