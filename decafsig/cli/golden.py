from decafsig.cli.args import single
from decafsig.signature import derive_public_key, derive_secret, generate_keypair, sign
from decafsig.util import hex_decode

DEFAULT_MESSAGE = "Golden Vector Test"


def golden_vector(text: str, sk=None, randomizer=None) -> str:
  """Sign text and format everything as a Python dict literal for regression tests."""
  if sk is None:
    sk, pk = generate_keypair()
  else:
    pk = derive_public_key(derive_secret(sk))
  s, R = sign(text.encode(), sk, pk, randomizer)
  return f"""\
dict(
  sk=bytes.fromhex("{sk.hex()}"),
  pk=bytes.fromhex("{pk.hex()}"),
  msg={text!r},
  s=bytes.fromhex("{s.hex()}"),
  R=bytes.fromhex("{R.hex()}"),
),"""


def main_golden(args):
  if args.files:
    raise ValueError("Argument error, golden takes the message with -m")
  text = single(args.messages, "message", required=False)
  sk = single(args.identities, "secret key", required=False)
  randomizer = single(args.randomizer, "randomizer", required=False)
  print(golden_vector(
    DEFAULT_MESSAGE if text is None else text,
    None if sk is None else hex_decode(sk, "secret key"),
    None if randomizer is None else hex_decode(randomizer, "randomizer"),
  ))
