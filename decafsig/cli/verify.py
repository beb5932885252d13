from decafsig.cli.args import read_message, single
from decafsig.signature import Signature, verify
from decafsig.util import armor_decode, hex_decode


def main_verify(args):
  pk = hex_decode(single(args.pubkeys, "public key"), "public key")
  signature = Signature.from_bytes(armor_decode(single(args.signatures, "signature")))
  message = read_message(args)
  if not verify(signature, message, pk):
    raise ValueError("Signature verification failed")
  print("Signature OK")
