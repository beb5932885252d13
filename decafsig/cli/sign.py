from decafsig.cli.args import read_message, single
from decafsig.signature import sign
from decafsig.util import armor_encode, hex_decode


def main_sign(args):
  sk = hex_decode(single(args.identities, "secret key"), "secret key")
  pk = single(args.pubkeys, "public key", required=False)
  if pk is not None: pk = hex_decode(pk, "public key")
  randomizer = single(args.randomizer, "randomizer", required=False)
  if randomizer is not None: randomizer = hex_decode(randomizer, "randomizer")
  message = read_message(args)
  signature = sign(message, sk, pk, randomizer)
  print(armor_encode(bytes(signature)))
