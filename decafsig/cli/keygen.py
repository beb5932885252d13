from decafsig.signature import generate_keypair


def main_keygen(args):
  if args.files:
    raise ValueError("Argument error, keygen takes no files")
  sk, pk = generate_keypair()
  print(f"sk: {sk.hex()}")
  print(f"pk: {pk.hex()}")
