from time import perf_counter

from decafsig.exceptions import CliArgError
from decafsig.signature import generate_keypair, sign, verify


def main_bench(args):
  try:
    rounds = int(args.rounds)
  except ValueError:
    raise CliArgError(f"Invalid number of rounds: {args.rounds}") from None
  if rounds < 1:
    raise CliArgError("At least one round is needed")

  message = bytes(1000)
  keytotal = signtotal = verifytotal = 0
  for i in range(rounds):
    print("KEYGEN", end="", flush=True)
    t0 = perf_counter()
    sk, pk = generate_keypair()
    dur = perf_counter() - t0
    keytotal += dur
    print(f"{dur * 1e3:7.1f} ms", end="", flush=True)

    print("  ➤   SIGN", end="", flush=True)
    t0 = perf_counter()
    signature = sign(message, sk, pk)
    dur = perf_counter() - t0
    signtotal += dur
    print(f"{dur * 1e3:7.1f} ms", end="", flush=True)

    print("  ➤   VERIFY", end="", flush=True)
    t0 = perf_counter()
    ok = verify(signature, message, pk)
    dur = perf_counter() - t0
    verifytotal += dur
    print(f"{dur * 1e3:7.1f} ms")
    if not ok:
      raise ValueError("Benchmark signature did not verify")

  print(f"Ran {rounds} cycles of key generation, signing and verification of a {len(message)} byte message.\n")
  print(f"Average key generation {keytotal / rounds * 1e3:7.1f} ms")
  print(f"Average signing        {signtotal / rounds * 1e3:7.1f} ms")
  print(f"Average verification   {verifytotal / rounds * 1e3:7.1f} ms")
