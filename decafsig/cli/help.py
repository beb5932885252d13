import sys
from typing import NoReturn

import decafsig

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}decafsig {F}keygen {D}—{N} create a new secret key and its public key\n",
  sign=f"{C}decafsig {F}sign -i {N}seckey {D}[{F}-k {N}pubkey{D}] [{F}-r {N}randomizer{D}] [{F}-m {N}text {D}|{N} file {D}|{F} -{D}]{N}\n",
  verify=f"{C}decafsig {F}verify -k {N}pubkey {F}-s {N}signature {D}[{F}-m {N}text {D}|{N} file {D}|{F} -{D}]{N}\n",
  golden=f"{C}decafsig {F}golden {D}[{F}-m {N}text{D}] [{F}-i {N}seckey{D}] [{F}-r {N}randomizer{D}] —{N} print a test vector\n",
  bench=f"{C}decafsig {F}bench {D}[{F}-n {N}rounds{D}] —{N} run a performance benchmark for signing and verification\n",
)

usagetext = dict(
  keygen=f"""\
Generates a random secret key and prints it with the corresponding public key,
both as hex. Keep the secret key secret: anyone holding it can sign.
""",
  sign=f"""\
Signs a message given as text, as a file, or read from stdin with {F}-{N}. The
signature is printed in Base64.

  {F}-i {N}seckey         Secret key (hex) to sign with
  {F}-k {N}pubkey         Public key (hex) of the signer, saves deriving it again
  {F}-r {N}randomizer     32 bytes (hex) of nonce randomness, for reproducible output
  {F}-m {N}text           Sign this text (UTF-8) rather than a file
""",
  verify=f"""\
Verifies a signature. Prints {H}Signature OK{N} or fails with exit code 10.

  {F}-k {N}pubkey         Public key (hex) of the signer
  {F}-s {N}signature      Signature (Base64) as printed by {C}decafsig {F}sign{N}
  {F}-m {N}text           Verify this text (UTF-8) rather than a file
""",
  golden=f"""\
Prints a golden test vector: secret key, public key, message and signature.
A new key is generated unless {F}-i{N} is given, and the signature uses fresh
nonce randomness unless {F}-r{N} is given. The default message is
"Golden Vector Test".
""",
  bench=f"""\
Measures key generation, signing and verification, {F}-n{N} rounds each (default 5).
""",
)

introduction = f"""\
{T}Decafsig {decafsig.__version__} - hedged Schnorr signatures on decaf448              {N}
"""

shorthelp = f"""\
{introduction}
{''.join(usage.values())}
Getting started: {C}decafsig {F}help{N}
"""

cmdhelp = {mode: f"{usage[mode]}\n{usagetext[mode]}" for mode in usage}

allcommands = '\n\n'.join(cmdhelp.values())

exampleshelp = f"""\
{H}Examples:{N}

  - {C}decafsig {F}keygen{N}
  - {C}decafsig {F}sign -i {N}seckey {F}-m {N}"Hello, world!"
  - {C}decafsig {F}verify -k {N}pubkey {F}-s {N}signature {F}-m {N}"Hello, world!"
  - {C}decafsig {F}sign -i {N}seckey document.pdf
"""

fullhelp = f"""\
{introduction}
{allcommands}

{exampleshelp}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Decafsig {decafsig.__version__}")
  sys.exit(0)
