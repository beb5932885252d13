import sys

from decafsig.cli.help import print_help, print_version
from decafsig.exceptions import CliArgError
from decafsig.util import encode


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.identities = []
    self.pubkeys = []
    self.signatures = []
    self.messages = []
    self.randomizer = []
    self.rounds = "5"
    self.debug = None


keygenargs = dict(debug='--debug'.split(),)

signargs = dict(
  identities='-i --identity'.split(),
  pubkeys='-k --pubkey'.split(),
  messages='-m --message'.split(),
  randomizer='-r --randomizer'.split(),
  debug='--debug'.split(),
)

verifyargs = dict(
  pubkeys='-k --pubkey'.split(),
  signatures='-s --signature'.split(),
  messages='-m --message'.split(),
  debug='--debug'.split(),
)

goldenargs = dict(
  identities='-i --identity'.split(),
  messages='-m --message'.split(),
  randomizer='-r --randomizer'.split(),
  debug='--debug'.split(),
)

benchargs = dict(
  rounds='-n --rounds'.split(),
  debug='--debug'.split(),
)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('keygen', 'key'): return 'keygen', keygenargs
  if arg in ('sign', ): return 'sign', signargs
  if arg in ('verify', ): return 'verify', verifyargs
  if arg in ('golden', ): return 'golden', goldenargs
  if arg in ('bench', 'benchmark'): return 'bench', benchargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing due to argparse module's limitations
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (keygen/sign/verify/golden/bench/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  shortargs = [flag[1:] for switches in ad.values() for flag in switches if not flag.startswith("--")]
  for a in aiter:
    aprint = a
    if not a.startswith('-'):
      args.files.append(a)
      continue
    if a == '-':
      args.files.append(True)
      continue
    if a == '--':
      args.files += aiter
      break
    if a.startswith('--'):
      a = a.lower()
    if not a.startswith('--') and len(a) > 2:
      if any(arg not in shortargs for arg in list(a[1:])):
        falseargs = [arg for arg in list(a[1:]) if arg not in shortargs]
        print_help(args.mode, f' 💣  Unknown argument: decafsig {args.mode} {a} (failing -{" -".join(falseargs)})')
      a = [f'-{shortarg}' for shortarg in list(a[1:]) if shortarg in shortargs]
    if isinstance(a, str):
      a = [a]
    for av in a:
      argvar = next((k for k, v in ad.items() if av in v), None)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: decafsig {args.mode} {aprint}')
      try:
        var = getattr(args, argvar)
        if isinstance(var, list):
          var.append(next(aiter))
        elif isinstance(var, str):
          setattr(args, argvar, next(aiter))
        else:
          setattr(args, argvar, True)
      except StopIteration:
        print_help(args.mode, f' 💣  Argument parameter missing: decafsig {args.mode} {aprint} …')

  return args


def single(values: list, name: str, required=True):
  """The one value given for an option, or None if optional and not given."""
  if len(values) > 1:
    raise CliArgError(f"Only one {name} may be specified")
  if not values:
    if required: raise CliArgError(f"A {name} must be specified")
    return None
  return values[0]


def read_message(args) -> bytes:
  """The message from -m, a file argument or stdin (-)."""
  if len(args.messages) + len(args.files) != 1:
    raise CliArgError("Exactly one message must be given: -m text, a file, or - for stdin")
  if args.messages:
    return encode(args.messages[0])
  if args.files[0] is True:
    return sys.stdin.buffer.read()
  with open(args.files[0], "rb") as f:
    return f.read()
