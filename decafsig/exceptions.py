class LengthMismatchError(ValueError):
  """Operand lengths do not match the modulus or the expected size"""

class ZeroModulusError(ValueError):
  """Reduction by a zero modulus"""

class DecodeError(ValueError):
  """Bytes are not a valid canonical encoding of a group element"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
