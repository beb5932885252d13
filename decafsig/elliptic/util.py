def toint(x) -> int:
  if isinstance(x, int): return x
  if len(x) != 56: raise ValueError("Should be exactly 56 bytes")
  return int.from_bytes(x, "little")

def tobytes(x: int) -> bytes:
  return x.to_bytes(56, "little")
