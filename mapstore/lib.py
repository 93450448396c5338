import inspect

from .exceptions import NotCallableError

SEQUENCE_TYPES = (list, tuple)

def nvl(*args):
  """Return the leftmost argument that is not None."""
  if len(args) < 2:
    raise IndexError("nvl takes at least two arguments.")
  for arg in args:
    if arg is not None:
      return arg
  return args[-1]

def check_callable(fn, name="callback"):
  if not callable(fn):
    raise NotCallableError(
      f"{name} must be callable. Got: {type(fn)}"
    )
  return fn

def positional_arity(fn):
  """
  Number of required positional arguments fn takes (at 
  least 1 if it takes any positional argument), or None
  if it takes *args. Parameters with defaults are not 
  counted so round, sum and friends only get the value. 
  Callables without an inspectable signature (e.g. some 
  builtins like bool) count as taking a single argument.
  """
  try:
    sig = inspect.signature(fn)
  except (TypeError, ValueError):
    return 1

  count = 0
  positional = False
  for param in sig.parameters.values():
    if param.kind == param.VAR_POSITIONAL:
      return None
    elif param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
      positional = True
      if param.default is param.empty:
        count += 1

  if positional:
    return max(count, 1)
  return 0

def arity_caller(fn, name="callback"):
  """
  Wrap fn so that it can be called with the full 
  (value, key, index, container) argument list while
  only receiving as many leading arguments as it declares.

  e.g. lambda v: v > 1 gets just the value, 
       lambda v, k: ... gets the value and the key.
  """
  check_callable(fn, name)
  n = positional_arity(fn)
  if n is None:
    return fn
  return lambda *args: fn(*args[:n])

def flatten(seq, depth=1):
  """
  Flatten nested lists and tuples inside seq by 
  depth levels. depth may be math.inf.
  """
  out = []
  for elem in seq:
    if depth >= 1 and isinstance(elem, SEQUENCE_TYPES):
      out.extend(flatten(elem, depth - 1))
    else:
      out.append(elem)
  return out
