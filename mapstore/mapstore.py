import itertools
import warnings

from .exceptions import DepthError, UnsupportedDataType
from .lib import nvl, arity_caller, flatten, SEQUENCE_TYPES

import numpy as np

DEPRECATION_MESSAGE = "Will be removed in a future release"

def _nth(iterable, i):
  return next(itertools.islice(iterable, i, None))

def _pairs(data):
  """Yield (key, value) from a mapping or an iterable of pairs."""
  if isinstance(data, OrderedMap):
    yield from data._data.items()
    return
  elif hasattr(data, "items"):
    yield from data.items()
    return
  elif isinstance(data, (str, bytes, bytearray)):
    raise UnsupportedDataType(
      f"data must be a mapping or an iterable of (key, value) pairs. Got: {type(data)}"
    )

  try:
    iterator = iter(data)
  except TypeError:
    raise UnsupportedDataType(
      f"data must be a mapping or an iterable of (key, value) pairs. Got: {type(data)}"
    )

  for pair in iterator:
    try:
      key, value = pair
    except (TypeError, ValueError):
      raise UnsupportedDataType(
        f"Each element of data must be a (key, value) pair. Got: {pair!r}"
      )
    yield (key, value)

class OrderedMap:
  """
  An insertion ordered key -> value container with
  array style helpers (filter, map, split, first, last,
  random, ...) layered over the usual map operations.

  Re-setting an existing key updates its value but
  keeps its position.
  """
  __slots__ = ( "_data", "_seed", "_rng" )
  def __init__(self, data=None, seed=None):
    """
    data: None, a mapping (dict, OrderedMap, anything with .items())
      or an iterable of (key, value) pairs.
    seed: None, int, or numpy.random.SeedSequence used to seed
      the generator behind random, random_key and random_pair.
      Containers derived from a seeded one (clone, filter, ...)
      are seeded with a child of this seed; unseeded containers
      derive unseeded ones.
    """
    self._seed = seed
    self._rng = None

    self._data = {}
    if data is not None:
      for key, value in _pairs(data):
        self._data[key] = value

  @property
  def rng(self):
    """numpy Generator behind the random* methods, created on first use."""
    if self._rng is None:
      self._rng = np.random.default_rng(self._seed)
    return self._rng

  def _child_seed(self):
    # A function of the seed alone; deriving never mutates self.
    if self._seed is None:
      return None

    seed_seq = self._seed
    if not isinstance(seed_seq, np.random.SeedSequence):
      seed_seq = np.random.SeedSequence(seed_seq)

    return np.random.SeedSequence(
      seed_seq.entropy,
      spawn_key=tuple(seed_seq.spawn_key) + (0,),
      pool_size=seed_seq.pool_size,
    )

  def _derive(self, data=None):
    return OrderedMap(data, seed=self._child_seed())

  @property
  def size(self):
    """Returns number of keys."""
    return len(self._data)

  def __len__(self):
    return len(self._data)

  def __iter__(self):
    yield from self._data

  def __contains__(self, key):
    return key in self._data

  def __getitem__(self, key):
    try:
      return self._data[key]
    except KeyError:
      raise KeyError("{} was not found.".format(key))

  def __setitem__(self, key, value):
    self._data[key] = value

  def __delitem__(self, key):
    try:
      del self._data[key]
    except KeyError:
      raise KeyError("{} was not found.".format(key))

  def __eq__(self, other):
    if isinstance(other, OrderedMap):
      return list(self._data.items()) == list(other._data.items())
    elif hasattr(other, "items"):
      return self._data == dict(other.items())
    return NotImplemented

  def __repr__(self):
    return f"{type(self).__name__}({self._data!r})"

  def get(self, key, default=None):
    return self._data.get(key, default)

  def set(self, key, value):
    """Set key to value and return self so calls can be chained."""
    self._data[key] = value
    return self

  def delete(self, key):
    """Returns True if key was present and has been removed."""
    if key in self._data:
      del self._data[key]
      return True
    return False

  def has(self, key):
    return key in self._data

  def clear(self):
    self._data.clear()

  def keys(self):
    """All keys in insertion order as a new list."""
    return list(self._data.keys())

  def values(self):
    """All values in insertion order as a new list."""
    return list(self._data.values())

  def items(self):
    return list(self._data.items())

  def todict(self):
    return dict(self._data)

  def clone(self):
    """A shallow copy: new container, same pairs, same order."""
    return self._derive(self._data)

  def concat(self, *others):
    """
    Clone this container and merge every pair of each
    argument into the clone, in argument order. A key
    already present keeps its position and takes the
    later value.

    others: OrderedMaps, dicts or iterables of pairs
    """
    merged = self.clone()
    for other in others:
      for key, value in _pairs(other):
        merged._data[key] = value
    return merged

  def filter(self, predicate):
    """
    Returns a new container with the pairs for which
    predicate(value, key, index, container) is truthy.
    """
    predicate = arity_caller(predicate, "predicate")
    filtered = self._derive()
    for index, (key, value) in enumerate(self._data.items()):
      if predicate(value, key, index, self):
        filtered._data[key] = value
    return filtered

  def split(self, predicate):
    """
    Partition into (passed, failed) according to
    predicate(value, key, index, container).

    e.g. approved, unapproved = bots.split(lambda bot: bot.approved)
    """
    predicate = arity_caller(predicate, "predicate")
    passed, failed = self._derive(), self._derive()
    for index, (key, value) in enumerate(self._data.items()):
      if predicate(value, key, index, self):
        passed._data[key] = value
      else:
        failed._data[key] = value
    return (passed, failed)

  def map(self, fn):
    """
    Returns a list of fn(value, key, index, container)
    for every pair in insertion order.
    """
    fn = arity_caller(fn, "fn")
    return [
      fn(value, key, index, self)
      for index, (key, value) in enumerate(self._data.items())
    ]

  def _position(self, key):
    try:
      if key not in self._data:
        return -1
    except TypeError: # unhashable, so never present
      return -1
    for i, k in enumerate(self._data):
      if k == key:
        return i
    return -1

  def index_of(self, key, from_index=0):
    """
    Position of key in insertion order, searching forward
    from from_index. from_index is truncated toward zero and 
    a negative from_index counts back from the end. 
    Returns -1 if not found.
    """
    N = len(self)
    if N == 0 or from_index >= N:
      return -1

    if from_index <= -N:
      from_index = 0
    else:
      from_index = int(from_index)
      if from_index < 0:
        from_index += N

    pos = self._position(key)
    if pos < from_index:
      return -1
    return pos

  def last_index_of(self, key, from_index=None):
    """
    Position of key in insertion order, searching backward
    from from_index (default: the last position). from_index 
    is truncated toward zero and a negative from_index counts 
    back from the end. Returns -1 if not found.
    """
    N = len(self)
    if N == 0:
      return -1

    from_index = nvl(from_index, N - 1)
    if from_index <= -N - 1:
      return -1
    elif from_index >= N:
      from_index = N - 1
    else:
      from_index = int(from_index)
      if from_index < 0:
        from_index += N

    pos = self._position(key)
    if pos > from_index:
      return -1
    return pos

  def first(self):
    return next(iter(self._data.values()), None)

  def first_key(self):
    return next(iter(self._data), None)

  def last(self):
    return next(reversed(self._data.values()), None)

  def last_key(self):
    return next(reversed(self._data), None)

  def _random_index(self):
    N = len(self)
    if N == 0:
      return None
    return int(self.rng.integers(0, N))

  def random(self):
    """A uniformly chosen value or None if empty."""
    i = self._random_index()
    if i is None:
      return None
    return _nth(self._data.values(), i)

  def random_key(self):
    """A uniformly chosen key or None if empty."""
    i = self._random_index()
    if i is None:
      return None
    return _nth(self._data, i)

  def random_pair(self):
    """A uniformly chosen (key, value) tuple or None if empty."""
    i = self._random_index()
    if i is None:
      return None
    key = _nth(self._data, i)
    return (key, self._data[key])

  def flat(self, depth=1):
    """
    Deprecated.

    Returns a new container where list and tuple values
    are flattened by depth levels (math.inf flattens
    completely). Flattened values become lists.

    e.g. { 'a': [1, 2, [3, 4, [5, 6]]] }
      flat(1) -> { 'a': [1, 2, 3, 4, [5, 6]] }
      flat(2) -> { 'a': [1, 2, 3, 4, 5, 6] }
    """
    warnings.warn(DEPRECATION_MESSAGE, DeprecationWarning, stacklevel=2)
    if depth < 1:
      raise DepthError(f"depth must be at least 1. Got: {depth}")

    flattened = self.clone()
    for key, value in self._data.items():
      if isinstance(value, SEQUENCE_TYPES):
        flattened._data[key] = flatten(value, depth)
    return flattened

  def flat_map(self, fn):
    """
    Deprecated.

    Returns a new container where each list or tuple value
    is replaced by fn(element, index, sequence) applied to
    its elements, flattened by one level. Other values
    are kept as is.
    """
    warnings.warn(DEPRECATION_MESSAGE, DeprecationWarning, stacklevel=2)
    fn = arity_caller(fn, "fn")

    mapped = self.clone()
    for key, value in self._data.items():
      if not isinstance(value, SEQUENCE_TYPES):
        continue
      mapped._data[key] = flatten(
        ( fn(elem, i, value) for i, elem in enumerate(value) ), 1
      )
    return mapped

Store = OrderedMap
