"""
Insertion ordered map with array style helpers.

OrderedMap (also exported as Store) behaves like a dict 
that remembers insertion order and adds the conveniences 
you'd otherwise reach for a list for: filter, map, split, 
index_of, first/last and random access.

Simple Example:

  from mapstore import OrderedMap

  bots = OrderedMap([ ("alpha", 1), ("beta", 2), ("gamma", 3) ])

  approved, rejected = bots.split(lambda score: score > 1)
  print(approved.keys())

  >>> ['beta', 'gamma']

  print(bots.index_of("beta"), bots.first(), bots.last())

  >>> 1 1 3
"""

from .mapstore import OrderedMap, Store, DEPRECATION_MESSAGE
from .exceptions import *
