class InvalidArgument(ValueError):
  """
  An argument violated the contract of the call it was passed to.
  """
  pass

class NotCallableError(InvalidArgument, TypeError):
  """
  Raised when a callback passed to filter, map, split or
  flat_map is not callable.
  """
  pass

class DepthError(InvalidArgument):
  """
  Flatten depth out of range.
  """
  pass

class UnsupportedDataType(InvalidArgument, TypeError):
  pass
