class EdDSAError(ValueError):
  """Base class of all errors raised by edjubjub"""

class ShortBufferError(EdDSAError):
  """Fewer bytes than the fixed size of the structure being decoded"""

class NotOnCurveError(EdDSAError):
  """A decoded or computed point does not satisfy the curve equation"""

class HashWriteError(EdDSAError):
  """The caller-supplied hash function failed while being written to"""

class MalformedKeyError(EdDSAError):
  """Armored or PEM key text is malformed or of the wrong type"""
