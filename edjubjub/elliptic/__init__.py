# A plain Python submodule for twisted Edwards curve math over the BN256 scalar field

# Modelled after the Ed25519 arithmetic of Covert, with the general twisted
# Edwards addition law (a != -1) from Hisil, Wong, Carter and Dawson, 2008.
# https://eprint.iacr.org/2008/522

# Not constant time, not zeroing buffers after use. Curve parameters are never
# global state of the arithmetic: every point carries its TwistedEdwards value.

# Public symbols are imported here. These are very low level primitives.

from .ed import BN256, EdPoint, TwistedEdwards
from .scalar import FIELD_SIZE, fe, minus1, one, p, zero
from .util import prune, tobytes, toint
