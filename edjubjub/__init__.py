# EdDSA signatures on BabyJubjub, the twisted Edwards curve of the BN256 scalar field

__version__ = "0.1.0"

from edjubjub.eddsa import challenge_hash, new_keypair, sign, verify
from edjubjub.encoding import PrivateKey, PublicKey, Signature
from edjubjub.exceptions import EdDSAError, HashWriteError, MalformedKeyError, NotOnCurveError, ShortBufferError
from edjubjub.hashing import Hasher
