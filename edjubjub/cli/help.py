import sys
from typing import NoReturn

import edjubjub
from edjubjub.hashing import algorithms

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}edjubjub {F}keygen {D}[{F}-s {N}seedhex{D}] [{F}-o {N}secret.key{D}] [{F}--pem {N}public.pem{D}]{N}\n",
  pubkey=f"{C}edjubjub {F}pubkey -i {N}secret.key {D}[{F}--pem {N}public.pem{D}]{N}\n",
  sign=f"{C}edjubjub {F}sign -i {N}secret.key {D}[{F}--hash {N}sha256{D}] [{N}file{D}]{N}\n",
  verify=f"{C}edjubjub {F}verify -k {N}pubkey {F}-S {N}signature {D}[{F}--hash {N}sha256{D}] [{N}file{D}]{N}\n",
)

usagetext = dict(
  keygen=f"""\
Create a key pair. The same seed always gives the same keys, and without a
seed a random one is used. The secret key is written to the output file, or
printed after the public key when no file is given.

  {F}-s {N}seedhex        32 byte secret seed as 64 hex digits
  {F}-o{N} FILENAME       Write the secret key to this file
  {F}--pem{N} FILENAME    Also write the public key as a PEM file
""",
  pubkey=f"""\
Show the public key of a secret key file.

  {F}-i {N}seckey         Secret key file or key string
  {F}--pem{N} FILENAME    Also write the public key as a PEM file
""",
  sign=f"""\
Sign a file, or standard input if no file or {F}-{N} is given. The signature is
printed (or written to {F}-o{N} file). Signatures are deterministic: signing the
same message with the same key always gives the same signature.

  {F}-i {N}seckey         Secret key file or key string
  {F}--hash{N} NAME       Challenge hash, must match on verification (default sha256)
""",
  verify=f"""\
Verify the signature of a file, or of standard input if no file or {F}-{N} is given.

  {F}-k {N}pubkey         Public key string, PEM file or key file
  {F}-S {N}signature      Signature string or file
  {F}--hash{N} NAME       Challenge hash used when signing (default sha256)
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"edjubjub {edjubjub.__version__} - EdDSA signatures on the BN256 twisted Edwards curve"
if len(introduction) > 78:  # git version string is too long
  introduction = f"edjubjub {edjubjub.__version__} - EdDSA on BabyJubjub"

introduction = f"""\
{T}{introduction:78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
  {F}--hash{N} NAME       One of {", ".join(algorithms)}
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"edjubjub {edjubjub.__version__}")
  sys.exit(0)
