import sys

from edjubjub import eddsa, pubkey
from edjubjub.hashing import Hasher


def read_message(files) -> bytes:
  if len(files) > 1:
    raise ValueError("Only one file may be signed or verified at a time")
  if not files or files[0] is True:
    return sys.stdin.buffer.read()
  with open(files[0], "rb") as f:
    return f.read()


def main_sign(args):
  if len(args.identities) != 1:
    raise ValueError("Argument error, exactly one secret key should be specified with -i")
  if len(args.outfile) > 1:
    raise ValueError("Only one output file may be specified")
  hfunc = Hasher(args.hash)
  sk = pubkey.read_sk_any(args.identities[0])
  message = read_message(args.files)
  sig = pubkey.encode_sig(eddsa.sign(message, sk, hfunc))
  if args.outfile:
    with open(args.outfile[0], "w") as f:
      f.write(f"{sig}\n")
  else:
    print(sig)


def main_verify(args):
  if len(args.pubkeys) != 1:
    raise ValueError("Argument error, exactly one public key should be specified with -k")
  if len(args.signatures) != 1:
    raise ValueError("Argument error, exactly one signature should be specified with -S")
  hfunc = Hasher(args.hash)
  pk = pubkey.read_pk_any(args.pubkeys[0])
  sig = pubkey.read_sig_any(args.signatures[0])
  message = read_message(args.files)
  if not eddsa.verify(sig, message, pk, hfunc):
    raise ValueError("Signature mismatch")
  sys.stderr.write(f" ✅ Signature verified ({pubkey.encode_pk(pk)[:12]}…)\n")
