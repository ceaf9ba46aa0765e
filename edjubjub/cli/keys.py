import sys
from secrets import token_bytes

from edjubjub import eddsa, pubkey


def main_keygen(args):
  if args.files:
    raise ValueError("Argument error, keygen takes no files")
  if len(args.outfile) > 1:
    raise ValueError("Only one output file may be specified")
  if args.seed:
    try:
      seed = bytes.fromhex(args.seed)
    except ValueError:
      raise ValueError("The seed should be given as hex digits")
  else:
    seed = token_bytes(eddsa.SEED_SIZE)
  pk, sk = eddsa.new_keypair(seed)
  print(pubkey.encode_pk(pk))
  if args.outfile:
    with open(args.outfile[0], "w") as f:
      f.write(f"{pubkey.encode_sk(sk)}\n")
    sys.stderr.write(f" 🔑 Secret key written to {args.outfile[0]}\n")
  else:
    print(f" ╰─ {pubkey.encode_sk(sk)}")
  if args.pem:
    pk.dump_pem(args.pem)
    sys.stderr.write(f" 📝 Public key written to {args.pem}\n")


def main_pubkey(args):
  if len(args.identities) != 1:
    raise ValueError("Argument error, exactly one secret key should be specified with -i")
  sk = pubkey.read_sk_any(args.identities[0])
  print(pubkey.encode_pk(sk.pub_key))
  if args.pem:
    sk.pub_key.dump_pem(args.pem)
    sys.stderr.write(f" 📝 Public key written to {args.pem}\n")
