import sys
from typing import NoReturn

import colorama

from edjubjub.cli.args import argparse
from edjubjub.cli.keys import main_keygen, main_pubkey
from edjubjub.cli.sig import main_sign, main_verify

modes = {
  "keygen": main_keygen,
  "pubkey": main_pubkey,
  "sign": main_sign,
  "verify": main_verify,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling edjubjub.eddsa directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Normal errors: malformed keys, signature mismatch, ...

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()

  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
