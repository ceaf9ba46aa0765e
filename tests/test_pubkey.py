import pytest

from edjubjub import pubkey
from edjubjub.eddsa import new_keypair, sign
from edjubjub.exceptions import MalformedKeyError, NotOnCurveError
from edjubjub.hashing import Hasher

SEED = b"eddsa".ljust(32, b"\x00")


@pytest.fixture(scope="module")
def keys():
  pub, priv = new_keypair(SEED)
  return pub, priv, sign(b"message", priv, Hasher())


def test_key_strings(keys):
  pk, sk, sig = keys
  pkstr = pubkey.encode_pk(pk)
  skstr = pubkey.encode_sk(sk)
  sigstr = pubkey.encode_sig(sig)
  assert len(pkstr) == 86
  assert len(skstr) == 171
  assert len(sigstr) == 128
  assert pubkey.decode_pk(pkstr) == pk
  assert pubkey.decode_sk(skstr) == sk
  assert pubkey.decode_sig(sigstr) == sig
  # Surrounding whitespace is fine
  assert pubkey.decode_pk(f"  {pkstr}\n") == pk
  assert pubkey.decode_pk(pk.to_pem()) == pk


def test_wrong_lengths(keys):
  pk, sk, sig = keys
  # A signature is not a key, even though it is long enough
  with pytest.raises(MalformedKeyError) as exc:
    pubkey.decode_pk(pubkey.encode_sig(sig))
  assert "expected 64 bytes, got 96" in str(exc.value)

  with pytest.raises(MalformedKeyError):
    pubkey.decode_sk(pubkey.encode_pk(pk))

  with pytest.raises(MalformedKeyError) as exc:
    pubkey.decode_sig("not a signature")
  assert "Unrecognized signature" in str(exc.value)


def test_not_on_curve():
  with pytest.raises(NotOnCurveError):
    pubkey.decode_pk(86 * "A")


def test_key_files(keys, tmp_path):
  pk, sk, sig = keys
  skfile = tmp_path / "secret.key"
  skfile.write_text(f"# my key\n\n{pubkey.encode_sk(sk)}\n")
  assert pubkey.read_sk_file(str(skfile)) == sk
  assert pubkey.read_sk_any(str(skfile)) == sk
  assert pubkey.read_sk_any(pubkey.encode_sk(sk)) == sk

  pkfile = tmp_path / "public.pem"
  pk.dump_pem(pkfile)
  assert pubkey.read_pk_file(str(pkfile)) == pk
  assert pubkey.read_pk_any(str(pkfile)) == pk
  assert pubkey.read_pk_any(pubkey.encode_pk(pk)) == pk
  pkfile.write_text(pubkey.encode_pk(pk))
  assert pubkey.read_pk_any(str(pkfile)) == pk

  sigfile = tmp_path / "message.sig"
  sigfile.write_text(pubkey.encode_sig(sig) + "\n")
  assert pubkey.read_sig_any(str(sigfile)) == sig
  assert pubkey.read_sig_any(pubkey.encode_sig(sig)) == sig


def test_bad_files(keys, tmp_path):
  pk, sk, sig = keys
  with pytest.raises(ValueError) as exc:
    pubkey.read_pk_file(str(tmp_path / "non-existent-file.pub"))
  assert "Keyfile" in str(exc.value)

  with pytest.raises(ValueError) as exc:
    pubkey.read_sk_file(str(tmp_path / "non-existent-file"))
  assert "Secret key file" in str(exc.value)

  empty = tmp_path / "empty.pub"
  empty.write_text("\n")
  with pytest.raises(ValueError) as exc:
    pubkey.read_pk_file(str(empty))
  assert "Nothing found" in str(exc.value)

  twokeys = tmp_path / "two.key"
  twokeys.write_text(f"{pubkey.encode_sk(sk)}\n{pubkey.encode_sk(sk)}\n")
  with pytest.raises(MalformedKeyError) as exc:
    pubkey.read_sk_file(str(twokeys))
  assert "exactly one key" in str(exc.value)

  binary = tmp_path / "binary.key"
  binary.write_bytes(b"\xff\xfe")
  with pytest.raises(ValueError) as exc:
    pubkey.read_sk_file(str(binary))
  assert "UTF-8" in str(exc.value)
