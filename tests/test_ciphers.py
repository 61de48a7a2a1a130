"""
mpags_cipher - cipher family and factory tests
==============================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_ciphers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pickle

import pytest
from mpags_cipher.ciphers    import (CipherMode, CaesarCipher, VigenereCipher,
                                     PlayfairCipher)
from mpags_cipher.factory    import CipherKind, create_cipher
from mpags_cipher.exceptions import (KeyValidationError, SegmentAlignmentError,
                                     UnsupportedCharacterError, WorkerFailure)
from mpags_cipher.transform  import sanitize, transform_char

ENC, DEC = CipherMode.ENCRYPT, CipherMode.DECRYPT
PLAIN    = sanitize("The quick brown fox jumps over 13 lazy dogs")

# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_vector():
    c = create_cipher(CipherKind.CAESAR, "3")
    assert c.apply("ABC", ENC) == "DEF"
    assert c.apply("DEF", DEC) == "ABC"

def test_caesar_wraps_and_keeps_case():
    c = CaesarCipher(3)
    assert c.apply("XYZxyz", ENC) == "ABCabc"

@pytest.mark.parametrize("raw, shift", [("0", 0), ("26", 0), ("29", 3), ("-1", 25), (" 7 ", 7)])
def test_caesar_key_normalised(raw, shift):
    assert create_cipher("caesar", raw).key == shift

def test_caesar_roundtrip():
    c = create_cipher("caesar", "11")
    assert c.apply(c.apply(PLAIN, ENC), DEC) == PLAIN

# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_vector():
    v = create_cipher(CipherKind.VIGENERE, "LEMON")
    assert v.apply("ATTACKATDAWN", ENC) == "LXFOPVEFRNHR"
    assert v.apply("LXFOPVEFRNHR", DEC) == "ATTACKATDAWN"

def test_vigenere_key_upper_cased():
    assert create_cipher("vigenere", "lemon").key == "LEMON"

def test_vigenere_offset_sets_key_phase():
    v = VigenereCipher("LEMON")
    whole = v.apply("ATTACKATDAWN", ENC)
    # "KATDAWN" starts at offset 5: key phase wraps back to L
    assert v.apply("KATDAWN", ENC, start_offset=5) == whole[5:]
    assert v.apply("TACK", ENC, start_offset=2) == whole[2:6]

def test_vigenere_roundtrip():
    v = create_cipher("vigenere", "CHRISTMAN")
    assert v.apply(v.apply(PLAIN, ENC), DEC) == PLAIN

def test_vigenere_keeps_case():
    v = VigenereCipher("LEMON")
    ct = v.apply("attackAtDawn", ENC)
    assert ct == "lxfopvEfRnhr"
    assert v.apply(ct, DEC) == "attackAtDawn"

def test_vigenere_keeps_case_from_offset():
    v = VigenereCipher("LEMON")
    assert v.apply("AtDawn", ENC, start_offset=6) == "EfRnhr"

# ── Playfair ──────────────────────────────────────────────────────────────────
def test_playfair_square():
    p = create_cipher(CipherKind.PLAYFAIR, "PLAYFAIREXAMPLE")
    assert p.square == ("PLAYF", "IREXM", "BCDGH", "KNOQS", "TUVWZ")

def test_playfair_vector():
    p = create_cipher(CipherKind.PLAYFAIR, "PLAYFAIREXAMPLE")
    ct = p.apply("HIDETHEGOLDINTHETREESTUMP", ENC)
    assert ct == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert p.apply(ct, DEC) == "HIDETHEGOLDINTHETREXESTUMP"

def test_playfair_prepare_splits_doubles_and_pads():
    p = PlayfairCipher("KEYWORD")
    assert p.prepare("BALLOON", ENC) == "BALXLOON"
    assert p.prepare("ABC", ENC) == "ABCX"
    assert p.prepare("AXX", ENC) == "AXXQ"
    assert p.prepare("JAM", ENC) == "IAMX"

def test_playfair_prepare_idempotent():
    p = PlayfairCipher("KEYWORD")
    once = p.prepare(PLAIN, ENC)
    assert p.prepare(once, ENC) == once
    assert len(once) % 2 == 0

def test_playfair_decrypt_prepare_only_pads():
    p = PlayfairCipher("KEYWORD")
    assert p.prepare("AAB", DEC) == "AABX"

def test_playfair_roundtrip_recovers_prepared_text():
    p = create_cipher("playfair", "monarchy")
    assert p.apply(p.apply(PLAIN, ENC), DEC) == p.prepare(PLAIN, ENC)

def test_playfair_rejects_odd_offset():
    p = PlayfairCipher("KEYWORD")
    with pytest.raises(SegmentAlignmentError):
        p.apply("AB", ENC, start_offset=3)

# ── Alphabet checks ───────────────────────────────────────────────────────────
@pytest.mark.parametrize("cipher", [CaesarCipher(1), VigenereCipher("KEY"), PlayfairCipher("KEY")])
def test_out_of_alphabet_rejected(cipher):
    with pytest.raises(UnsupportedCharacterError) as info:
        cipher.apply("AB7D", ENC)
    assert info.value.details["position"] == 2

def test_unsupported_character_error_pickles():
    err = pickle.loads(pickle.dumps(UnsupportedCharacterError("!", 4)))
    assert isinstance(err, UnsupportedCharacterError)
    assert err.details == {"char": "!", "position": 4}

def test_worker_failure_pickles_with_errors():
    failure = WorkerFailure([(1, UnsupportedCharacterError("!", 4))])
    restored = pickle.loads(pickle.dumps(failure))
    (idx, exc), = restored.errors
    assert idx == 1
    assert isinstance(exc, UnsupportedCharacterError)
    assert str(restored) == str(failure)

# ── Factory validation ────────────────────────────────────────────────────────
@pytest.mark.parametrize("kind, key", [
    ("caesar", ""),
    ("caesar", "three"),
    ("caesar", "3.5"),
    ("vigenere", ""),
    ("vigenere", "LE MON"),
    ("vigenere", "key1"),
    ("playfair", "   "),
    ("playfair", "PLAYFÄIR"),
])
def test_factory_rejects_bad_keys(kind, key):
    with pytest.raises(KeyValidationError):
        create_cipher(kind, key)

def test_factory_rejects_unknown_kind():
    with pytest.raises(KeyValidationError):
        create_cipher("enigma", "ABC")

def test_factory_rejects_missing_key():
    with pytest.raises(KeyValidationError):
        create_cipher(CipherKind.VIGENERE, None)

# ── Direct construction ───────────────────────────────────────────────────────
@pytest.mark.parametrize("build", [
    lambda: CaesarCipher("3"),
    lambda: CaesarCipher(3.0),
    lambda: CaesarCipher(True),
    lambda: VigenereCipher(""),
    lambda: VigenereCipher("le mon"),
    lambda: VigenereCipher(None),
    lambda: PlayfairCipher(""),
    lambda: PlayfairCipher("key2"),
])
def test_constructor_rejects_bad_keys(build):
    with pytest.raises(KeyValidationError):
        build()

def test_constructor_normalises_keyword():
    assert VigenereCipher(" lemon ").key == "LEMON"
    p = PlayfairCipher("playfairexample")
    assert p.key == "PLAYFAIREXAMPLE"
    assert p.square == ("PLAYF", "IREXM", "BCDGH", "KNOQS", "TUVWZ")
    assert p.apply("ZZTOP", ENC) == PlayfairCipher("PLAYFAIREXAMPLE").apply("ZZTOP", ENC)

# ── Sanitiser ─────────────────────────────────────────────────────────────────
def test_sanitize():
    assert sanitize("Hello, World 42!") == "HELLOWORLDFOURTWO"

@pytest.mark.parametrize("ch, out", [("a", "A"), ("Z", "Z"), ("0", "ZERO"), (" ", ""), ("é", "")])
def test_transform_char(ch, out):
    assert transform_char(ch) == out


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
