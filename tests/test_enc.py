import pytest

from powtarget.errors import BadHexCharacter, InvalidTargetFormat
from powtarget.utils.enc import escaped, from_hex, hex_nibble, to_hex


def test_hex_nibble():
    assert hex_nibble("0") == 0
    assert hex_nibble("9") == 9
    assert hex_nibble("a") == 10
    assert hex_nibble("F") == 15
    assert hex_nibble("g") == -1
    assert hex_nibble("x") == -1


def test_from_hex_even_length():
    assert from_hex("0102ff") == b"\x01\x02\xff"
    assert from_hex("0x0102ff") == b"\x01\x02\xff"
    assert from_hex("ABcd") == b"\xab\xcd"


def test_from_hex_odd_length_leading_nibble():
    assert from_hex("abc") == b"\x0a\xbc"
    assert from_hex("0xf") == b"\x0f"


def test_from_hex_empty():
    assert from_hex("") == b""
    assert from_hex("0x") == b""


@pytest.mark.parametrize("bad,char", [("0g", "g"), ("g12", "g"), ("12z4", "z"), ("0x12 4", " ")])
def test_from_hex_raises(bad, char):
    with pytest.raises(BadHexCharacter) as exc:
        from_hex(bad)
    assert exc.value.char == char
    assert isinstance(exc.value, InvalidTargetFormat)


@pytest.mark.parametrize("bad", ["0g", "g12", "12z4"])
def test_from_hex_returns_empty_when_not_raising(bad):
    assert from_hex(bad, raise_on_error=False) == b""


def test_to_hex():
    assert to_hex(b"\x01\xab") == "01ab"
    assert to_hex(b"\x01\xab", add_prefix=True) == "0x01ab"
    assert to_hex(b"") == ""


def test_hex_round_trip_of_a_target():
    target = "00000000ffff" + "0" * 52
    assert to_hex(from_hex(target)) == target


def test_escaped_plain_text():
    assert escaped("abc") == '"abc"'
    assert escaped("") == '""'


def test_escaped_quotes_and_backslashes():
    assert escaped('a"b\\c') == '"a\\"b\\\\c"'


def test_escaped_pretty_escapes():
    assert escaped("\r\n\t\v") == '"\\r\\n\\t\\v"'


def test_escaped_control_and_non_ascii_bytes():
    assert escaped("\x01") == '"\\x01"'
    assert escaped("\x7f") == '"\x7f"'
    assert escaped("é") == '"\\xc3\\xa9"'
    assert escaped(b"\x00z\xff") == '"\\x00z\\xff"'


def test_escaped_all():
    assert escaped("ab", escape_all=True) == '"\\x61\\x62"'
    assert escaped('"\n', escape_all=True) == '"\\x22\\x0a"'
