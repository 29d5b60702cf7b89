from typing import Union

from ..errors import BadHexCharacter

HEX_CHARSET = "0123456789abcdef"

_PRETTY_ESCAPES = {"\r": "r", "\n": "n", "\t": "t", "\v": "v"}


def hex_nibble(ch: str) -> int:
    """Value of a single hex digit, -1 if it is not one."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    return -1


def from_hex(s: str, raise_on_error: bool = True) -> bytes:
    """Decode a hex string (optional 0x prefix) to bytes.

    An odd number of digits decodes the first one as a lone nibble byte.
    Returns b"" on a bad character unless raise_on_error is set.
    """
    start = 2 if s[:2] == "0x" else 0
    out = bytearray()

    if (len(s) - start) % 2:
        h = hex_nibble(s[start])
        if h == -1:
            if raise_on_error:
                raise BadHexCharacter("bad hex character", s, s[start])
            return b""
        out.append(h)
        start += 1

    for i in range(start, len(s), 2):
        h = hex_nibble(s[i])
        l = hex_nibble(s[i + 1])
        if h == -1 or l == -1:
            if raise_on_error:
                bad = s[i] if h == -1 else s[i + 1]
                raise BadHexCharacter("bad hex character", s, bad)
            return b""
        out.append(h * 16 + l)
    return bytes(out)


def to_hex(data: bytes, add_prefix: bool = False) -> str:
    return ("0x" if add_prefix else "") + data.hex()


def escaped(s: Union[str, bytes], escape_all: bool = False) -> str:
    """Quote and escape a string for log output.

    Text is UTF-8 encoded first; bytes outside printable ASCII become \\xNN.
    """
    raw = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    parts = ['"']
    for b in raw:
        ch = chr(b)
        if escape_all:
            parts.append("\\x" + HEX_CHARSET[b // 16] + HEX_CHARSET[b % 16])
        elif ch == '"':
            parts.append('\\"')
        elif ch == "\\":
            parts.append("\\\\")
        elif ch in _PRETTY_ESCAPES:
            parts.append("\\" + _PRETTY_ESCAPES[ch])
        elif b < 0x20 or b > 0x7F:
            parts.append("\\x" + HEX_CHARSET[b // 16] + HEX_CHARSET[b % 16])
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)
