import math
import numbers
import string
from decimal import Decimal

from ..errors import DivisionByZero, InvalidDifficulty, InvalidTargetFormat

# Standard Bitcoin-style diff1 target, the target of difficulty 1
BASE_TARGET = int(
    "00000000ffff0000000000000000000000000000000000000000000000000000", 16
)

# Dividend for hash-count estimates. Equals BASE_TARGET << 32 but is kept as
# its own literal, the two directions are not exact inverses.
ESTIMATE_DIVIDEND = int(
    "ffff000000000000000000000000000000000000000000000000000000000000", 16
)

# Difficulty 0 accepts any hash
MAX_TARGET = int(
    "ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff", 16
)

TARGET_BITS = 256
TARGET_HEX_DIGITS = TARGET_BITS // 4

_HEX_ALPHABET = frozenset(string.hexdigits)


def normalize_be_hex(h: str) -> str:
    """Normalize a hex string to 64 characters (32 bytes), zero-padded."""
    return h.lower().zfill(TARGET_HEX_DIGITS)


def render_target(target_int: int, add_prefix: bool = False) -> str:
    """Render a target as 64 lowercase hex digits, optionally 0x-prefixed."""
    if target_int < 0 or target_int.bit_length() > TARGET_BITS:
        raise InvalidTargetFormat("target does not fit in 256 bits", hex(target_int))
    rendered = normalize_be_hex(format(target_int, "x"))
    return "0x" + rendered if add_prefix else rendered


def parse_target(target: str) -> int:
    """Parse a hex target (optional 0x prefix) into an int below 2**256."""
    if not isinstance(target, str):
        raise InvalidTargetFormat("target must be a hex string", target)
    digits = target[2:] if target[:2] in ("0x", "0X") else target
    if not digits:
        raise InvalidTargetFormat("target is empty", target)
    # int() also tolerates whitespace, signs and underscores
    if not _HEX_ALPHABET.issuperset(digits):
        raise InvalidTargetFormat("target contains non-hex characters", target)
    try:
        value = int(digits, 16)
    except ValueError as e:
        raise InvalidTargetFormat(f"target is not a hex numeral: {e}", target) from e
    if value.bit_length() > TARGET_BITS:
        raise InvalidTargetFormat("target is wider than 256 bits", target)
    return value


def _check_difficulty(difficulty) -> float:
    if isinstance(difficulty, bool) or not isinstance(difficulty, numbers.Real):
        raise InvalidDifficulty("difficulty must be a real number", difficulty)
    try:
        value = float(difficulty)
    except (OverflowError, TypeError, ValueError) as e:
        raise InvalidDifficulty(f"difficulty is not representable: {e}", difficulty) from e
    if math.isnan(value) or math.isinf(value):
        raise InvalidDifficulty("difficulty must be finite", difficulty)
    if value < 0:
        raise InvalidDifficulty("difficulty must not be negative", difficulty)
    return value


def _decimal_digits(value: float) -> str:
    """17 significant digits of a float as positional decimal text."""
    # %.17g, trailing zeros dropped
    text = format(value, ".17g")
    if "e" in text or "E" in text:
        # Moves the decimal point only, the 17 digits are kept
        text = format(Decimal(text), "f")
    return text


def difficulty_to_target(difficulty: float, add_prefix: bool = False) -> str:
    """
    Convert a share/network difficulty to its 256-bit target.

    The reciprocal 1/difficulty is rendered as decimal text and the integer
    and fractional digits are multiplied into BASE_TARGET as exact integers,
    so no bits of the 256-bit base are lost to a float multiply. The
    fractional contribution is truncated by integer division.

    Args:
        difficulty: Finite, non-negative difficulty. 0 yields the maximum target.
        add_prefix: Prepend "0x" to the result.

    Returns:
        64 lowercase hex digits, optionally "0x"-prefixed.

    Raises:
        InvalidDifficulty: Negative, NaN, infinite, or small enough that the
            target would not fit in 256 bits.
    """
    value = _check_difficulty(difficulty)
    if value == 0:
        return render_target(MAX_TARGET, add_prefix)

    reciprocal = 1 / value
    if not math.isfinite(reciprocal):
        raise InvalidDifficulty("difficulty is too small", difficulty)

    integer_digits, _, fraction_digits = _decimal_digits(reciprocal).partition(".")
    target_int = BASE_TARGET * int(integer_digits, 10)

    if fraction_digits:
        # Scale comes from the unstripped digit count
        precision = len(fraction_digits)
        significant = fraction_digits.lstrip("0")
        if significant:
            numerator = int(significant, 10)
            denominator = 10**precision
            target_int += (BASE_TARGET * numerator) // denominator

    if target_int.bit_length() > TARGET_BITS:
        raise InvalidDifficulty("difficulty yields a target wider than 256 bits", difficulty)
    return render_target(target_int, add_prefix)


def target_to_difficulty_estimate(target: str) -> float:
    """
    Estimate from a hex target as ESTIMATE_DIVIDEND // target, as a float.

    With the dividend being 2**32 times the diff1 target this is roughly the
    number of hashes expected per solution, i.e. difficulty * 2**32.
    """
    divisor = parse_target(target)
    if divisor == 0:
        raise DivisionByZero("target is zero", target)
    return float(ESTIMATE_DIVIDEND // divisor)


def target_to_diff1(target) -> float:
    """Convert a target value (int or hex string) to difficulty (diff1-based)."""
    if isinstance(target, str):
        target_int = parse_target(target)
    else:
        target_int = target
        if target_int < 0 or target_int.bit_length() > TARGET_BITS:
            raise InvalidTargetFormat("target is outside the 256-bit range", target)
    if target_int == 0:
        raise DivisionByZero("target is zero", target)
    return BASE_TARGET / target_int


def hash_meets_target(hash_hex: str, target: str) -> bool:
    """A hash is a valid solution if its integer value is <= the target."""
    return parse_target(hash_hex) <= parse_target(target)
