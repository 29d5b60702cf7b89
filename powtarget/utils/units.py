HASHRATE_SUFFIXES = ("h", "Kh", "Mh", "Gh")


def format_hashrate(rate: float) -> str:
    """Format a hash rate with two decimals and a unit, e.g. 1500 -> "1.50 Kh"."""
    value = float(rate)
    i = 0
    while value >= 1000.0 and i < len(HASHRATE_SUFFIXES) - 1:
        value /= 1000.0
        i += 1
    return f"{value:.2f} {HASHRATE_SUFFIXES[i]}"
