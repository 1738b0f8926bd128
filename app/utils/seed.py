"""Deterministic seeds for image generation"""


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def string_hash(text: str) -> int:
    """
    Rolling hash over UTF-16 code units (h * 31 + unit), folded to a signed
    32-bit integer at every step.

    Matches the hash the web client computes, so a term gets the same seed
    on both sides.
    """
    # surrogatepass keeps lone surrogates as their own code units
    data = text.encode("utf-16-le", "surrogatepass")
    result = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        result = _to_int32(result * 31 + unit)
    return result


INT32_MAX = 0x7FFFFFFF


def term_seed(term: str) -> int:
    """Seed for a term: hash of the lower-cased, trimmed term, made non-negative"""
    # abs(-2**31) is 2**31, outside the int32 seed Gemini accepts; clamp that one value
    return min(abs(string_hash(term.lower().strip())), INT32_MAX)
