"""Decimal text for integer literals of any size.

``int``/``str`` refuse decimal conversions beyond the interpreter's digit
limit (4300 digits by default). Converting in fixed-size chunks keeps every
single conversion under that limit without touching the process-wide setting.
"""

_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def format_decimal(value: int) -> str:
    if -_CHUNK_BASE < value < _CHUNK_BASE:
        return str(value)

    remaining = abs(value)
    chunks: list[str] = []
    while remaining >= _CHUNK_BASE:
        remaining, chunk = divmod(remaining, _CHUNK_BASE)
        chunks.append(f"{chunk:0{_CHUNK_DIGITS}d}")
    chunks.append(str(remaining))

    sign = "-" if value < 0 else ""
    return sign + "".join(reversed(chunks))


def parse_decimal(text: str) -> int:
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if len(digits) <= _CHUNK_DIGITS:
        return int(text)

    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if negative else value
