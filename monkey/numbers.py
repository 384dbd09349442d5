# int() and str() refuse more than sys.get_int_max_str_digits() digits, so
# integers are converted in fixed-size chunks instead
CHUNK = 1000
CHUNK_BASE = 10 ** CHUNK


def digits_to_int(digits):
    value = 0
    for start in range(0, len(digits), CHUNK):
        chunk = digits[start:start + CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_digits(value):
    if value < 0:
        return "-" + int_to_digits(-value)
    chunks = []
    while value >= CHUNK_BASE:
        value, low = divmod(value, CHUNK_BASE)
        chunks.append(str(low).zfill(CHUNK))
    chunks.append(str(value))
    return "".join(reversed(chunks))
