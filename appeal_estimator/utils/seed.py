"""Deterministic address seed used by every synthetic estimate."""

_UINT32 = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def address_seed(address: str) -> int:
    """Return a stable non-negative seed for an address string.

    Polynomial hash (``hash * 31 + code``) over the UTF-16 code units of the
    address, wrapped to a signed 32-bit integer after every step, then made
    non-negative with ``abs``. The result is identical to the seed the web
    front end computes, so estimates line up across both.
    """

    encoded = address.encode("utf-16-le", errors="surrogatepass")
    hash_value = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        hash_value = (hash_value * 31 + code_unit) & _UINT32

    if hash_value & _INT32_SIGN:
        hash_value -= 1 << 32
    return abs(hash_value)
