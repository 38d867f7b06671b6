# bitvector.py
# Description: Conversions between the boolean, polar, decimal and hexadecimal
# encodings of a truth table.

from typing import List, Optional, Sequence
from computations import default_settings
from errors import ContractError, EncodingError


def _bit_order() -> str:
    order = default_settings.BIT_ORDER
    if order not in default_settings.SUPPORTED_BIT_ORDERS:
        raise ContractError(f"Unsupported bit order '{order}'. Use one of {default_settings.SUPPORTED_BIT_ORDERS}.")
    return order


# --------------------------------------------------------------
# Lengths and indices
# --------------------------------------------------------------
def is_power_of_two(length: int) -> bool:
    return length > 0 and (length & (length - 1)) == 0


def nvar_from_length(length: int) -> int:
    # Number of variables of a truth table with the given length (2^n, n >= 1).
    if length < 2 or not is_power_of_two(length):
        raise ContractError(f"Truth table length {length} is not a power of two >= 2.")
    return length.bit_length() - 1


def hamming_weight(bits: Sequence[bool]) -> int:
    return sum(1 for bit in bits if bit)


def popcount(value: int) -> int:
    return bin(value).count("1")


def index_to_bits(index: int, nvar: int) -> List[bool]:
    # Input vector (x1, ..., xn) encoded by a truth table index.
    if index < 0 or index >= (1 << nvar):
        raise ContractError(f"Index {index} is out of range for {nvar} variables.")
    if _bit_order() == "msb":
        return [bool((index >> (nvar - 1 - pos)) & 1) for pos in range(nvar)]
    return [bool((index >> pos) & 1) for pos in range(nvar)]


def bits_to_index(bits: Sequence[bool]) -> int:
    value = 0
    if _bit_order() == "msb":
        for bit in bits:
            value = (value << 1) | (1 if bit else 0)
    else:
        for pos, bit in enumerate(bits):
            if bit:
                value |= 1 << pos
    return value


# --------------------------------------------------------------
# Boolean <-> polar
# --------------------------------------------------------------
def bin_to_polar(bits: Sequence[bool]) -> List[int]:
    # false -> +1, true -> -1.
    return [-1 if bit else 1 for bit in bits]


def polar_to_bin(polar: Sequence[int]) -> List[bool]:
    bits = []
    for idx, value in enumerate(polar):
        if value == 1:
            bits.append(False)
        elif value == -1:
            bits.append(True)
        else:
            raise EncodingError(f"Polar vector must only hold +1/-1. Found {value} at index {idx}.")
    return bits


# --------------------------------------------------------------
# Boolean <-> decimal
# --------------------------------------------------------------
def bin_to_dec(bits: Sequence[bool]) -> int:
    return bits_to_index(bits)


def dec_to_bin(value: int, length: int) -> List[bool]:
    # Fixed-length bit vector of a non-negative integer. Never truncates.
    if not isinstance(value, int) or isinstance(value, bool):
        raise EncodingError(f"Decimal code must be an integer, got {type(value).__name__}.")
    if value < 0:
        raise EncodingError("Decimal code must be non-negative.")
    if value.bit_length() > length:
        raise EncodingError(f"Decimal code needs {value.bit_length()} bits, more than the {length} available.")

    if _bit_order() == "msb":
        return [bool((value >> (length - 1 - pos)) & 1) for pos in range(length)]
    return [bool((value >> pos) & 1) for pos in range(length)]


# --------------------------------------------------------------
# Decimal strings
# --------------------------------------------------------------
# CPython refuses int <-> str conversions above sys.get_int_max_str_digits() digits
# (4300 by default, 640 at the lowest setting). Longer codes go through in chunks.
_DECIMAL_CHUNK = 600


def dec_to_str(value: int) -> str:
    # Same as str(value), for codes of any length.
    if value < 0:
        return "-" + dec_to_str(-value)
    # Upper bound on the number of decimal digits (log10(2) ~ 0.30103).
    digits = value.bit_length() * 30103 // 100000 + 1
    if digits <= _DECIMAL_CHUNK:
        return str(value)
    half = digits // 2
    high, low = divmod(value, 10 ** half)
    return dec_to_str(high) + dec_to_str(low).zfill(half)


def str_to_dec(text: str) -> int:
    # Parses a non-negative decimal code of any length. Only ASCII digits are accepted.
    text = text.strip()
    if not text or any(char not in "0123456789" for char in text):
        raise EncodingError(f"'{text}' is not a decimal integer.")
    return _digits_to_dec(text)


def _digits_to_dec(digits: str) -> int:
    if len(digits) <= _DECIMAL_CHUNK:
        return int(digits)
    half = len(digits) // 2
    return _digits_to_dec(digits[:-half]) * 10 ** half + _digits_to_dec(digits[-half:])


# --------------------------------------------------------------
# Hexadecimal
# --------------------------------------------------------------
def hex_to_dec(hex_code: str) -> int:
    if not isinstance(hex_code, str) or not hex_code:
        raise EncodingError("Hex code must be a non-empty string.")
    # int(..., 16) alone would also take a "0x" prefix, "_" separators and signs.
    for char in hex_code.upper():
        if char not in default_settings.HEX_DIGITS:
            raise EncodingError(f"Invalid hex digit '{char}' in '{hex_code}'.")
    return int(hex_code, 16)


def dec_to_hex(value: int, hex_length: int) -> str:
    # Upper-case, zero-padded hex string with exactly hex_length digits.
    if value < 0:
        raise EncodingError("Decimal code must be non-negative.")
    if value.bit_length() > 4 * hex_length:
        raise EncodingError(f"Decimal code needs {value.bit_length()} bits, more than {hex_length} hex digits hold.")
    return format(value, f"0{hex_length}X")


def bin_to_hex(bits: Sequence[bool]) -> str:
    if len(bits) % 4 != 0:
        raise EncodingError(f"Bit vector length {len(bits)} is not divisible by 4.")
    return dec_to_hex(bin_to_dec(bits), len(bits) // 4)


def hex_to_bin(hex_code: str, length: Optional[int] = None) -> List[bool]:
    # If length is given, the hex code must spell exactly that many bits.
    bit_length = 4 * len(hex_code)
    if length is not None and bit_length != length:
        raise EncodingError(
            f"Hex code '{hex_code}' has {len(hex_code)} digits, expected {length // 4} for {length} bits.")
    return dec_to_bin(hex_to_dec(hex_code), bit_length)


# --------------------------------------------------------------
# Binary strings
# --------------------------------------------------------------
def str_to_bin(text: str) -> List[bool]:
    # "0110" -> [False, True, True, False]. Element order follows the string.
    text = text.strip()
    bits = []
    for char in text:
        if char == "1":
            bits.append(True)
        elif char == "0":
            bits.append(False)
        else:
            raise EncodingError(f"Invalid binary digit '{char}' in '{text}'.")
    return bits


def bin_to_str(bits: Sequence[bool]) -> str:
    return "".join("1" if bit else "0" for bit in bits)
