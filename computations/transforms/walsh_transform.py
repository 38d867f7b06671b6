# walsh_transform.py
# Description: Fast Walsh transform, its inverse and the autocorrelation function
# of a Boolean function in polar form.
#
# All transforms work in place on a list owned by the caller and return a scalar
# (spectral radius or maximum autocorrelation). Clone the input first if the
# original vector is still needed.

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
from computations.bitvector import is_power_of_two, polar_to_bin
from errors import ContractError


def _check_range(vector: List[int], start: int, length: Optional[int]) -> int:
    if length is None:
        length = len(vector) - start
    if length < 2 or not is_power_of_two(length):
        raise ContractError(f"Transform length {length} is not a power of two >= 2.")
    if start < 0 or start + length > len(vector):
        raise ContractError(f"Range [{start}, {start + length}) exceeds vector of length {len(vector)}.")
    return length


def fast_walsh_transform(vector: List[int], start: int = 0, length: Optional[int] = None) -> int:
    """
    Computes the Walsh transform of vector[start:start+length] in place, using the
    O(N log N) butterfly (Carlet, "Cryptography and Error-Correcting Codes", p. 272).

    Each call splits the range into halves v0 and v1, sets v0 = v0 + v1 and
    v1 = v0 - v1, then recurses on both halves. The return value is the spectral
    radius (maximum absolute Walsh coefficient) of the range.
    """
    length = _check_range(vector, start, length)
    return _fwt(vector, start, length)


def _fwt(vector: List[int], start: int, length: int) -> int:
    half = length // 2

    for i in range(start, start + half):
        low = vector[i]
        vector[i] = low + vector[i + half]
        vector[i + half] = low - vector[i + half]

    if half > 1:
        return max(_fwt(vector, start, half), _fwt(vector, start + half, half))

    # Block of two: both entries are final Walsh coefficients.
    return max(abs(vector[start]), abs(vector[start + half]))


def inverse_walsh_transform(vector: List[int], start: int = 0, length: Optional[int] = None) -> int:
    """
    Inverse of fast_walsh_transform(): same butterfly with every combined value
    halved. Applying it to a Walsh spectrum gives back the polar truth table.

    The return value is the maximum absolute coefficient outside position 0. Position 0
    of an autocorrelation function is always 2^n, so the base block starting at index 0
    reports vector[1] instead.
    """
    length = _check_range(vector, start, length)
    return _inverse_fwt(vector, start, length)


def _inverse_fwt(vector: List[int], start: int, length: int) -> int:
    half = length // 2

    for i in range(start, start + half):
        total = vector[i] + vector[i + half]
        if total & 1:
            raise ContractError(
                f"Coefficients at {i} and {i + half} have odd sum {total}; input is not a Walsh spectrum.")
        low = vector[i]
        vector[i] = total // 2
        vector[i + half] = (low - vector[i + half]) // 2

    if half > 1:
        return max(_inverse_fwt(vector, start, half), _inverse_fwt(vector, start + half, half))

    if start == 0:
        return abs(vector[start + half])
    return max(abs(vector[start]), abs(vector[start + half]))


def autocorrelation(vector: List[int], from_truth_table: bool = True) -> int:
    """
    Computes the autocorrelation function in place (Wiener-Khinchin): r = IWT(W^2).

    If from_truth_table is True, vector holds the polar truth table and its Walsh
    transform is computed first. Otherwise vector already holds the Walsh spectrum.
    Returns the maximum absolute autocorrelation coefficient over nonzero shifts.
    """
    length = _check_range(vector, 0, None)
    if from_truth_table:
        _fwt(vector, 0, length)

    for i in range(length):
        vector[i] *= vector[i]

    return _inverse_fwt(vector, 0, length)


def walsh_spectrum(polar: Sequence[int]) -> Tuple[List[int], int]:
    # Non-mutating helper: (spectrum, spectral radius) of a polar truth table.
    spectrum = list(polar)
    radius = fast_walsh_transform(spectrum)
    return spectrum, radius


def spectrum_to_truth_table(spectrum: Sequence[int]) -> List[bool]:
    # Recovers the boolean truth table from a Walsh spectrum.
    polar = list(spectrum)
    inverse_walsh_transform(polar)
    return polar_to_bin(polar)
