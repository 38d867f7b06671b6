# moebius_transform.py
# Description: Fast Möbius transform (truth table <-> ANF) with the algebraic degree
# computed during the recursion.

from __future__ import annotations
from typing import List, Optional, Sequence
from computations.bitvector import index_to_bits, is_power_of_two, popcount
from errors import ContractError


def fast_moebius_transform(vector: List[bool], start: int = 0, length: Optional[int] = None) -> int:
    """
    Computes the Möbius transform of vector[start:start+length] in place. On a truth
    table this yields the ANF coefficients, and on ANF coefficients the truth table
    (the transform is an involution).

    Each call splits the range into halves v0 and v1 and sets v1 = v0 XOR v1, then
    recurses on both halves. The return value is the algebraic degree of the range,
    i.e. the largest Hamming weight of an index holding a nonzero coefficient.
    """
    if length is None:
        length = len(vector) - start
    if length < 2 or not is_power_of_two(length):
        raise ContractError(f"Transform length {length} is not a power of two >= 2.")
    if start < 0 or start + length > len(vector):
        raise ContractError(f"Range [{start}, {start + length}) exceeds vector of length {len(vector)}.")
    return _fmt(vector, start, length)


def _fmt(vector: List[bool], start: int, length: int) -> int:
    half = length // 2

    for i in range(start, start + half):
        vector[i + half] = vector[i] ^ vector[i + half]

    if half > 1:
        return max(_fmt(vector, start, half), _fmt(vector, start + half, half))

    # Block of two: start and start+1 differ only in the lowest index bit, so the
    # higher index always has exactly one more set bit than the lower one.
    low_set = vector[start]
    high_set = vector[start + half]
    if not low_set and not high_set:
        return 0
    if not high_set:
        return popcount(start)
    return popcount(start + half)


def anf_expression(anf: Sequence[bool], nvar: int) -> str:
    # Human-readable ANF, e.g. "f(x1,x2,x3) = 1 + x1 + x2x3".
    variables = ",".join(f"x{pos + 1}" for pos in range(nvar))
    terms = []
    for index, coefficient in enumerate(anf):
        if not coefficient:
            continue
        if index == 0:
            terms.append("1")
            continue
        bits = index_to_bits(index, nvar)
        terms.append("".join(f"x{pos + 1}" for pos in range(nvar) if bits[pos]))

    body = " + ".join(terms) if terms else "0"
    return f"f({variables}) = {body}"
