# weight_classes.py
# Description: Generates fixed-weight binary vectors (Knuth's Algorithm L) and the
# table of truth-table indices grouped by Hamming weight.

from __future__ import annotations
from math import comb
from typing import Dict, Iterator, List, Optional, Tuple
from computations.bitvector import bits_to_index
from errors import ContractError


def binomial_coefficient(n: int, k: int) -> int:
    if n < 0 or k < 0:
        raise ContractError(f"Binomial coefficient needs non-negative arguments, got ({n}, {k}).")
    return comb(n, k)


def iter_combinations(s: int, t: int) -> Iterator[Tuple[int, ...]]:
    """
    Yields the ascending positions of the ones of every binary vector with s zeros
    and t ones, in the successor order of Knuth's Algorithm L (TAOCP 7.2.1.3).

    The positions live in an array of t cells followed by two sentinels (s+t and 0).
    Each step resets the longest prefix of consecutive positions to their minimal
    values and increments the first position that can move.
    """
    if s < 0 or t < 0:
        raise ContractError(f"Combination parameters must be non-negative, got s={s}, t={t}.")

    if t == 0:
        # Single all-zero vector.
        yield ()
        return

    positions = list(range(t)) + [s + t, 0]
    j = 0
    while j < t:
        yield tuple(positions[:t])

        j = 0
        while positions[j] + 1 == positions[j + 1]:
            positions[j] = j
            j += 1
        if j < t:
            positions[j] += 1


def generate_combinations(s: int, t: int) -> List[List[bool]]:
    # All length-(s+t) boolean vectors with exactly t ones.
    combinations = []
    for ones in iter_combinations(s, t):
        vector = [False] * (s + t)
        for pos in ones:
            vector[pos] = True
        combinations.append(vector)
    return combinations


def generate_combination_codes(s: int, t: int) -> List[int]:
    # Integer codes of the vectors produced by generate_combinations().
    return [bits_to_index(vector) for vector in generate_combinations(s, t)]


class WeightClassTable:
    """
    Indices in [0, 2^nvar) grouped by Hamming weight, for weights 1..max_weight.
    Read-only once built; table[w] holds C(nvar, w) indices.
    """

    def __init__(self, nvar: int, classes: Dict[int, Tuple[int, ...]]):
        self.nvar = nvar
        self._classes = dict(classes)

        for weight, indices in self._classes.items():
            expected = binomial_coefficient(nvar, weight)
            if len(indices) != expected or len(set(indices)) != expected:
                raise ContractError(
                    f"Weight class {weight} holds {len(indices)} indices, expected {expected} distinct ones.")

    @property
    def max_weight(self) -> int:
        return len(self._classes)

    def __getitem__(self, weight: int) -> Tuple[int, ...]:
        return self._classes[weight]

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self):
        return iter(sorted(self._classes))

    def items(self):
        return [(weight, self._classes[weight]) for weight in sorted(self._classes)]

    def __repr__(self):
        sizes = {weight: len(indices) for weight, indices in self.items()}
        return f"WeightClassTable(nvar={self.nvar}, sizes={sizes})"


def create_indices(nvar: int, max_weight: Optional[int] = None) -> WeightClassTable:
    # Builds the weight classes 1..max_weight (default nvar) of nvar-bit indices.
    if max_weight is None:
        max_weight = nvar
    if nvar < 0:
        raise ContractError(f"Number of variables must be non-negative, got {nvar}.")
    if max_weight < 0 or max_weight > nvar:
        raise ContractError(f"Requested weight classes up to {max_weight}, but only {nvar} variables exist.")

    classes = {}
    for weight in range(1, max_weight + 1):
        classes[weight] = tuple(generate_combination_codes(nvar - weight, weight))

    return WeightClassTable(nvar, classes)
