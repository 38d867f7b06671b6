# deviations.py
# Description: Deviations of a spectrum from correlation immunity / propagation
# criterion, per weight order, and the resulting order.

from typing import List, Sequence
from computations.combinatorics.weight_classes import WeightClassTable
from errors import ContractError


def compute_deviations(coefficients: Sequence[int], indices: WeightClassTable) -> List[int]:
    """
    deviations[w-1] is the largest |coefficients[a]| over all a with 1 <= wt(a) <= w.

    With the Walsh spectrum this measures the distance from correlation immunity of
    order w, with the autocorrelation function the distance from PC(w). The result
    is non-decreasing in w.
    """
    size = len(coefficients)
    deviations: List[int] = []

    for weight, weight_indices in indices.items():
        deviation = 0
        for index in weight_indices:
            if index >= size:
                raise ContractError(
                    f"Weight class index {index} is out of range for {size} coefficients.")
            value = abs(coefficients[index])
            if value > deviation:
                deviation = value

        # Order w also has to account for all lower orders.
        for lower in deviations:
            if lower > deviation:
                deviation = lower

        deviations.append(deviation)

    return deviations


def compute_order(deviations: Sequence[int]) -> int:
    # Number of leading zero deviations.
    order = 0
    while order < len(deviations) and deviations[order] == 0:
        order += 1
    return order
