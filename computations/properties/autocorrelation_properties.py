from __future__ import annotations
from typing import List
from computations.properties.base_properties import PropertyComputation, check_indices
from computations.transforms.walsh_transform import autocorrelation
from computations.deviations import compute_deviations, compute_order
from computations.combinatorics.weight_classes import WeightClassTable
from boolfun_object import BooleanFunction
from registry import REG


def sum_of_squares(coefficients: List[int]) -> int:
    return sum(value * value for value in coefficients)


def count_linear_structures(ac_spectrum: List[int]) -> int:
    # Nonzero shifts a with |r(a)| = 2^n (the derivative in direction a is constant).
    length = len(ac_spectrum)
    return sum(1 for value in ac_spectrum[1:] if abs(value) == length)


class AutocorrelationProperties(PropertyComputation):
    """
    Autocorrelation spectrum, maximum autocorrelation, sum-of-squares indicator,
    number of nonzero linear structures and deviations from the propagation criterion.
    Reuses the Walsh spectrum if it was already computed.
    """
    def compute_properties(self, boolfun: BooleanFunction, indices: WeightClassTable) -> dict:
        check_indices(boolfun, indices)

        walsh_spectrum = boolfun.properties.get("walsh_spectrum")
        if walsh_spectrum is not None:
            ac_spectrum = list(walsh_spectrum)
            ac_max = autocorrelation(ac_spectrum, from_truth_table=False)
        else:
            ac_spectrum = boolfun.get_polar_table()
            ac_max = autocorrelation(ac_spectrum, from_truth_table=True)

        pc_deviations = compute_deviations(ac_spectrum, indices)

        return {
            "ac_spectrum": ac_spectrum,
            "ac_max": ac_max,
            "ssi": sum_of_squares(ac_spectrum),
            "nz_linear_structures": count_linear_structures(ac_spectrum),
            "pc_deviations": pc_deviations,
            "pc_order": compute_order(pc_deviations),
        }


@REG.register("property", "ac_prop")
def autocorrelation_aggregator(boolfun: BooleanFunction, indices: WeightClassTable) -> None:
    result = AutocorrelationProperties().compute_properties(boolfun, indices)
    for key, value in result.items():
        boolfun.store(key, value)
