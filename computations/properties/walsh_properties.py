from __future__ import annotations
from computations.properties.base_properties import PropertyComputation, check_indices
from computations.transforms.walsh_transform import fast_walsh_transform
from computations.deviations import compute_deviations, compute_order
from computations.combinatorics.weight_classes import WeightClassTable
from boolfun_object import BooleanFunction
from registry import REG


def compute_nonlinearity(spectral_radius: int, nvar: int) -> int:
    # Distance to the closest affine function: 2^(n-1) - radius/2.
    return (1 << (nvar - 1)) - spectral_radius // 2


class WalshProperties(PropertyComputation):
    """
    Walsh spectrum, spectral radius, nonlinearity and the deviations from
    correlation immunity (resiliency if the function is balanced).
    """
    def compute_properties(self, boolfun: BooleanFunction, indices: WeightClassTable) -> dict:
        check_indices(boolfun, indices)

        # The transform overwrites its input, so work on a copy of the polar table.
        spectrum = boolfun.get_polar_table()
        radius = fast_walsh_transform(spectrum)

        ci_deviations = compute_deviations(spectrum, indices)

        return {
            "walsh_spectrum": spectrum,
            "spectral_radius": radius,
            "nonlinearity": compute_nonlinearity(radius, boolfun.nvar),
            "ci_deviations": ci_deviations,
            "ci_order": compute_order(ci_deviations),
        }


@REG.register("property", "walsh_prop")
def walsh_aggregator(boolfun: BooleanFunction, indices: WeightClassTable) -> None:
    result = WalshProperties().compute_properties(boolfun, indices)
    for key, value in result.items():
        boolfun.store(key, value)
