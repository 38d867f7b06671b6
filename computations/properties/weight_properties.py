from __future__ import annotations
from computations.properties.base_properties import PropertyComputation
from computations.bitvector import hamming_weight
from boolfun_object import BooleanFunction
from registry import REG


class WeightProperties(PropertyComputation):
    # Hamming weight of the truth table and balancedness.
    def compute_properties(self, boolfun: BooleanFunction, indices=None) -> dict:
        weight = hamming_weight(boolfun.truth_table)
        return {
            "weight": weight,
            "balanced": weight == boolfun.tlength // 2,
        }


@REG.register("property", "weight_prop")
def weight_aggregator(boolfun: BooleanFunction, indices=None) -> None:
    result = WeightProperties().compute_properties(boolfun, indices)
    for key, value in result.items():
        boolfun.store(key, value)
