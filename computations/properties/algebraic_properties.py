from __future__ import annotations
from computations.properties.base_properties import PropertyComputation
from computations.transforms.moebius_transform import anf_expression, fast_moebius_transform
from boolfun_object import BooleanFunction
from registry import REG


class AlgebraicProperties(PropertyComputation):
    """
    ANF coefficients, algebraic degree and ANF expression via the fast Möbius transform.
    """
    def compute_properties(self, boolfun: BooleanFunction, indices=None) -> dict:
        # The transform overwrites its input, so work on a copy of the truth table.
        anf = boolfun.get_truth_table()
        degree = fast_moebius_transform(anf)

        return {
            "anf": anf,
            "algebraic_degree": degree,
            "anf_expression": anf_expression(anf, boolfun.nvar),
        }


@REG.register("property", "alg_prop")
def algebraic_aggregator(boolfun: BooleanFunction, indices=None) -> None:
    result = AlgebraicProperties().compute_properties(boolfun, indices)
    for key, value in result.items():
        boolfun.store(key, value)
