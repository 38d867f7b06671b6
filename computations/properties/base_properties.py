from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict
from boolfun_object import BooleanFunction
from computations.combinatorics.weight_classes import WeightClassTable
from errors import ContractError


class PropertyComputation(ABC):
    """
    Abstract base class for a group of properties computed together on a Boolean
    function, e.g. the Walsh-based properties (spectrum, nonlinearity, resiliency).
    """

    @abstractmethod
    def compute_properties(self, boolfun: BooleanFunction, indices: WeightClassTable) -> Dict[str, Any]:
        """
        Implement the computation on the given Boolean function. Returns a dict of
        {property name: value}; the input function is left untouched.
        """
        pass


def check_indices(boolfun: BooleanFunction, indices: WeightClassTable) -> None:
    # The weight classes must cover all nvar orders of this function's inputs.
    if indices.nvar != boolfun.nvar:
        raise ContractError(
            f"Weight classes are built for {indices.nvar} variables, function has {boolfun.nvar}.")
    if indices.max_weight < boolfun.nvar:
        raise ContractError(
            f"Weight classes go up to {indices.max_weight}, at least {boolfun.nvar} are required.")
