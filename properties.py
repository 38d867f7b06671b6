from typing import List
from registry import REG
from boolfun_object import BooleanFunction
from computations.combinatorics.weight_classes import WeightClassTable

# Property groups in evaluation order. ac_prop comes after walsh_prop so it can
# reuse the Walsh spectrum instead of recomputing it.
PROPERTY_GROUPS = [
    "weight_prop",
    "alg_prop",
    "walsh_prop",
    "ac_prop",
]

# Keys written by each group.
GROUP_KEYS = {
    "weight_prop": ["weight", "balanced"],
    "alg_prop": ["anf", "algebraic_degree", "anf_expression"],
    "walsh_prop": ["walsh_spectrum", "spectral_radius", "nonlinearity", "ci_deviations", "ci_order"],
    "ac_prop": ["ac_spectrum", "ac_max", "ssi", "nz_linear_structures", "pc_deviations", "pc_order"],
}


def compute_all_properties(boolfun: BooleanFunction, indices: WeightClassTable) -> None:
    for group_name in PROPERTY_GROUPS:
        compute_missing(boolfun, group_name, indices)

    reorder_properties(boolfun)


def compute_selected(boolfun: BooleanFunction, group_names: List[str], indices: WeightClassTable) -> None:
    for group_name in group_names:
        if group_name not in PROPERTY_GROUPS:
            raise KeyError(f"Unknown property group '{group_name}'. Use one of {PROPERTY_GROUPS}.")

    # Groups are always evaluated in PROPERTY_GROUPS order, whatever order they are given in.
    for group_name in PROPERTY_GROUPS:
        if group_name in group_names:
            compute_missing(boolfun, group_name, indices)

    reorder_properties(boolfun)


def compute_missing(boolfun: BooleanFunction, group_name: str, indices: WeightClassTable) -> None:
    expected_keys = GROUP_KEYS.get(group_name, [])
    if expected_keys and all(key in boolfun.properties for key in expected_keys):
        return

    aggregator_function = REG.get("property", group_name)
    aggregator_function(boolfun, indices)


def reorder_properties(boolfun: BooleanFunction) -> None:
    # Reorders boolfun.properties into the display order of GROUP_KEYS.
    old_map = boolfun.properties
    new_map = {}

    for group_name in PROPERTY_GROUPS:
        for key in GROUP_KEYS[group_name]:
            if key in old_map:
                new_map[key] = old_map[key]

    # Append leftover keys at the end (if any).
    for leftover_key in old_map:
        if leftover_key not in new_map:
            new_map[leftover_key] = old_map[leftover_key]

    boolfun.properties = new_map
