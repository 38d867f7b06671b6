from typing import Any, Dict, List
import pandas as pd
from boolfun_object import BooleanFunction
from computations.bitvector import bin_to_str, dec_to_str, index_to_bits


def format_function_numbers(boolfun: BooleanFunction) -> str:
    hex_str = boolfun.hex_code if boolfun.hex_code is not None else "n/a"
    lines = []
    lines.append(f"Function Decimal code: {dec_to_str(boolfun.decimal_code)}")
    lines.append(f"Function Hex code: {hex_str}")
    lines.append(f"Number of variables: {boolfun.nvar}")
    return "\n".join(lines)


def build_tables_frame(boolfun: BooleanFunction) -> pd.DataFrame:
    # One row per input: truth table value, Walsh coefficient and autocorrelation coefficient.
    inputs = [bin_to_str(index_to_bits(idx, boolfun.nvar)) for idx in range(boolfun.tlength)]
    return pd.DataFrame({
        "x": inputs,
        "f(x)": [int(bit) for bit in boolfun.truth_table],
        "W(x)": boolfun.walsh_spectrum,
        "r(x)": boolfun.ac_spectrum,
    })


def format_function_tables(boolfun: BooleanFunction) -> str:
    frame = build_tables_frame(boolfun)
    return "Truth table, Walsh spectrum and autocorrelation function:\n" + frame.to_string(index=False)


def format_anf(boolfun: BooleanFunction) -> str:
    return "Algebraic Normal Form:\n" + boolfun.properties["anf_expression"]


def format_crypto_properties(boolfun: BooleanFunction, max_order: int) -> str:
    props = boolfun.properties
    lines = []
    lines.append("Cryptographic Properties")
    lines.append(f"Weight = {props['weight']}; Balanced = {str(props['balanced']).lower()}; "
                 f"Algebraic degree = {props['algebraic_degree']}")
    lines.append("")
    lines.append(f"Spectral radius = {props['spectral_radius']}; Nonlinearity = {props['nonlinearity']}")
    lines.append("")

    lines.append(f"Correlation Immunity Deviations up to order {max_order}:")
    for order in range(max_order):
        lines.append(f"CI({order + 1}) = {props['ci_deviations'][order]}")
    if props["ci_order"] > 0:
        lines.append("")
        if props["balanced"]:
            lines.append(f"The function is {props['ci_order']}-resilient")
        else:
            lines.append(f"The function is correlation immune of order {props['ci_order']}")

    lines.append("")
    lines.append(f"Maximum autocorrelation value: {props['ac_max']};")
    lines.append(f"Sum of squares indicator: {props['ssi']};")
    lines.append(f"Number of nonzero linear structures: {props['nz_linear_structures']}")
    lines.append("")

    lines.append(f"Propagation Criteria Deviations up to order {max_order}:")
    for order in range(max_order):
        lines.append(f"PC({order + 1}) = {props['pc_deviations'][order]}")
    if props["pc_order"] > 0:
        lines.append("")
        lines.append(f"The function satisfies the propagation criterion PC({props['pc_order']})")

    return "\n".join(lines)


def summary_row(boolfun: BooleanFunction) -> Dict[str, Any]:
    # Scalar properties of one analyzed function, for tabular output.
    props = boolfun.properties
    return {
        "dec": dec_to_str(boolfun.decimal_code),
        "hex": boolfun.hex_code,
        "weight": props["weight"],
        "balanced": props["balanced"],
        "degree": props["algebraic_degree"],
        "nonlinearity": props["nonlinearity"],
        "ci_order": props["ci_order"],
        "ac_max": props["ac_max"],
        "ssi": props["ssi"],
        "nz_lin_struct": props["nz_linear_structures"],
        "pc_order": props["pc_order"],
    }


def build_summary_frame(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=[
        "dec", "hex", "weight", "balanced", "degree", "nonlinearity",
        "ci_order", "ac_max", "ssi", "nz_lin_struct", "pc_order",
    ])
