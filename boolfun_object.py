from representations.truth_table_representation import TruthTableRepresentation
from representations.decimal_representation import DecimalRepresentation
from representations.hex_representation import HexRepresentation
from representations.abstract_representation import Representation
from computations.bitvector import bin_to_dec, bin_to_hex, bin_to_polar, dec_to_str
from computations import default_settings
from errors import ArithmeticOverflow, ContractError
from typing import Any, Dict, List, Optional, Sequence


class BooleanFunction:
    def __init__(self, representation: Representation, nvar: int):
        """
        Builds a Boolean function of nvar variables from any representation. The truth
        table, polar table, decimal code and hex code are all derived here and stay
        fixed; computed properties are stored once in self.properties.
        """
        if not isinstance(representation, Representation):
            raise ContractError(f"Unrecognized representation type: {type(representation)}")
        check_nvar(nvar)

        self.nvar = nvar
        self.tlength = 1 << nvar
        self._representation = representation

        truth_table = representation.to_truth_table(nvar)
        self.truth_table = tuple(truth_table)
        self.polar_table = tuple(bin_to_polar(truth_table))
        self.decimal_code = bin_to_dec(truth_table)
        # Only defined when the table length is a multiple of 4 (nvar >= 2).
        self.hex_code: Optional[str] = bin_to_hex(truth_table) if self.tlength % 4 == 0 else None

        self.properties: Dict[str, Any] = {}

    @classmethod
    def from_representation(cls, rep: Representation, nvar: int):
        return cls(rep, nvar)

    @classmethod
    def from_decimal(cls, decimal_code: int, nvar: int):
        return cls(DecimalRepresentation(decimal_code), nvar)

    @classmethod
    def from_truth_table(cls, truth_table: Sequence, nvar: int):
        return cls(TruthTableRepresentation(truth_table), nvar)

    @classmethod
    def from_hex(cls, hex_code: str, nvar: int):
        return cls(HexRepresentation(hex_code), nvar)

    @property
    def representation(self) -> Representation:
        return self._representation

    def get_truth_table(self) -> List[bool]:
        # Fresh, mutable copy of the truth table.
        return list(self.truth_table)

    def get_polar_table(self) -> List[int]:
        # Fresh, mutable copy of the polar truth table.
        return list(self.polar_table)

    def store(self, key: str, value: Any) -> None:
        # Derived properties are written exactly once.
        if key in self.properties:
            raise ContractError(f"Property '{key}' has already been computed.")
        self.properties[key] = value

    # --------------------------------------------------------------------
    # Derived properties (None until computed)
    # --------------------------------------------------------------------

    @property
    def weight(self) -> Optional[int]:
        return self.properties.get("weight")

    @property
    def balanced(self) -> Optional[bool]:
        return self.properties.get("balanced")

    @property
    def anf(self) -> Optional[List[bool]]:
        return self.properties.get("anf")

    @property
    def algebraic_degree(self) -> Optional[int]:
        return self.properties.get("algebraic_degree")

    @property
    def walsh_spectrum(self) -> Optional[List[int]]:
        return self.properties.get("walsh_spectrum")

    @property
    def spectral_radius(self) -> Optional[int]:
        return self.properties.get("spectral_radius")

    @property
    def nonlinearity(self) -> Optional[int]:
        return self.properties.get("nonlinearity")

    @property
    def ci_order(self) -> Optional[int]:
        return self.properties.get("ci_order")

    @property
    def ac_spectrum(self) -> Optional[List[int]]:
        return self.properties.get("ac_spectrum")

    @property
    def ac_max(self) -> Optional[int]:
        return self.properties.get("ac_max")

    @property
    def ssi(self) -> Optional[int]:
        return self.properties.get("ssi")

    @property
    def nz_linear_structures(self) -> Optional[int]:
        return self.properties.get("nz_linear_structures")

    @property
    def pc_order(self) -> Optional[int]:
        return self.properties.get("pc_order")

    def __repr__(self):
        rep_type = self._representation.__class__.__name__
        return (f"BooleanFunction(nvar={self.nvar}, decimal_code={dec_to_str(self.decimal_code)}, "
                f"rep={rep_type}, properties={sorted(self.properties)})")


def check_nvar(nvar: int) -> None:
    # Functions need at least one variable, and their coefficients must fit COEFFICIENT_BITS.
    if not isinstance(nvar, int) or isinstance(nvar, bool) or nvar < 1:
        raise ContractError(f"Number of variables must be a positive integer, got {nvar!r}.")

    # |W(a)| <= 2^n, r(a)^2 <= 2^(2n), sum of squares <= 2^(3n); one bit is the sign.
    if 3 * nvar >= default_settings.COEFFICIENT_BITS - 1:
        raise ArithmeticOverflow(
            f"A function of {nvar} variables has a sum-of-squares indicator up to 2^{3 * nvar}, "
            f"which exceeds the {default_settings.COEFFICIENT_BITS}-bit coefficient width.")
