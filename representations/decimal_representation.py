from typing import List
from representations.abstract_representation import Representation
from computations.bitvector import dec_to_bin, dec_to_str, str_to_dec


class DecimalRepresentation(Representation):
    """
    A Boolean function given by the integer value of its truth table
    (e.g. the Wolfram code of an elementary cellular automaton rule).
    Codes of 14 and more variables run past CPython's default int/str digit
    limit, so strings are parsed with str_to_dec().
    """

    encoding = "dec"

    def __init__(self, decimal_code):
        if isinstance(decimal_code, str):
            decimal_code = str_to_dec(decimal_code)
        self.decimal_code = decimal_code

    def to_truth_table(self, nvar: int) -> List[bool]:
        return dec_to_bin(self.decimal_code, 1 << nvar)

    def __repr__(self):
        if not isinstance(self.decimal_code, int):
            return f"DecimalRepresentation(decimal_code={self.decimal_code!r})"
        return f"DecimalRepresentation(decimal_code={dec_to_str(self.decimal_code)})"
