from typing import List
from representations.abstract_representation import Representation
from computations.bitvector import hex_to_bin
from errors import EncodingError


class HexRepresentation(Representation):
    # A Boolean function given by the hexadecimal spelling of its truth table (2^n / 4 digits).

    encoding = "hex"

    def __init__(self, hex_code: str):
        if not isinstance(hex_code, str):
            raise EncodingError(f"Hex code must be a string, got {type(hex_code).__name__}.")
        self.hex_code = hex_code.strip().upper()

    def to_truth_table(self, nvar: int) -> List[bool]:
        length = 1 << nvar
        if length % 4 != 0:
            raise EncodingError(f"A function of {nvar} variables has no hex encoding (2^{nvar} bits).")
        return hex_to_bin(self.hex_code, length)

    def __repr__(self):
        return f"HexRepresentation(hex_code='{self.hex_code}')"
