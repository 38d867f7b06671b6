from typing import List, Sequence
from representations.abstract_representation import Representation
from computations.bitvector import is_power_of_two, str_to_bin
from errors import ContractError, EncodingError


class TruthTableRepresentation(Representation):
    # Represents the Boolean function directly by its truth table.

    encoding = "bin"

    def __init__(self, truth_table: Sequence):
        self.truth_table = truth_table

    @classmethod
    def from_string(cls, bin_str: str):
        # Binary string such as "01101001", first character = first truth table entry.
        return cls(str_to_bin(bin_str))

    def to_truth_table(self, nvar: int) -> List[bool]:
        length = len(self.truth_table)
        if not is_power_of_two(length):
            raise ContractError(f"Truth table length {length} is not a power of two.")
        if length != (1 << nvar):
            raise EncodingError(f"Truth table length {length} does not match 2^{nvar} = {1 << nvar}.")

        bits = []
        for idx, value in enumerate(self.truth_table):
            if isinstance(value, bool):
                bits.append(value)
            elif value in (0, 1):
                bits.append(bool(value))
            else:
                raise EncodingError(f"Truth table entries must be 0/1 or booleans. Found {value!r} at index {idx}.")
        return bits

    def __repr__(self):
        return f"TruthTableRepresentation(size={len(self.truth_table)})"
