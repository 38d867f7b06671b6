# user_input_parser.py
# Description: Parses user input (encoding mode + encoded truth table) into BooleanFunction objects.

from boolfun_object import BooleanFunction
from representations.truth_table_representation import TruthTableRepresentation
from representations.decimal_representation import DecimalRepresentation
from representations.hex_representation import HexRepresentation
from computations import default_settings
from errors import EncodingError


class FunctionParser:
    def parse_encoded_function(self, mode, func_code, nvar):
        mode = mode.strip().lower()
        func_code = func_code.strip()

        if mode == "bin":
            representation = TruthTableRepresentation.from_string(func_code)
        elif mode == "dec":
            representation = DecimalRepresentation(func_code)
        elif mode == "hex":
            representation = HexRepresentation(func_code)
        else:
            raise EncodingError(
                f"'{mode}' does not correspond to any valid encoding mode "
                f"(use only {', '.join(default_settings.ENCODING_MODES)}).")

        return BooleanFunction.from_representation(representation, nvar)


def parse_verbose_flag(text):
    # Only "true" (any case) enables verbose output, everything else disables it.
    return text.strip().lower() == "true"
