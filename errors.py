# errors.py
# Description: Exception types raised by the Boolean function engine.


class BoolFunError(Exception):
    # Base class for every error raised by the engine.
    pass


class EncodingError(BoolFunError, ValueError):
    # Malformed or length-mismatched representation input (decimal, hex, binary string).
    pass


class ContractError(BoolFunError, ValueError):
    # Precondition violation, e.g. negative combination parameters or a
    # truth table whose length is not a power of two.
    pass


class ArithmeticOverflow(BoolFunError, OverflowError):
    # Coefficients of the function would not fit in the configured integer width.
    pass
