# default_settings.py
# Description: Global settings shared by the conversion utilities and the engines.

# Bit ordering used everywhere a bit vector is read as an integer.
#   "msb": element 0 is the most significant bit (x1 is the top bit of an index).
#   "lsb": element 0 is the least significant bit (x1 is bit 0 of an index).
BIT_ORDER = "msb"

SUPPORTED_BIT_ORDERS = ("msb", "lsb")

# Signed integer width that Walsh, autocorrelation and sum-of-squares values must fit in.
# The sum-of-squares indicator of an n-variable function can reach 2^(3n).
COEFFICIENT_BITS = 64

HEX_DIGITS = "0123456789ABCDEF"

# Encoding modes accepted on the command line.
ENCODING_MODES = ("bin", "dec", "hex")
