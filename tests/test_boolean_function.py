"""
Tests for BooleanFunction construction from its three encodings.
"""

import pytest
from boolfun_object import BooleanFunction
from representations.truth_table_representation import TruthTableRepresentation
from representations.decimal_representation import DecimalRepresentation
from representations.hex_representation import HexRepresentation
from user_input_parser import FunctionParser, parse_verbose_flag
from computations.bitvector import dec_to_str
from errors import ArithmeticOverflow, ContractError, EncodingError

RULE_150 = [True, False, False, True, False, True, True, False]


class TestConstructors:
    def test_from_decimal(self):
        boolfun = BooleanFunction.from_decimal(150, 3)
        assert list(boolfun.truth_table) == RULE_150
        assert boolfun.hex_code == "96"
        assert boolfun.polar_table == (-1, 1, 1, -1, 1, -1, -1, 1)
        assert boolfun.tlength == 8

    def test_from_truth_table(self):
        boolfun = BooleanFunction.from_truth_table([1, 0, 0, 1, 0, 1, 1, 0], 3)
        assert boolfun.decimal_code == 150
        assert boolfun.hex_code == "96"
        assert list(boolfun.truth_table) == RULE_150

    def test_from_hex(self):
        boolfun = BooleanFunction.from_hex("96", 3)
        assert boolfun.decimal_code == 150
        assert list(boolfun.truth_table) == RULE_150

    def test_representations_agree(self):
        for code in (0, 1, 0x6996, 0xFFFF, 0x8001):
            by_dec = BooleanFunction.from_decimal(code, 4)
            by_hex = BooleanFunction.from_hex(by_dec.hex_code, 4)
            by_table = BooleanFunction.from_truth_table(by_dec.truth_table, 4)
            assert by_hex.truth_table == by_dec.truth_table == by_table.truth_table
            assert by_hex.decimal_code == by_table.decimal_code == code

    def test_single_variable_has_no_hex(self):
        boolfun = BooleanFunction.from_truth_table([0, 1], 1)
        assert boolfun.hex_code is None
        assert boolfun.decimal_code == 1

    def test_copies_are_independent(self):
        boolfun = BooleanFunction.from_decimal(150, 3)
        table = boolfun.get_truth_table()
        table[0] = False
        polar = boolfun.get_polar_table()
        polar[0] = 1
        assert boolfun.truth_table[0] is True
        assert boolfun.polar_table[0] == -1

    def test_from_representation(self):
        boolfun = BooleanFunction.from_representation(DecimalRepresentation("105"), 3)
        assert boolfun.hex_code == "69"
        assert isinstance(boolfun.representation, DecimalRepresentation)


class TestEncodingErrors:
    def test_decimal_too_large(self):
        with pytest.raises(EncodingError):
            BooleanFunction.from_decimal(256, 3)

    def test_decimal_not_a_number(self):
        with pytest.raises(EncodingError):
            BooleanFunction.from_decimal("12x", 3)

    @pytest.mark.parametrize("hex_code", ["9", "096", "9G"])
    def test_bad_hex(self, hex_code):
        with pytest.raises(EncodingError):
            BooleanFunction.from_hex(hex_code, 3)

    def test_hex_needs_two_variables(self):
        with pytest.raises(EncodingError):
            BooleanFunction.from_hex("1", 1)

    def test_truth_table_length_mismatch(self):
        with pytest.raises(EncodingError):
            BooleanFunction.from_truth_table([0, 1, 1, 0], 3)

    def test_truth_table_length_not_power_of_two(self):
        with pytest.raises(ContractError):
            BooleanFunction.from_truth_table([0, 1, 1, 0, 1, 0], 3)

    def test_truth_table_bad_entry(self):
        with pytest.raises(EncodingError):
            BooleanFunction.from_truth_table([0, 2, 1, 0], 2)


class TestFourteenVariables:
    # 2^16384 - 1: the decimal code has 4933 digits.
    ALL_ONES = (1 << 16384) - 1

    def test_from_decimal_string(self):
        boolfun = BooleanFunction.from_decimal(dec_to_str(self.ALL_ONES), 14)
        assert boolfun.decimal_code == self.ALL_ONES
        assert all(boolfun.truth_table)
        assert boolfun.hex_code == "F" * 4096

    def test_from_hex(self):
        boolfun = BooleanFunction.from_hex("F" * 4096, 14)
        assert boolfun.decimal_code == self.ALL_ONES

    def test_repr(self):
        boolfun = BooleanFunction.from_hex("F" * 4096, 14)
        text = repr(boolfun)
        assert "nvar=14" in text
        assert dec_to_str(self.ALL_ONES) in text
        assert dec_to_str(self.ALL_ONES) in repr(DecimalRepresentation(self.ALL_ONES))

    def test_parser(self):
        code = dec_to_str(self.ALL_ONES)
        boolfun = FunctionParser().parse_encoded_function("dec", code, 14)
        assert boolfun.hex_code == "F" * 4096


class TestContract:
    @pytest.mark.parametrize("nvar", [0, -1, "3"])
    def test_invalid_nvar(self, nvar):
        with pytest.raises(ContractError):
            BooleanFunction.from_decimal(0, nvar)

    def test_coefficient_width(self):
        with pytest.raises(ArithmeticOverflow):
            BooleanFunction.from_decimal(0, 21)

    def test_unknown_representation(self):
        with pytest.raises(ContractError):
            BooleanFunction("96", 3)

    def test_properties_written_once(self):
        boolfun = BooleanFunction.from_decimal(150, 3)
        boolfun.store("weight", 4)
        assert boolfun.weight == 4
        with pytest.raises(ContractError):
            boolfun.store("weight", 5)

    def test_properties_start_empty(self):
        boolfun = BooleanFunction.from_decimal(150, 3)
        assert boolfun.properties == {}
        assert boolfun.nonlinearity is None


class TestFunctionParser:
    @pytest.mark.parametrize("mode,code", [("bin", "10010110"), ("dec", "150"), ("hex", "96"), ("HEX", " 96 ")])
    def test_modes(self, mode, code):
        boolfun = FunctionParser().parse_encoded_function(mode, code, 3)
        assert boolfun.decimal_code == 150

    def test_bin_uses_truth_table_representation(self):
        boolfun = FunctionParser().parse_encoded_function("bin", "0110", 2)
        assert isinstance(boolfun.representation, TruthTableRepresentation)

    def test_hex_uses_hex_representation(self):
        boolfun = FunctionParser().parse_encoded_function("hex", "6996", 4)
        assert isinstance(boolfun.representation, HexRepresentation)

    def test_unknown_mode(self):
        with pytest.raises(EncodingError):
            FunctionParser().parse_encoded_function("oct", "226", 3)

    @pytest.mark.parametrize("text,expected", [("true", True), ("TRUE", True), ("false", False), ("yes", False)])
    def test_verbose_flag(self, text, expected):
        assert parse_verbose_flag(text) is expected
