"""
Tests for the fast Walsh and Möbius transforms.
"""

import pytest
from computations.bitvector import bin_to_polar, dec_to_bin, index_to_bits, popcount
from computations.transforms.walsh_transform import (
    autocorrelation, fast_walsh_transform, inverse_walsh_transform,
    spectrum_to_truth_table, walsh_spectrum,
)
from computations.transforms.moebius_transform import anf_expression, fast_moebius_transform
from errors import ContractError


def _all_truth_tables(nvar):
    length = 1 << nvar
    for code in range(1 << length):
        yield dec_to_bin(code, length)


def _walsh_by_definition(truth_table, nvar):
    length = 1 << nvar
    spectrum = []
    for a in range(length):
        total = 0
        for x in range(length):
            exponent = truth_table[x] ^ (popcount(a & x) & 1)
            total += -1 if exponent else 1
        spectrum.append(total)
    return spectrum


class TestWalshTransform:
    def test_known_spectrum(self):
        polar = [1, -1, -1, -1, -1, 1, 1, 1]
        radius = fast_walsh_transform(polar)
        assert polar == [0, 0, 0, 0, -4, 4, 4, 4]
        assert radius == 4

    def test_matches_definition(self):
        for truth_table in _all_truth_tables(3):
            spectrum, radius = walsh_spectrum(bin_to_polar(truth_table))
            expected = _walsh_by_definition(truth_table, 3)
            assert spectrum == expected
            assert radius == max(abs(value) for value in expected)

    @pytest.mark.parametrize("nvar", [1, 2, 3, 4])
    def test_inverse_recovers_polar_table(self, nvar):
        for truth_table in _all_truth_tables(nvar):
            polar = bin_to_polar(truth_table)
            vector = list(polar)
            fast_walsh_transform(vector)
            inverse_walsh_transform(vector)
            assert vector == polar

    def test_parseval(self):
        truth_table = dec_to_bin(0x6F, 8)
        spectrum, _ = walsh_spectrum(bin_to_polar(truth_table))
        assert sum(value * value for value in spectrum) == 64

    def test_spectrum_to_truth_table(self):
        truth_table = dec_to_bin(0xE8, 8)
        spectrum, _ = walsh_spectrum(bin_to_polar(truth_table))
        assert spectrum_to_truth_table(spectrum) == truth_table

    def test_walsh_spectrum_leaves_input_untouched(self):
        polar = [1, -1, 1, 1]
        walsh_spectrum(polar)
        assert polar == [1, -1, 1, 1]

    def test_inverse_rejects_non_spectrum(self):
        with pytest.raises(ContractError):
            inverse_walsh_transform([1, 2])

    @pytest.mark.parametrize("vector", [[1], [1, 1, 1], [1, 1, 1, 1, 1, 1]])
    def test_rejects_bad_lengths(self, vector):
        with pytest.raises(ContractError):
            fast_walsh_transform(vector)

    def test_sub_range(self):
        vector = [5, 5, 1, -1, 1, 1, 7, 7]
        radius = fast_walsh_transform(vector, 2, 4)
        assert vector == [5, 5, 2, 2, -2, 2, 7, 7]
        assert radius == 2


class TestAutocorrelation:
    def test_constant_function(self):
        vector = [1] * 8
        assert autocorrelation(vector) == 8
        assert vector == [8] * 8

    def test_bent_function(self):
        # f(x1, x2) = x1x2 has zero autocorrelation at every nonzero shift.
        vector = bin_to_polar([False, False, False, True])
        assert autocorrelation(vector) == 0
        assert vector == [4, 0, 0, 0]

    def test_single_variable(self):
        # f(x1) = x1: the shift 1 is a linear structure with r(1) = -2.
        vector = bin_to_polar([False, True])
        assert autocorrelation(vector) == 2
        assert vector == [2, -2]

    def test_reuses_spectrum(self):
        polar = bin_to_polar(dec_to_bin(0x1E, 8))
        from_table = list(polar)
        acmax_table = autocorrelation(from_table, from_truth_table=True)

        from_spectrum, _ = walsh_spectrum(polar)
        acmax_spectrum = autocorrelation(from_spectrum, from_truth_table=False)

        assert from_table == from_spectrum
        assert acmax_table == acmax_spectrum

    def test_matches_definition(self):
        for truth_table in _all_truth_tables(3):
            vector = bin_to_polar(truth_table)
            acmax = autocorrelation(vector)
            expected = []
            for a in range(8):
                expected.append(sum(1 if truth_table[x] == truth_table[x ^ a] else -1 for x in range(8)))
            assert vector == expected
            assert expected[0] == 8
            assert acmax == max(abs(value) for value in expected[1:])


class TestMoebiusTransform:
    @pytest.mark.parametrize("nvar", [1, 2, 3, 4])
    def test_involution(self, nvar):
        for truth_table in _all_truth_tables(nvar):
            vector = list(truth_table)
            fast_moebius_transform(vector)
            fast_moebius_transform(vector)
            assert vector == truth_table

    def test_degree_matches_anf_weights(self):
        for truth_table in _all_truth_tables(3):
            anf = list(truth_table)
            degree = fast_moebius_transform(anf)
            expected = max([popcount(index) for index in range(8) if anf[index]], default=0)
            assert degree == expected

    def test_product_of_two_variables(self):
        anf = [False, False, False, True]
        assert fast_moebius_transform(anf) == 2
        assert anf == [False, False, False, True]

    def test_constant_one(self):
        anf = [True] * 4
        assert fast_moebius_transform(anf) == 0
        assert anf == [True, False, False, False]

    def test_full_degree(self):
        # The AND of all four variables has degree 4.
        truth_table = [False] * 15 + [True]
        assert fast_moebius_transform(truth_table) == 4

    def test_rejects_bad_length(self):
        with pytest.raises(ContractError):
            fast_moebius_transform([True, False, True])


class TestAnfExpression:
    def test_affine(self):
        anf = [True, True, True, False, True, False, False, False]
        assert anf_expression(anf, 3) == "f(x1,x2,x3) = 1 + x3 + x2 + x1"

    def test_quadratic(self):
        anf = [False, False, False, True]
        assert anf_expression(anf, 2) == "f(x1,x2) = x1x2"

    def test_zero_function(self):
        assert anf_expression([False] * 4, 2) == "f(x1,x2) = 0"

    def test_monomial_names_follow_index_bits(self):
        anf = [False] * 8
        anf[5] = True
        bits = index_to_bits(5, 3)
        assert bits == [True, False, True]
        assert anf_expression(anf, 3) == "f(x1,x2,x3) = x1x3"
