"""Tests for primitive token validators and numeric conversions."""

import pytest

from genomicvalidator.errors import ConversionError
from genomicvalidator.primitives import (
    is_alt_allele,
    is_alt_list,
    is_bases,
    is_boolean,
    is_float,
    is_genotype,
    is_integer_list,
    is_non_negative_integer,
    parse_float,
    parse_int,
)


class TestConversions:
    """Numeric conversions return results instead of raising."""

    def test_parse_int_success(self):
        conversion = parse_int("100", field="POS")
        assert conversion.ok
        assert conversion.value == 100

    def test_parse_int_negative(self):
        assert parse_int("-5").value == -5

    @pytest.mark.parametrize("token", ["", "abc", "12abc", "1.5", " 1", "+5"])
    def test_parse_int_failure(self, token):
        conversion = parse_int(token, field="POS")
        assert not conversion.ok
        assert conversion.value is None
        assert isinstance(conversion.error, ConversionError)
        assert conversion.error.field == "POS"
        assert "not an integer" in conversion.error.message

    @pytest.mark.parametrize("token,expected", [
        ("30", 30.0), ("0.5", 0.5), (".5", 0.5), ("-1.25", -1.25), ("1e3", 1000.0),
    ])
    def test_parse_float_success(self, token, expected):
        conversion = parse_float(token)
        assert conversion.ok
        assert conversion.value == expected

    @pytest.mark.parametrize("token", ["", "nan", "inf", "1.2.3", "x"])
    def test_parse_float_failure(self, token):
        conversion = parse_float(token, field="QUAL")
        assert not conversion.ok
        assert "not a float" in conversion.error.message


class TestTokenPredicates:
    """Stateless predicates over single tokens."""

    def test_non_negative_integer(self):
        assert is_non_negative_integer("0")
        assert is_non_negative_integer("42")
        assert not is_non_negative_integer("-1")
        assert not is_non_negative_integer("")
        assert not is_non_negative_integer(".")

    def test_integer_list(self):
        assert is_integer_list("10")
        assert is_integer_list("10,3,0")
        assert not is_integer_list("10,")
        assert not is_integer_list("10,,3")
        assert not is_integer_list("a,b")

    def test_float(self):
        assert is_float("0.01")
        assert is_float("-2.5")
        assert not is_float("abc")

    def test_boolean(self):
        assert is_boolean("0")
        assert is_boolean("1")
        assert not is_boolean("2")
        assert not is_boolean("true")

    def test_bases(self):
        assert is_bases("ACGTN")
        assert is_bases("acgtn")
        assert not is_bases("")
        assert not is_bases("ACGU")

    @pytest.mark.parametrize("genotype", ["0", "1", ".", "0/1", "1|1", "./.", "0/."])
    def test_valid_genotypes(self, genotype):
        assert is_genotype(genotype)

    @pytest.mark.parametrize("genotype", ["x/1", "0/1/2", "", "0-1", "/1"])
    def test_invalid_genotypes(self, genotype):
        assert not is_genotype(genotype)


class TestAltAlleles:
    """ALT elements are literal bases or symbolic alleles."""

    def test_single_elements(self):
        assert is_alt_allele("A")
        assert is_alt_allele("*")
        assert is_alt_allele("<DEL>")
        assert not is_alt_allele("")
        assert not is_alt_allele("<>")
        assert not is_alt_allele("a")

    def test_mixed_list_accepted(self):
        assert is_alt_list("A,<DEL>")
        assert is_alt_list("AC,T,*")
        assert is_alt_list("A,<DUP,TANDEM>")
        assert is_alt_list("<DUP,TANDEM>")

    def test_empty_element_rejected(self):
        assert not is_alt_list("A,,C")
        assert not is_alt_list("A,")
