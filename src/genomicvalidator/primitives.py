"""
Primitive token validators.

Stateless predicates over a single token, plus numeric conversions that
return a Conversion result instead of raising.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from genomicvalidator.errors import ConversionError

_INT_RE = re.compile(r"-?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_NON_NEGATIVE_INT_RE = re.compile(r"\d+")
_INT_LIST_RE = re.compile(r"\d+(,\d+)*")
_BASES_RE = re.compile(r"[ACGTNacgtn]+")
_GENOTYPE_RE = re.compile(r"(\d+|\.)([/|](\d+|\.))?")
_ALT_BASES_RE = re.compile(r"[ACGTN*]+")
_SYMBOLIC_ALLELE_RE = re.compile(r"<[^>]+>")
_ALT_LIST_RE = re.compile(r"([ACGTN*]+|<[^>]+>)(,([ACGTN*]+|<[^>]+>))*")


@dataclass(frozen=True)
class Conversion:
    """Outcome of converting a token to a number."""
    token: str
    value: Optional[Union[int, float]] = None
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_int(token: str, field: Optional[str] = None) -> Conversion:
    """Convert a whole token to int. A leading + or trailing garbage is a failure."""
    if not _INT_RE.fullmatch(token):
        return Conversion(token, error=ConversionError(
            f"Invalid {field or 'value'} field (not an integer): {token}", field=field))
    return Conversion(token, value=int(token))


def parse_float(token: str, field: Optional[str] = None) -> Conversion:
    """Convert a whole token to float. nan/inf spellings are rejected."""
    if not _FLOAT_RE.fullmatch(token):
        return Conversion(token, error=ConversionError(
            f"Invalid {field or 'value'} field (not a float): {token}", field=field))
    return Conversion(token, value=float(token))


def is_non_negative_integer(value: str) -> bool:
    return _NON_NEGATIVE_INT_RE.fullmatch(value) is not None


def is_integer_list(value: str) -> bool:
    """Comma-separated list of non-negative integers, e.g. ``10,3``."""
    return _INT_LIST_RE.fullmatch(value) is not None


def is_float(value: str) -> bool:
    return _FLOAT_RE.fullmatch(value) is not None


def is_boolean(value: str) -> bool:
    return value in ("0", "1")


def is_non_empty(value: str) -> bool:
    return value != ""


def is_bases(value: str) -> bool:
    """REF-style base string: A/C/G/T/N in either case, at least one."""
    return _BASES_RE.fullmatch(value) is not None


def is_genotype(value: str) -> bool:
    """Haploid or diploid call such as ``0``, ``0/1``, ``1|1`` or ``./.``."""
    return _GENOTYPE_RE.fullmatch(value) is not None


def is_alt_allele(value: str) -> bool:
    """A single ALT element: literal bases (``*`` allowed) or ``<ID>``."""
    return (_ALT_BASES_RE.fullmatch(value) is not None
            or _SYMBOLIC_ALLELE_RE.fullmatch(value) is not None)


def is_alt_list(value: str) -> bool:
    """Comma-separated ALT alleles; commas inside <...> belong to the allele."""
    return _ALT_LIST_RE.fullmatch(value) is not None
