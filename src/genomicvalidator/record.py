"""
Data record validation.

Checks the eight mandatory columns of a tab-delimited data line and hands
FORMAT plus sample columns to the genotype block validator.
"""

from typing import List

from genomicvalidator.errors import FieldError
from genomicvalidator.genotype import validate_genotype_block
from genomicvalidator.primitives import is_alt_list, is_bases, parse_float, parse_int

MANDATORY_FIELDS = 8
FORMAT_INDEX = 8

_AUTOSOMES = tuple(str(n) for n in range(1, 23))

HUMAN_CHROMOSOMES = frozenset(_AUTOSOMES + ("X", "Y", "MT"))
HUMAN_CHROMOSOMES_PREFIXED = frozenset(
    "chr" + name for name in _AUTOSOMES + ("X", "Y", "M"))


def is_human_chromosome(chrom: str) -> bool:
    return chrom in HUMAN_CHROMOSOMES or chrom in HUMAN_CHROMOSOMES_PREFIXED


def validate_chrom(chrom: str) -> None:
    if not chrom:
        raise FieldError("Invalid CHROM field: empty", field="CHROM")
    if not is_human_chromosome(chrom):
        raise FieldError(f"Invalid CHROM field: non-human chromosome {chrom}", field="CHROM")


def validate_pos(pos: str) -> int:
    conversion = parse_int(pos, field="POS")
    if not conversion.ok:
        raise conversion.error
    if conversion.value <= 0:
        raise FieldError(f"Invalid POS field (must be positive): {pos}", field="POS")
    return conversion.value


def validate_qual(qual: str) -> None:
    if qual == ".":
        return
    conversion = parse_float(qual, field="QUAL")
    if not conversion.ok:
        raise conversion.error
    if conversion.value < 0:
        raise FieldError(f"Invalid QUAL field (must be non-negative): {qual}", field="QUAL")


def validate_record(line: str) -> List[str]:
    """Validate one data line and return its fields.

    Rules are applied in column order and the first violation raises. A line
    with exactly eight fields has no FORMAT column and is valid on its own.
    """
    fields = line.split("\t")
    if len(fields) < MANDATORY_FIELDS:
        raise FieldError(
            f"Invalid data line (not enough fields, expected at least "
            f"{MANDATORY_FIELDS}, got {len(fields)})", line=line)

    chrom, pos, id_, ref, alt, qual, filter_, info = fields[:MANDATORY_FIELDS]

    validate_chrom(chrom)
    validate_pos(pos)

    # "." is itself non-empty, only an empty column fails
    if not id_:
        raise FieldError("Invalid ID field: empty", field="ID")

    if not is_bases(ref):
        raise FieldError(f"Invalid REF field: {ref}", field="REF")

    if not is_alt_list(alt):
        raise FieldError(f"Invalid ALT field: {alt}", field="ALT")

    validate_qual(qual)

    if not filter_:
        raise FieldError("Invalid FILTER field: empty", field="FILTER")

    if not info:
        raise FieldError("Invalid INFO field: empty", field="INFO")

    if len(fields) > FORMAT_INDEX:
        validate_genotype_block(fields[FORMAT_INDEX], fields[FORMAT_INDEX + 1:])

    return fields
