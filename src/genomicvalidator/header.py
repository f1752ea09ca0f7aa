"""Column header (``#CHROM ...``) validation."""

from typing import List

from genomicvalidator.errors import StructuralError

REQUIRED_COLUMNS = ("#CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO")


def validate_column_header(line: str) -> List[str]:
    """Check the eight mandatory column names and return all column tokens.

    The line is split on any whitespace, so space-separated headers are
    accepted as well as tab-separated ones. Columns after INFO (FORMAT and
    sample names) are not checked.
    """
    columns = line.split()
    if len(columns) < len(REQUIRED_COLUMNS):
        raise StructuralError(
            f"Insufficient columns in header line: expected at least "
            f"{len(REQUIRED_COLUMNS)}, got {len(columns)}", line=line)

    for expected, actual in zip(REQUIRED_COLUMNS, columns):
        if expected != actual:
            raise StructuralError(
                f"Invalid column header: expected '{expected}', got '{actual}'", line=line)
    return columns


def sample_names(columns: List[str]) -> List[str]:
    """Sample names declared after the FORMAT column, if any."""
    return columns[len(REQUIRED_COLUMNS) + 1:]
