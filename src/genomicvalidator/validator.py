"""
Validation driver.

Reads a stream of VCF lines once, enforces line order (meta-information
lines, then one column header, then data records) and routes each line to
its validator. The first failure ends the pass.
"""

from typing import Iterable, Optional

from pydantic import BaseModel
from rich.console import Console

from genomicvalidator.errors import StructuralError, VcfValidationError
from genomicvalidator.header import sample_names, validate_column_header
from genomicvalidator.reader import PathLike, iter_vcf_lines
from genomicvalidator.record import validate_record
from genomicvalidator.schema import validate_meta_line

console = Console(stderr=True)


class ValidationResult(BaseModel):
    """Pass/fail outcome of one validation pass."""
    valid: bool
    reason: Optional[str] = None
    error_kind: Optional[str] = None
    line_number: Optional[int] = None
    line: Optional[str] = None
    meta_lines: int = 0
    records: int = 0
    samples: int = 0


class VcfValidator:
    """Single-pass VCF validator.

    The only state carried between lines is whether the column header has
    been seen; the counters exist for reporting.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.header_seen = False
        self.meta_lines = 0
        self.records = 0
        self.samples = 0

    def log(self, message: str) -> None:
        if self.verbose:
            console.print(message, style="dim", markup=False, highlight=False)

    def validate_line(self, line: str) -> None:
        """Classify one line and validate it. Raises VcfValidationError."""
        if line.startswith("##"):
            meta = validate_meta_line(line)
            self.meta_lines += 1
            self.log(f"meta-information: {meta.key}")
        elif line.startswith("#"):
            if self.header_seen:
                raise StructuralError("duplicate column header line", line=line)
            columns = validate_column_header(line)
            self.header_seen = True
            self.samples = len(sample_names(columns))
            self.log(f"column header: {len(columns)} columns, {self.samples} sample(s)")
        elif not self.header_seen:
            raise StructuralError(f"unexpected line format: {line}", line=line)
        else:
            validate_record(line)
            self.records += 1

    def validate(self, lines: Iterable[str]) -> ValidationResult:
        """Validate every line in order, stopping at the first failure."""
        line_number = 0
        try:
            for line_number, line in enumerate(lines, start=1):
                line = line.rstrip("\r\n")
                try:
                    self.validate_line(line)
                except VcfValidationError as e:
                    e.line_number = line_number
                    if e.line is None:
                        e.line = line
                    raise

            if not self.header_seen:
                raise StructuralError("missing column header line")

        except VcfValidationError as e:
            self.log(f"{e.kind}: {e.reason}")
            return self._result(valid=False, reason=e.reason, error_kind=e.kind,
                                line_number=e.line_number, line=e.line)

        self.log(f"{line_number} line(s) read, {self.records} record(s) validated")
        return self._result(valid=True)

    def _result(self, **kwargs) -> ValidationResult:
        return ValidationResult(meta_lines=self.meta_lines, records=self.records,
                                samples=self.samples, **kwargs)


def validate_lines(lines: Iterable[str], verbose: bool = False) -> ValidationResult:
    """Validate an already-decoded sequence of VCF lines."""
    return VcfValidator(verbose=verbose).validate(lines)


def validate_vcf_file(vcf_file_path: PathLike, encoding: str = "utf-8",
                      verbose: bool = False) -> ValidationResult:
    """Validate a VCF file on disk, gzip-compressed or not.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file cannot be decoded or decompressed
    """
    lines = iter_vcf_lines(vcf_file_path, encoding=encoding)
    try:
        return validate_lines(lines, verbose=verbose)
    finally:
        lines.close()
