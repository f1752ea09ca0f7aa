"""
genomic-validator - structural and semantic checks for VCF files.

Answers one question, "is this file valid VCF?", and reports the first
violation found.
"""

__version__ = "0.1.0"
__author__ = "Genomic Validator Team"

from genomicvalidator.errors import (
    CardinalityError,
    ConversionError,
    FieldError,
    SchemaError,
    StructuralError,
    VcfValidationError,
)
from genomicvalidator.validator import (
    ValidationResult,
    VcfValidator,
    validate_lines,
    validate_vcf_file,
)

__all__ = [
    "CardinalityError",
    "ConversionError",
    "FieldError",
    "SchemaError",
    "StructuralError",
    "ValidationResult",
    "VcfValidationError",
    "VcfValidator",
    "validate_lines",
    "validate_vcf_file",
]
