"""
Error taxonomy for VCF validation.

Every violation is terminal for a validation pass. Validators raise one of
the classes below at the point of detection and the driver turns it into a
failed ValidationResult.

    VcfValidationError
    ├── StructuralError   (line order: data before header, missing header)
    ├── SchemaError       (meta-information line does not fit its schema)
    ├── FieldError        (data record column fails its format rule)
    │   └── ConversionError (numeric token does not parse)
    └── CardinalityError  (sample value count != FORMAT descriptor count)
"""

from typing import Optional


class VcfValidationError(Exception):
    """Base class for all validation failures."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def reason(self) -> str:
        """Human-readable reason, prefixed with the line number when known."""
        if self.line_number is not None:
            return f"Line {self.line_number}: {self.message}"
        return self.message


class StructuralError(VcfValidationError):
    """Line appears out of the allowed order."""


class SchemaError(VcfValidationError):
    """Recognized meta-information key with a malformed attribute list."""


class FieldError(VcfValidationError):
    """A data record column fails its format rule."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.field = field


class ConversionError(FieldError):
    """A token that should be an integer or float does not parse."""


class CardinalityError(VcfValidationError):
    """Sample column value count differs from the FORMAT descriptor count."""
