"""
VCF line source.

Opens a VCF path, plain or gzip/bgzip compressed, and yields its lines with
the trailing line terminator removed. Validation itself never touches files.
"""

import gzip
from pathlib import Path
from typing import Iterator, Union

GZIP_MAGIC = b"\x1f\x8b"

PathLike = Union[str, Path]


def validate_vcf_accessibility(vcf_file_path: PathLike) -> None:
    """Validate that VCF file is accessible and readable.

    Performs basic accessibility checks without parsing VCF content.

    Args:
        vcf_file_path: Path to the VCF file to check

    Raises:
        FileNotFoundError: If the file doesn't exist
        PermissionError: If the file isn't readable
        ValueError: If the path is not a file or the file is empty
    """
    vcf_path = Path(vcf_file_path)

    if not vcf_path.exists():
        raise FileNotFoundError(f"VCF file not found: {vcf_file_path}")

    if not vcf_path.is_file():
        raise ValueError(f"Path is not a file: {vcf_file_path}")

    if vcf_path.stat().st_size == 0:
        raise ValueError(f"VCF file is empty: {vcf_file_path}")

    try:
        with open(vcf_path, 'rb') as f:
            f.read(1)
    except PermissionError:
        raise PermissionError(f"Permission denied reading VCF file: {vcf_file_path}")


def is_gzipped(vcf_file_path: PathLike) -> bool:
    """Sniff the gzip magic number; bgzip output has it too."""
    with open(vcf_file_path, 'rb') as f:
        return f.read(2) == GZIP_MAGIC


def iter_vcf_lines(vcf_file_path: PathLike, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of a VCF file without their line terminators.

    The handle is closed when the generator is exhausted or closed early.

    Raises:
        ValueError: If the file cannot be decoded or decompressed
    """
    if is_gzipped(vcf_file_path):
        handle = gzip.open(vcf_file_path, 'rt', encoding=encoding)
    else:
        handle = open(vcf_file_path, 'r', encoding=encoding)

    try:
        with handle:
            for line in handle:
                yield line.rstrip("\r\n")
    except (OSError, EOFError, UnicodeDecodeError) as e:
        raise ValueError(f"Cannot read VCF file: {e}")
