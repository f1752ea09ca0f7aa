"""
genomic-validator CLI - command-line interface.

Validates one VCF file and reports the first problem found. Exit code 0
means the file is valid; 1 means it is invalid or could not be read.
"""

import re
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.traceback import install

from genomicvalidator import __version__
from genomicvalidator.config import ValidatorConfig, set_env_flag
from genomicvalidator.reader import validate_vcf_accessibility
from genomicvalidator.validator import ValidationResult, validate_vcf_file

# Install rich traceback handler for better error display
install(show_locals=True)

console = Console(soft_wrap=True)
error_console = Console(stderr=True, soft_wrap=True)

app = typer.Typer(
    name="genomic-validator",
    help="Validate that a VCF file is well-formed before downstream use",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"genomic-validator version {__version__}")
        raise typer.Exit()


def _report(result: ValidationResult, settings: ValidatorConfig) -> None:
    """Print the result in the configured output format."""
    output_format = settings.output_format

    if output_format == "json":
        console.print(result.model_dump_json(), markup=False, highlight=False)
        return

    if result.valid:
        if output_format != "quiet":
            console.print("✅ VCF file is valid.", style="green")
            if settings.verbose:
                console.print(f"   {result.meta_lines} meta-information line(s), "
                              f"{result.records} record(s), {result.samples} sample(s)")
        return

    error_console.print(f"❌ {result.error_kind}: {result.reason}", style="red",
                        markup=False, highlight=False)
    error_console.print("Invalid VCF file format.", style="red")


@app.command()
def validate(
    vcf_file: Path = typer.Argument(..., help="VCF file to validate (plain or gzip-compressed)"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True,
        help="Show version and exit"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output the validation result as JSON"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Print nothing on success"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Trace each line as it is classified"
    ),
) -> None:
    """
    Validate a VCF file.

    Checks meta-information lines, the #CHROM column header and every data
    record, stopping at the first violation.
    """
    # Set global output format environment variables for the config layer
    if json_output:
        set_env_flag("JSON")
    if quiet:
        set_env_flag("QUIET")
    if verbose:
        set_env_flag("VERBOSE")

    settings = ValidatorConfig.from_env()

    try:
        validate_vcf_accessibility(vcf_file)
        result = validate_vcf_file(vcf_file, encoding=settings.encoding,
                                   verbose=settings.verbose)
    except (FileNotFoundError, PermissionError, ValueError) as e:
        error_console.print(f"❌ Error: {_sanitize_error_message(str(e))}", style="red")
        error_console.print("Invalid VCF file format.", style="red")
        raise typer.Exit(1)

    _report(result, settings)
    if not result.valid:
        raise typer.Exit(1)


def _sanitize_error_message(error_msg: str) -> str:
    """Sanitize error message to prevent Rich markup errors with binary data."""
    # Replace any character that's not printable ASCII, keeping basic punctuation
    sanitized = re.sub(r'[^\x20-\x7E\n\r\t]', '?', str(error_msg))

    # Escape Rich markup characters to prevent parsing issues
    sanitized = sanitized.replace('[', '\\[').replace(']', '\\]')

    return sanitized


def main() -> None:
    """Main entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        error_console.print("\n⚠️  Operation cancelled by user", style="yellow")
        sys.exit(130)
    except Exception as e:
        # Sanitize error message to prevent Rich markup errors
        error_msg = _sanitize_error_message(str(e))
        error_console.print(f"\n❌ Unexpected error: {error_msg}", style="red")
        sys.exit(1)


if __name__ == "__main__":
    main()
