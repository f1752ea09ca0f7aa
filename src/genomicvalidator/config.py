"""
Configuration management for genomic-validator.

Settings come from environment variables (or a .env / settings.ini file
picked up by python-decouple). The CLI sets the GENOMICVALIDATOR_* variables
from its flags before reading the configuration.
"""

import os
from dataclasses import dataclass

from decouple import config

ENV_PREFIX = "GENOMICVALIDATOR_"


@dataclass
class ValidatorConfig:
    """Runtime settings for a validation run."""
    verbose: bool = False
    quiet: bool = False
    json_output: bool = False
    encoding: str = "utf-8"
    debug: bool = False

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Load configuration from environment variables."""
        return cls(
            verbose=config(f'{ENV_PREFIX}VERBOSE', default=False, cast=bool),
            quiet=config(f'{ENV_PREFIX}QUIET', default=False, cast=bool),
            json_output=config(f'{ENV_PREFIX}JSON', default=False, cast=bool),
            encoding=config(f'{ENV_PREFIX}ENCODING', default='utf-8'),
            debug=config('DEBUG', default=False, cast=bool),
        )

    @property
    def output_format(self) -> str:
        """One of json, quiet or human. JSON wins over quiet."""
        if self.json_output:
            return "json"
        elif self.quiet:
            return "quiet"
        return "human"


def set_env_flag(name: str) -> None:
    """Turn on a GENOMICVALIDATOR_* flag for the current process."""
    os.environ[f"{ENV_PREFIX}{name}"] = "1"
