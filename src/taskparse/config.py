"""
Parser settings.

Settings never influence which subcommand is recognized; they only control
what the command-line entry point does with the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from taskparse.exceptions.core import SettingsError


@dataclass
class ParserSettings:
    """Configuration for command-line parsing.

    Can be created from dict or YAML with partial overrides. Only specified
    values override defaults.

    Examples:
        # All defaults
        settings = ParserSettings()

        # Partial override from dict
        settings = ParserSettings.from_dict({"allow_trailing_tokens": True})

        # From YAML file
        settings = ParserSettings.from_yaml("taskparse.yaml")
    """

    # Accept arguments left over after the subcommand instead of raising
    allow_trailing_tokens: bool = False

    # Program name used in messages when argv[0] is unavailable
    program_name: str = "ta"

    def __post_init__(self):
        if not isinstance(self.allow_trailing_tokens, bool):
            raise SettingsError(
                "allow_trailing_tokens",
                f"expected bool, got {type(self.allow_trailing_tokens).__name__}",
            )
        if not isinstance(self.program_name, str) or not self.program_name.strip():
            raise SettingsError("program_name", "must be a non-empty string")

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ParserSettings:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            ParserSettings instance with specified overrides

        Raises:
            SettingsError: If a value has the wrong type
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> ParserSettings:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            ParserSettings instance with YAML overrides

        Example YAML:
            allow_trailing_tokens: true
            program_name: task
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise SettingsError(str(path), "top level must be a mapping")

        return cls.from_dict(config)
