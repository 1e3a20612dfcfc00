"""pagefit configuration module.

This module provides:
- FitConfig: Dataclass for all batch conversion options
- YAML configuration file loading
- Validation of the requested page size and file extensions
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .constants import DEFAULT_PAGE_SIZE, OUTPUT_DIR_NAME, OUTPUT_SUFFIX, SUPPORTED_EXTENSIONS
from .exceptions import InvalidConfigError
from .sizes import PageSize, PageSizeTable

logger = logging.getLogger(__name__)


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML configuration file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dict, or empty dict if the file does not exist

    Raises:
        InvalidConfigError: If the file cannot be read or parsed
    """
    if not config_path.exists():
        logger.warning("Config file not found, using defaults: %s", config_path)
        return {}
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"Failed to parse config file {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidConfigError(f"Failed to read config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")
    return data


@dataclass
class FitConfig:
    """Batch conversion configuration.

    Configuration Sources (in order of precedence):
    1. CLI arguments via from_cli()
    2. YAML configuration file via from_yaml()
    3. Default values

    Example:
        >>> config = FitConfig(page_size="a4")
        >>> table = config.build_table()
        >>> config.validate(table).name
        'A4'

        >>> # From YAML file, with CLI overrides
        >>> config = FitConfig.from_yaml(Path("pagefit.yaml"), page_size="LEGAL")
    """

    # ==================== Page Size ====================
    page_size: str = DEFAULT_PAGE_SIZE
    custom_page_sizes: dict[str, dict[str, Any]] = field(default_factory=dict)

    # ==================== Input / Output ====================
    extensions: tuple[str, ...] = SUPPORTED_EXTENSIONS
    output_dir_name: str = OUTPUT_DIR_NAME
    output_suffix: str = OUTPUT_SUFFIX

    # ==================== Error Handling ====================
    continue_on_error: bool = False

    def __post_init__(self) -> None:
        """Check value types and normalize extensions to a lowercase tuple.

        Raises:
            InvalidConfigError: If a value loaded from YAML has the wrong type
        """
        for name in ("page_size", "output_dir_name", "output_suffix"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidConfigError(f"{name} must be a string, got {value!r}")

        if isinstance(self.extensions, str):
            self.extensions = (self.extensions,)
        if not isinstance(self.extensions, (list, tuple)) or not all(isinstance(e, str) for e in self.extensions):
            raise InvalidConfigError(f"extensions must be a list of strings, got {self.extensions!r}")
        self.extensions = tuple(ext.lower() for ext in self.extensions)

    @classmethod
    def from_yaml(cls, config_path: Path, **overrides: Any) -> FitConfig:
        """Load configuration from a YAML file.

        Expected layout::

            page_size: A4
            output_dir_name: out
            output_suffix: _out
            extensions: [.pdf, .xps]
            continue_on_error: false
            custom_page_sizes:
              POSTCARD: {width: 100, height: 148, unit: mm}

        Args:
            config_path: Path to YAML configuration file
            **overrides: Values taking precedence over the file

        Returns:
            FitConfig instance
        """
        yaml_config = _load_yaml_config(config_path)

        known = {
            "page_size",
            "custom_page_sizes",
            "extensions",
            "output_dir_name",
            "output_suffix",
            "continue_on_error",
        }
        unknown = sorted(set(yaml_config) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys in %s: %s", config_path, ", ".join(unknown))

        kwargs: dict[str, Any] = {key: yaml_config[key] for key in known if key in yaml_config}
        kwargs.update(overrides)
        return cls(**kwargs)

    @staticmethod
    def _extract_cli_kwargs(args: argparse.Namespace) -> dict[str, Any]:
        """Extract configuration kwargs from CLI arguments.

        Only options the user actually passed are returned, so they
        override the YAML file without masking it with defaults.
        """
        mappings = [
            ("page_size", "page_size"),
            ("output_dir_name", "output_dir_name"),
            ("suffix", "output_suffix"),
        ]
        kwargs: dict[str, Any] = {}
        for cli_name, config_name in mappings:
            value = getattr(args, cli_name, None)
            if value is not None:
                kwargs[config_name] = value

        if getattr(args, "continue_on_error", False):
            kwargs["continue_on_error"] = True
        return kwargs

    @classmethod
    def from_cli(cls, args: argparse.Namespace) -> FitConfig:
        """Create configuration from CLI arguments, reading ``--config`` if given."""
        kwargs = cls._extract_cli_kwargs(args)
        config_path = getattr(args, "config", None)
        if config_path:
            return cls.from_yaml(Path(config_path), **kwargs)
        return cls(**kwargs)

    def build_table(self, base: PageSizeTable | None = None) -> PageSizeTable:
        """Return the page-size table including any custom sizes."""
        table = base or PageSizeTable.default()
        if not self.custom_page_sizes:
            return table
        if not isinstance(self.custom_page_sizes, dict):
            raise InvalidConfigError("custom_page_sizes must be a mapping of name to size")
        return table.with_sizes(self.custom_page_sizes)

    def validate(self, table: PageSizeTable) -> PageSize:
        """Validate the configuration and resolve the requested page size.

        Raises:
            UnknownPageSizeError: If the page size is not in ``table``
            InvalidConfigError: If extensions or output naming are invalid
        """
        for ext in self.extensions:
            if not ext.startswith(".") or len(ext) < 2:  # noqa: PLR2004
                raise InvalidConfigError(f"Invalid file extension {ext!r}; expected e.g. '.pdf'")
        if not self.output_dir_name or Path(self.output_dir_name).name != self.output_dir_name:
            raise InvalidConfigError(f"Output folder name must be a plain name, got {self.output_dir_name!r}")

        page_size = table.get(self.page_size)
        logger.info(
            "Configuration validated: page_size=%s (%.2f x %.2f pt), extensions=%s, continue_on_error=%s",
            page_size.name,
            page_size.width,
            page_size.height,
            ",".join(self.extensions),
            self.continue_on_error,
        )
        return page_size
