"""
Keyspace Configuration
=======================

Dataclass-backed settings loaded from a TOML file::

    [global]
    log_level = "INFO"
    log_file = "keyspace.log"
    log_json = true
    output_format = "console"

    [estimator]
    reference_year = 0              # 0: the current year
    frequency_lists = ""            # "": the bundled lists
    keyboard_layouts = ["qwerty", "keypad"]
    dictionaries = []               # []: every list in the file

Missing sections and keys fall back to the dataclass defaults; keys the
dataclasses do not declare are ignored.

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
    - The Twelve-Factor App, III. Config. https://12factor.net/config
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_DEFAULT_CONFIG_PATH: Path = Path.cwd() / "keyspace.toml"

OUTPUT_FORMATS = ("console", "json")


@dataclass(slots=True)
class GlobalConfig:
    """Logging and presentation settings."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    output_format: str = "console"


@dataclass(slots=True)
class EstimatorConfig:
    """Data and calibration settings for the estimator.

    Attributes:
        reference_year: Year date guesses are measured from; ``0`` uses
            the current year.
        frequency_lists: JSON file of ordered word lists; ``""`` uses the
            bundled lists.
        keyboard_layouts: Adjacency graphs to build; empty builds all.
        dictionaries: Frequency lists to rank; empty ranks all.
    """

    reference_year: int = 0
    frequency_lists: str = ""
    keyboard_layouts: list[str] = field(default_factory=list)
    dictionaries: list[str] = field(default_factory=list)


@dataclass(slots=True)
class KeyspaceConfig:
    """Root configuration.

    Usage:
        >>> config = KeyspaceConfig.load("keyspace.toml")
        >>> config.estimator.reference_year
        0
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    estimator: EstimatorConfig = field(default_factory=EstimatorConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> KeyspaceConfig:
        """Read configuration from *path*, or ``./keyspace.toml`` if present.

        Args:
            path: TOML file to read. When omitted, a missing default
                file yields pure defaults.

        Raises:
            FileNotFoundError: If an explicit *path* does not exist.
            ValueError: If ``output_format`` is not a known format.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH
        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        config = cls(
            global_settings=_build_section(GlobalConfig, raw.get("global", {})),
            estimator=_build_section(EstimatorConfig, raw.get("estimator", {})),
        )
        if config.global_settings.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output_format {config.global_settings.output_format!r}; "
                f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        return config

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _build_section(section_cls: type, data: dict[str, Any]) -> Any:
    """Instantiate *section_cls* from the keys it declares, ignoring the rest."""
    known = {f.name for f in fields(section_cls)}
    return section_cls(**{key: value for key, value in data.items() if key in known})


def get_config(path: str | Path | None = None) -> KeyspaceConfig:
    """Cached :meth:`KeyspaceConfig.load`; an explicit *path* reloads."""
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = KeyspaceConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
