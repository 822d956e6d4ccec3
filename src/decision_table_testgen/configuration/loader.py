"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import yaml

from decision_table_testgen.code_generation.generation_models import (
    CodeLanguage,
    CodeStyle,
    TestFramework,
)

from .runtime_settings import GenerationSettings

_EnumT = TypeVar("_EnumT", bound=Enum)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_generation_settings(
    config_path: Path | str | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> GenerationSettings:
    """Load and validate generation settings.

    Args:
      config_path: Optional YAML/JSON configuration file.
      overrides: Values taking precedence over the file, typically CLI options.
        ``None`` values are ignored. A relative ``output_path`` override is
        resolved against the working directory.

    Raises:
      ConfigurationError: If the file is missing, malformed or holds invalid values.
    """
    path = Path(config_path) if config_path is not None else None
    parsed = _read_configuration_file(path) if path is not None else {}
    base_path = path.parent if path is not None else Path.cwd()

    section: dict[str, Any] = dict(parsed)
    override_values = {key: value for key, value in (overrides or {}).items() if value is not None}
    if "output_path" in override_values:
        base_path = Path.cwd()
    section.update(override_values)

    return GenerationSettings(
        path=path,
        framework=_require_choice(section.get("framework"), TestFramework, "framework"),
        output_path=_resolve_path(
            base_path, _require_non_empty_string(section.get("output_path"), "output_path")
        ),
        language=_require_choice(
            section.get("language", CodeLanguage.TYPESCRIPT.value), CodeLanguage, "language"
        ),
        style=_require_choice(section.get("style", CodeStyle.STANDARD.value), CodeStyle, "style"),
    )


def _read_configuration_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")
    return parsed


def _require_choice(value: Any, choices: type[_EnumT], field_name: str) -> _EnumT:
    if isinstance(value, choices):
        return value
    allowed = ", ".join(str(choice.value) for choice in choices)
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.")
    try:
        return choices(value.strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"{field_name} '{value}' is not supported; expected one of: {allowed}."
        ) from None


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
