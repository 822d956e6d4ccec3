"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "testgen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration template for decision-table-testgen.
# Replace every <REQUIRED> placeholder before running generate.
# Remove optional keys to keep their defaults.

# Target backend: playwright (browser steps), api (HTTP steps) or both.
framework: "<REQUIRED>"

# Directory receiving the generated *.spec.ts / *.spec.js files.
# Relative paths are resolved against the directory holding this file.
output_path: "<REQUIRED>"

# typescript (default) or javascript.
language: typescript

# standard (default), page-object or screenplay.
# page-object and screenplay currently render the same code as standard.
style: standard
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generation configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder generation configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
