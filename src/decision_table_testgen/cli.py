"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

import click

from decision_table_testgen.code_generation import (
    CodeLanguage,
    CodeStyle,
    TestCodeGenerationRequest,
    TestFramework,
    generate_test_code,
    generation_result_to_dict,
)
from decision_table_testgen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_generation_settings,
    write_placeholder_configuration,
)
from decision_table_testgen.results_writing import ReportMetadata, write_generation_report
from decision_table_testgen.step_definitions import StepDefinitionError, load_test_steps
from decision_table_testgen.table_ingestion import (
    DecisionTableError,
    TableFormat,
    decision_table_to_dict,
    parse_decision_table,
)


class CliError(Exception):
    """Custom CLI error."""


def _choices(enum_type) -> click.Choice:
    return click.Choice([member.value for member in enum_type], case_sensitive=False)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="decision-table-testgen")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Decision table parser and Playwright test code generator."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="parse")
@click.argument("table_path", type=click.Path(path_type=str))
@click.option(
    "--format",
    "table_format",
    required=False,
    type=_choices(TableFormat),
    help="Decision table format; detected from the file extension when omitted.",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the canonical JSON document to this file instead of stdout.",
)
def parse_table(table_path: str, table_format: str | None, output_path: str | None) -> None:
    """Parse a CSV, JSON or Markdown decision table into canonical JSON."""
    try:
        table = parse_decision_table(table_path, table_format)
    except DecisionTableError as exc:
        raise CliError(str(exc)) from exc
    document = json.dumps(decision_table_to_dict(table), indent=2, ensure_ascii=False)
    if output_path is None:
        click.echo(document)
        return
    try:
        destination = Path(output_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(document + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


@cli.command(name="generate")
@click.option(
    "--table",
    "table_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the decision table (CSV, JSON or Markdown)",
)
@click.option(
    "--steps",
    "steps_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON step definitions",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generation configuration file",
)
@click.option("--framework", required=False, type=_choices(TestFramework))
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory for generated spec files (overrides the configuration).",
)
@click.option("--language", required=False, type=_choices(CodeLanguage))
@click.option("--style", required=False, type=_choices(CodeStyle))
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path of an Excel workbook summarising the generation run.",
)
# pylint: disable=too-many-arguments
def generate(
    table_path: str,
    steps_path: str,
    config_path: str | None,
    framework: str | None,
    output_dir: str | None,
    language: str | None,
    style: str | None,
    report_path: str | None,
) -> None:
    """Generate Playwright spec files from a decision table and its steps."""
    try:
        settings = load_generation_settings(
            config_path,
            overrides={
                "framework": framework,
                "output_path": output_dir,
                "language": language,
                "style": style,
            },
        )
        table = parse_decision_table(table_path)
        steps = load_test_steps(steps_path)
    except (ConfigurationError, DecisionTableError, StepDefinitionError) as exc:
        raise CliError(str(exc)) from exc

    request = TestCodeGenerationRequest(
        test_cases=table.test_cases,
        steps=steps,
        framework=settings.framework,
        output_path=settings.output_path,
        language=settings.language,
        style=settings.style,
    )
    result = generate_test_code(request)
    if report_path:
        try:
            write_generation_report(
                report_path,
                request,
                result,
                ReportMetadata(
                    generated_at=datetime.now(UTC),
                    table_path=str(Path(table_path).resolve()),
                    steps_path=str(Path(steps_path).resolve()),
                ),
            )
        except OSError as exc:
            raise CliError(str(exc)) from exc

    click.echo(json.dumps(generation_result_to_dict(result), indent=2, ensure_ascii=False))
    if not result.success:
        raise CliError("Test code generation finished with errors.")


# pylint: enable=too-many-arguments


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generation configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generation configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
