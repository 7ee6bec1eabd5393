"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from json_schema_lite.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from json_schema_lite.document_loading import DocumentLoadError, load_schema, read_document
from json_schema_lite.reference_resolution import UnresolvedReferenceError, dereference
from json_schema_lite.schema_document import Schema
from json_schema_lite.schema_model import RefProperty, SchemaParseError, encode_property


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="json-schema-lite")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log diagnostics to stderr.")
def cli(verbose: bool) -> None:
    """Parse JSON Schema documents and validate JSON instances against them."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML validator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML validator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="validate")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON/YAML schema document",
)
@click.option(
    "--instance",
    "instance_paths",
    required=True,
    multiple=True,
    type=click.Path(path_type=str),
    help="Path to a JSON/YAML instance document; repeat for several documents",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON validator configuration file",
)
def validate(schema_path: str, instance_paths: tuple[str, ...], config_path: str | None) -> None:
    """Validate instance documents against a schema and list every mismatch."""
    configuration = _load_configuration(config_path)
    schema = _load_schema(schema_path)

    failed = 0
    for instance_path in instance_paths:
        try:
            instance = read_document(instance_path)
        except DocumentLoadError as exc:
            raise CliError(str(exc)) from exc
        report = schema.validate(instance, settings=configuration.validation)
        for notice in report.notices:
            click.echo(f"{instance_path}: {notice.location}: {notice.message}")
        if report.is_ok:
            click.echo(f"{instance_path}: valid")
            continue
        failed += 1
        for mismatch in report.mismatches:
            click.echo(f"{instance_path}: {mismatch.location or '/'}: {mismatch.message}")

    if failed:
        raise CliError(f"{failed} of {len(instance_paths)} instance document(s) failed validation.")


@cli.command(name="inspect")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON/YAML schema document",
)
def inspect_schema(schema_path: str) -> None:
    """Print the identifying metadata and root shape of a schema."""
    schema = _load_schema(schema_path)
    if isinstance(schema.root, bool):
        click.echo(f"boolean schema: {json.dumps(schema.root)}")
        return

    schema_id = schema.id()
    root_node = schema.root_node()
    click.echo(f"draft: {schema.draft_version() or '-'}")
    click.echo(f"id: {schema_id if schema_id is not None else '-'}")
    click.echo(f"description: {schema.description() or '-'}")
    if root_node is None:
        click.echo("root: (any)")
    elif isinstance(root_node, RefProperty):
        click.echo(f"root: $ref {root_node.reference}")
    else:
        click.echo(f"root: {root_node.instance_type.value}")
    properties = schema.properties()
    if properties is not None:
        click.echo(f"properties: {', '.join(properties) or '-'}")
        click.echo(f"required: {', '.join(schema.required_properties() or ()) or '-'}")
    definitions = schema.definitions()
    if definitions:
        click.echo(f"definitions: {', '.join(definitions)}")


@cli.command(name="resolve")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON/YAML schema document",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON validator configuration file",
)
@click.argument("reference")
def resolve(schema_path: str, config_path: str | None, reference: str) -> None:
    """Print the schema node a `#/...` REFERENCE points at."""
    configuration = _load_configuration(config_path)
    schema = _load_schema(schema_path)
    try:
        node = dereference(
            reference, schema.root, max_depth=configuration.validation.max_reference_depth
        )
    except UnresolvedReferenceError as exc:
        raise CliError(str(exc)) from exc
    # a definition without a type description resolves to the empty schema
    encoded = encode_property(node) if node is not None else {}
    click.echo(json.dumps(encoded, indent=2, ensure_ascii=False))


def _load_configuration(config_path: str | None) -> Configuration:
    if config_path is None:
        return default_configuration()
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _load_schema(schema_path: str) -> Schema:
    try:
        return load_schema(schema_path)
    except (DocumentLoadError, SchemaParseError) as exc:
        raise CliError(str(exc)) from exc


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
