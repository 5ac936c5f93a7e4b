"""CLI entry point for apibook."""

import logging
from pathlib import Path

import click

from apibook.config import Settings, load_settings
from apibook.errors import ApibookError
from apibook.generator.document import build_document
from apibook.generator.renderer import default_template, load_template
from apibook.parser.base import Document
from apibook.parser.postman import parse_collection_file
from apibook.pipeline import convert_document
from apibook.publisher.confluence import ConfluencePublisher


def _load_document(collection_path: Path) -> Document:
    try:
        collection = parse_collection_file(collection_path)
    except ApibookError as e:
        raise click.ClickException(f"Failed to parse Postman collection: {e}") from e
    return build_document(collection)


def _convert(collection_path: Path, template: str) -> tuple[Document, str]:
    click.echo(f"Parsing {collection_path}...")
    try:
        document, result = convert_document(collection_path.read_bytes(), template)
    except ApibookError as e:
        raise click.ClickException(f"Failed to parse Postman collection: {e}") from e
    click.echo(f"Found {len(document.entries)} requests.")
    return document, result


def _load_settings(config_path: Path | None) -> Settings:
    try:
        return load_settings(config_path)
    except ApibookError as e:
        raise click.ClickException(str(e)) from e


def _resolve_template(template_path: Path | None, settings: Settings) -> str:
    template_path = template_path or settings.template_path
    if template_path is None:
        return default_template()
    try:
        return load_template(template_path)
    except OSError as e:
        raise click.ClickException(f"Cannot read template {template_path}: {e}") from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """apibook — turn Postman collections into Confluence API books."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("collection_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the rendered document.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML settings file.")
@click.option("--template", "template_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Template file (overrides settings).")
def render(collection_path: Path, output: Path, config_path: Path | None, template_path: Path | None):
    """Render a collection into a document file."""
    settings = _load_settings(config_path)
    _, result = _convert(collection_path, _resolve_template(template_path, settings))

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    click.echo(f"Document saved to {output}")


@main.command()
@click.argument("collection_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML settings file.")
@click.option("--template", "template_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Template file (overrides settings).")
@click.option("--title", default=None, help="Page title (defaults to the collection name).")
@click.option("--dry-run", is_flag=True, help="Print the page payload instead of posting it.")
def publish(collection_path: Path, config_path: Path | None, template_path: Path | None, title: str | None, dry_run: bool):
    """Render a collection and publish it as a Confluence page."""
    settings = _load_settings(config_path)
    document, body = _convert(collection_path, _resolve_template(template_path, settings))
    title = title or settings.page_title or document.collection_name or collection_path.stem

    publisher = ConfluencePublisher(settings)
    if dry_run:
        click.echo(publisher.page_for(title, body).model_dump_json(indent=2))
        return

    result = publisher.publish(title, body)
    if not result.success:
        raise click.ClickException(f"Failed to create Confluence page: {result.reason}")
    click.echo(f"Created page '{title}' {result.url}".rstrip())


@main.command()
@click.argument("collection_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect(collection_path: Path):
    """Show the normalized body fields of every request."""
    document = _load_document(collection_path)
    click.echo(f"Collection: {document.collection_name}")
    for entry in document.entries:
        click.echo(f"\n[{entry.method}] {entry.name}  {entry.url}")
        for field in entry.fields:
            click.echo(f"  {field.number}. {field.field} ({field.type}) - {field.description}")
        if entry.body:
            click.echo(f"  raw ({entry.body_mode}): {entry.body}")
