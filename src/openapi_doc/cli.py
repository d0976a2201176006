"""CLI entry point for openapi-doc."""

import logging
from pathlib import Path

import click

from openapi_doc.errors import OpenApiDocError
from openapi_doc.models.doc import Doc
from openapi_doc.parser.loader import DEFAULT_MAX_DEPTH, from_path


def _load_doc(doc_path: Path, max_depth: int) -> Doc:
    """Load a document, reporting library errors as CLI errors."""
    try:
        return from_path(doc_path, max_depth=max_depth)
    except OpenApiDocError as e:
        raise click.ClickException(f"{type(e).__name__}: {e.message}") from e


def _iter_operations(doc: Doc):
    for path, item in doc.root.paths.items():
        for method, operation in item.operations().items():
            yield method, path, operation


def _reusable_count(doc: Doc) -> int:
    """Number of named reusable objects (V2 definitions, V3 components)."""
    root = doc.root
    if doc.is_v2:
        registries = (root.definitions, root.parameters, root.responses, root.security_definitions)
    elif root.components is None:
        return 0
    else:
        c = root.components
        registries = (
            c.schemas, c.responses, c.parameters, c.examples, c.request_bodies,
            c.headers, c.security_schemes, c.links, c.callbacks, c.path_items,
        )
    return sum(len(r) for r in registries if r)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """openapi-doc: inspect Swagger 2.0 and OpenAPI 3.x JSON documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--max-depth", default=DEFAULT_MAX_DEPTH, show_default=True, type=click.IntRange(min=1), help="Maximum JSON nesting depth.")
def inspect(doc_path: Path, max_depth: int):
    """Summarize a document: kind, version, title and sizes."""
    doc = _load_doc(doc_path, max_depth)
    kind = "Swagger" if doc.is_v2 else "OpenAPI"
    info = doc.root.info
    operations = sum(1 for _ in _iter_operations(doc))

    click.echo(f"{kind} {doc.version}: {info.title} (version {info.version})")
    click.echo(f"Paths: {len(doc.root.paths)}")
    click.echo(f"Operations: {operations}")
    click.echo(f"Reusable objects: {_reusable_count(doc)}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--max-depth", default=DEFAULT_MAX_DEPTH, show_default=True, type=click.IntRange(min=1), help="Maximum JSON nesting depth.")
def operations(doc_path: Path, max_depth: int):
    """List every operation as METHOD path [operationId]."""
    doc = _load_doc(doc_path, max_depth)
    for method, path, operation in _iter_operations(doc):
        line = f"{method.upper()} {path}"
        if operation.operation_id:
            line += f"  {operation.operation_id}"
        click.echo(line)
