"""Main CLI entry point for kvlens."""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from .config import Config
from .errors import KvlensError
from .outline import OutlineNode
from .registry import CatalogRegistry, find_palette_entry, palette_entries
from .service import KvLanguageService
from .syntax import KvModule


def _load_module(ast_path: Path) -> KvModule:
    """Read a parser-produced JSON AST."""
    try:
        data = json.loads(ast_path.read_text(encoding="utf-8"))
        return KvModule.from_dict(data)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid AST JSON in {ast_path}: {e}")
    except (KeyError, TypeError, AttributeError) as e:
        raise click.ClickException(f"Malformed AST in {ast_path}: missing or invalid {e}")


def _resolve_node(symbols: list[OutlineNode], path: str) -> OutlineNode:
    """Follow an index path such as ``0/2/1`` through the outline."""
    nodes = symbols
    node = None
    try:
        for part in path.strip("/").split("/"):
            node = nodes[int(part)]
            nodes = node.children
    except (ValueError, IndexError):
        raise click.ClickException(f"No outline node at path {path!r}")
    return node


def _add_branch(tree: Tree, node: OutlineNode) -> None:
    line = node.range.start.line
    detail = f" [dim]{escape(node.detail)}[/dim]" if node.detail else ""
    branch = tree.add(f"[bold]{escape(node.name)}[/bold]{detail} [cyan]:{line}[/cyan]")
    for child in node.children:
        _add_branch(branch, child)


def _write_or_echo(text: str, kv_path: Path, in_place: bool) -> None:
    if in_place:
        kv_path.write_text(text, encoding="utf-8")
        click.echo(f"Updated {kv_path}", err=True)
    else:
        click.echo(text, nl=False)


@click.group()
@click.option("--log-level", default=None, help="Logging level (default: KVLENS_LOG_LEVEL or WARNING)")
@click.option(
    "--registry",
    "registry_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML widget catalog to use instead of the bundled one",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, registry_path: Path | None):
    """kvlens - outline, completion and structural edits for Kivy KV files."""
    config = Config.from_env()
    if registry_path is not None:
        config = config.model_copy(update={"registry_path": registry_path})
    if log_level:
        config = config.model_copy(update={"log_level": log_level.upper()})

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        registry = (
            CatalogRegistry.from_path(config.registry_path)
            if config.registry_path
            else CatalogRegistry.default()
        )
    except KvlensError as e:
        raise click.ClickException(str(e))

    ctx.obj = KvLanguageService(registry, config=config)


@cli.command()
@click.argument("ast_json", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the host wire format")
@click.pass_obj
def outline(service: KvLanguageService, ast_json: Path, as_json: bool):
    """Print the outline for a parsed KV document.

    AST_JSON is the parser's output: {"rules": [...], "root": {...}}.

    Examples:
        kvlens outline main.ast.json
        kvlens outline main.ast.json --json
    """
    symbols = service.symbols_for_module(_load_module(ast_json))

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in symbols], indent=2))
        return

    tree = Tree(f"[bold green]{ast_json.name}[/bold green]")
    for symbol in symbols:
        _add_branch(tree, symbol)
    Console().print(tree)


@cli.command()
@click.argument("kv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--line", "-l", type=int, required=True, help="0-based cursor line")
@click.option("--character", "-c", type=int, required=True, help="0-based cursor character")
@click.pass_obj
def complete(service: KvLanguageService, kv_file: Path, line: int, character: int):
    """Print completion candidates at a cursor position as JSON."""
    items = service.completions(kv_file.read_text(encoding="utf-8"), line, character)
    click.echo(json.dumps([item.to_dict() for item in items], indent=2))


@cli.command()
@click.argument("kv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--line", "-l", type=int, required=True, help="0-based line to insert before")
@click.option("--column", "-c", type=int, default=0, help="Drop column; rounded down to an indent level")
@click.option("--snippet", "-s", default=None, help="Snippet text to insert")
@click.option("--widget", "-w", default=None, help="Palette widget to insert")
@click.option("--in-place", "-i", is_flag=True, help="Rewrite KV_FILE instead of printing")
@click.pass_obj
def insert(
    service: KvLanguageService,
    kv_file: Path,
    line: int,
    column: int,
    snippet: str | None,
    widget: str | None,
    in_place: bool,
):
    """Insert a snippet or palette widget into a KV file.

    Examples:
        kvlens insert main.kv --line 3 --column 4 --widget Label
        kvlens insert main.kv -l 3 -c 8 -s $'Button:\\n    text: "Go"'
    """
    if (snippet is None) == (widget is None):
        raise click.UsageError("Pass exactly one of --snippet or --widget")

    if widget is not None:
        entry = find_palette_entry(widget)
        if entry is None:
            raise click.ClickException(f"Unknown palette widget: {widget}")
        snippet = entry.snippet

    source = kv_file.read_text(encoding="utf-8")
    # The host protocol is 1-based
    result = service.add_widget(source, snippet, line + 1, column)
    if not result.success:
        raise click.ClickException(result.error or "Insert failed")

    _write_or_echo(result.kv_code, kv_file, in_place)


@cli.command()
@click.argument("kv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("ast_json", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--source", "source_path", required=True, help="Outline path of the node to move, e.g. 0/1")
@click.option("--target", "target_path", default=None, help="Outline path of the new parent (default: end)")
@click.option("--in-place", "-i", is_flag=True, help="Rewrite KV_FILE instead of printing")
@click.pass_obj
def move(
    service: KvLanguageService,
    kv_file: Path,
    ast_json: Path,
    source_path: str,
    target_path: str | None,
    in_place: bool,
):
    """Move an outline node (with its subtree) under another node."""
    symbols = service.symbols_for_module(_load_module(ast_json))
    item = _resolve_node(symbols, source_path)
    target = _resolve_node(symbols, target_path) if target_path else None

    text = service.move_item(kv_file.read_text(encoding="utf-8"), item, target)
    _write_or_echo(text, kv_file, in_place)


@cli.command()
@click.argument("kv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--line", "-l", type=int, required=True, help="0-based line holding an image property")
@click.option(
    "--root",
    "workspace_root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Workspace root to search for images",
)
@click.pass_obj
def image(service: KvLanguageService, kv_file: Path, line: int, workspace_root: Path | None):
    """Describe the image file named on a line (source, background_normal, ...)."""
    info = service.image_info(
        kv_file.read_text(encoding="utf-8"), line, kv_path=kv_file, workspace_root=workspace_root
    )
    if info is None:
        raise click.ClickException(f"No image found on line {line}")
    click.echo(info.to_markdown())


@cli.command()
@click.option("--category", default=None, help="Only show one category")
def palette(category: str | None):
    """List the widgets available for insertion."""
    entries = palette_entries(category)
    if not entries:
        raise click.ClickException(f"No palette entries for category {category!r}")

    table = Table(title="KV widget palette")
    table.add_column("Category", style="cyan")
    table.add_column("Widget", style="bold")
    table.add_column("Snippet")
    for entry in entries:
        table.add_row(entry.category, entry.name, escape(entry.snippet.replace("\n", " ⏎ ")))
    Console().print(table)


if __name__ == "__main__":
    cli()
