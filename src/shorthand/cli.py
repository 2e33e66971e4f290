"""Command-line interface for Shorthand."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from shorthand import __version__
from shorthand.config import get_settings
from shorthand.core.element import ResolvedElement
from shorthand.core.factories import ElementFactory, ElementKind
from shorthand.formatting.ir import AbbreviationNode, Attribute
from shorthand.resources.store import DictResourceStore, ResourceError

app = typer.Typer(
    name="shorthand",
    help="Resolve an abbreviation against a resource file and show the result.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Shorthand v{__version__}")
        raise typer.Exit()


def parse_attribute(raw: str) -> Attribute:
    """Parse a name=value pair given on the command line."""
    name, separator, value = raw.partition("=")
    name = name.strip()
    if not separator or not name:
        raise ValueError(f"Expected name=value, got '{raw}'")
    return Attribute(name=name, value=value)


def format_label(element: ResolvedElement) -> str:
    """Build the rich label for one element."""
    label = f"[bold cyan]{escape(element.name or '')}[/bold cyan]"
    if element.real_name and element.real_name != element.name:
        label += f" [dim]({escape(element.real_name)})[/dim]"
    for attribute in element.attributes:
        label += f' {escape(attribute.name)}="{escape(attribute.value)}"'
    if element.is_repeating:
        label += f" [yellow]x{element.count}[/yellow]"
    return label


def build_tree(element: ResolvedElement, tree: Optional[Tree] = None) -> Tree:
    """Render ``element`` and its subtree as a rich Tree."""
    label = format_label(element)
    branch = tree.add(label) if tree is not None else Tree(label)

    content = element.get_content()
    if content:
        branch.add(f"[green]content:[/green] {escape(str(content))}")
    if element.value is not None:
        branch.add(f"[green]value:[/green] {escape(element.value)}")

    for child in element.children:
        build_tree(child, branch)

    return branch


@app.command()
def main(
    name: str = typer.Argument(
        ...,
        help="Abbreviation or snippet name to resolve",
    ),
    syntax: Optional[str] = typer.Option(
        None,
        "--syntax",
        "-s",
        help="Syntax to resolve against (default: html)",
    ),
    resources: Optional[Path] = typer.Option(
        None,
        "--resources",
        "-r",
        help="JSON resource file (default: SHORTHAND_RESOURCES)",
    ),
    snippet: bool = typer.Option(
        False,
        "--snippet",
        help="Resolve as a snippet instead of a tag element",
    ),
    attr: Optional[list[str]] = typer.Option(
        None,
        "--attr",
        "-a",
        help="Attribute written on the node as name=value (repeatable)",
    ),
    count: int = typer.Option(
        1,
        "--count",
        "-c",
        min=1,
        help="Repeat count of the node",
    ),
    text: Optional[str] = typer.Option(
        None,
        "--text",
        "-t",
        help="Literal text of the node",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the resolved element as JSON",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Resolve NAME the way an editor expansion would, without rendering markup.

    Examples:

        shorthand a:link -r resources.json

        shorthand btn -r resources.json -a class=primary

        shorthand cc:ie --snippet -r resources.json --json
    """
    settings = get_settings()
    use_syntax = syntax or settings.default_syntax
    resources_path = resources or settings.resources_file

    try:
        if resources_path is not None:
            store = DictResourceStore.from_file(resources_path)
        else:
            store = DictResourceStore({})
        attributes = tuple(parse_attribute(raw) for raw in attr or [])
    except (ResourceError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    node = AbbreviationNode(name=name, count=count, text=text, attributes=attributes)
    kind = ElementKind.SNIPPET_ELEMENT if snippet else ElementKind.TAG_ELEMENT
    element = ElementFactory(store).create(kind, node, use_syntax)

    if as_json:
        console.print_json(data=element.to_dict())
    else:
        console.print(build_tree(element))


if __name__ == "__main__":
    app()
