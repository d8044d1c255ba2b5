"""
Rendering functions for gowork output.

This module handles all pretty-printing and table formatting.
Services return data, this module makes it human-readable.
"""

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .domain import ProjectMatch

console = Console()

MATCH_STYLES = {
    'project': 'green',
    'author': 'cyan',
    'distro': 'yellow',
}


def render_table(headers: List[str], rows: List[List[str]], title: Optional[str] = None) -> None:
    """
    Render a generic table with the given headers and rows.

    Args:
        headers: List of column headers
        rows: List of rows, where each row is a list of values
        title: Optional table title
    """
    if not rows:
        console.print("[yellow]No data to display.[/yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )

    for header in headers:
        table.add_column(header)

    for row in rows:
        table.add_row(*[str(val) for val in row])

    console.print(table)


def render_entities_table(items: List[Dict[str, Any]], title: Optional[str] = None) -> None:
    """Render distributors, authors or projects (their ``to_dict`` form)."""
    rows = [[item['id'], item.get('path', '')] for item in items]
    render_table(["Name", "Path"], rows, title=title)


def render_matches_table(matches: List[ProjectMatch], root: str) -> None:
    """
    Render search results as a table, most specific matches first.

    Args:
        matches: Matches in traversal order
        root: Workspace root, shown in the title
    """
    if not matches:
        console.print("[yellow]No projects found.[/yellow]")
        return

    table = Table(
        title=f"Projects in {root}",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("Match")
    table.add_column("Distributor")
    table.add_column("Author")
    table.add_column("Project")

    ordered = sorted(matches, key=lambda m: -m.kind)  # stable
    for match in ordered:
        label = match.kind.label
        style = MATCH_STYLES.get(label, "white")
        distro, author, name = match.project.split()
        table.add_row(f"[{style}]{label}[/{style}]", distro.name, author.name, name)

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(matches)}")
