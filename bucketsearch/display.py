"""
Path display for the bucket search engine.

Renders search results either as plain text or as a rich table.
"""

from rich.console import Console
from rich.table import Table
from rich.box import ROUNDED

from bucketsearch.config.config import config


def format_path(path):
    """
    Formats a path as plain text: the path length followed by one state per line.

    Args:
        path: A list of nodes, or None if the target was not reached

    Returns:
        str: The formatted text
    """
    if path is None:
        return config.display['not_found_message']

    lines = [f"{config.display['length_label']}: {len(path)}"]
    lines.extend(str(node) for node in path)
    return "\n".join(lines)


def render_path(path, console=None, title=None, nodes_expanded=None):
    """
    Prints a path to the console as a table of steps and states.

    Args:
        path: A list of nodes, or None if the target was not reached
        console: rich Console to print to (default: a new Console)
        title: Table title (default: from config)
        nodes_expanded: Optional expansion count shown below the table
    """
    if console is None:
        console = Console()

    if path is None:
        console.print(f"[bold red]{config.display['not_found_message']}[/bold red]")
        return

    table = Table(title=title or config.display['table_title'], box=ROUNDED,
                  border_style=config.display['border_style'])
    table.add_column("Step", style="bold green", justify="right")
    table.add_column("State", style=config.display['state_style'])

    for step, node in enumerate(path):
        table.add_row(str(step), str(node))

    console.print(table)
    console.print(f"[bold green]{config.display['length_label']}: {len(path)}[/bold green]")
    if nodes_expanded is not None:
        console.print(f"Nodes expanded: {nodes_expanded}")
