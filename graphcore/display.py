"""
Rich rendering of algorithm results.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from graphcore.entities import Edge
from graphcore.types import TopologicalOrder, WeightLookup


def labels_to_text(labels: Sequence[object], separator: str = " → ") -> Text:
    """Convert a label sequence to a Rich Text object, one style for labels, one for arrows."""
    text = Text()
    if not labels:
        text.append("(empty)", style="dim")
        return text
    for i, label in enumerate(labels):
        if i:
            text.append(separator, style="dim")
        text.append(str(label), style="bold cyan")
    return text


def edges_to_table(edges: Sequence[Edge], title: str = "Edges") -> Table:
    table = Table(title=title)
    table.add_column("Origin", style="cyan")
    table.add_column("Destination", style="cyan")
    table.add_column("Weight", justify="right", style="magenta")
    for edge in edges:
        table.add_row(
            str(edge.origin_label), str(edge.destination_label), f"{edge.weight:g}"
        )
    total = sum(edge.weight for edge in edges)
    table.caption = f"{len(edges)} edges, total weight {total:g}"
    return table


def topological_order_to_text(result: TopologicalOrder) -> Text:
    if result.is_sorted:
        return labels_to_text(result.order)
    text = Text("cycle detected", style="bold red")
    if result.order:
        text.append(" after ")
        text.append_text(labels_to_text(result.order))
    return text


def weight_lookup_to_text(lookup: WeightLookup) -> Text:
    if lookup.found:
        return Text(f"{lookup.weight:g}", style="bold magenta")
    return Text(lookup.status.value.replace("_", " "), style="bold red")


def display_flag(console: Console, name: str, value: bool) -> None:
    style = "bold green" if value else "bold red"
    console.print(Text(f"{name}: ").append(str(value).lower(), style=style))


def display_labels(console: Console, name: str, labels: Sequence[object]) -> None:
    console.print(Text(f"{name}: ").append_text(labels_to_text(labels)))
