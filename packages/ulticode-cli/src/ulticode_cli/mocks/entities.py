from typing import Optional

import click

from .common import build_loader, schema_option, source_option


@click.command("entities")
@source_option
@schema_option
def entities(sources: tuple[str, ...], schema: Optional[str]) -> None:
    """List loaded entities, record counts, and the rules declared for them."""
    import sys

    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    from ulticode_core.schema.registry import SCHEMA_METADATA

    console = Console(soft_wrap=True)

    try:
        loader, registry = build_loader(sources, schema)
        database = loader.load_all()
        rules = SCHEMA_METADATA if registry is None else registry

        table = Table(title="Mock Entities")
        table.add_column("Entity", style="cyan")
        table.add_column("Records", justify="right")
        table.add_column("Rules")

        for name, records in database.items():
            metadata = rules.get(name)
            declared = ", ".join(metadata.rule_classes()) if metadata else "[dim]unregistered[/dim]"
            table.add_row(name, str(len(records)), declared)

        for name, metadata in rules.items():
            if name not in database:
                table.add_row(name, "[yellow]missing[/yellow]", ", ".join(metadata.rule_classes()))

        console.print(table)

    except Exception as e:
        console.print(f"[red]Error loading mock data: {escape(str(e))}[/red]")
        sys.exit(1)
