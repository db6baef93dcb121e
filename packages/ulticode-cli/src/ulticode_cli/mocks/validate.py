from typing import Optional

import click

from .common import SEVERITY_STYLE, build_loader, schema_option, source_option


@click.command("validate")
@source_option
@schema_option
@click.option(
    "--verbose",
    is_flag=True,
    help="Print the report header even without errors and log each pass.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat warnings as failures (exit code 2).",
)
@click.option(
    "--export",
    type=click.Path(path_type=str, dir_okay=False),
    help="Export validation findings to YAML file.",
)
def validate(sources: tuple[str, ...], schema: Optional[str], verbose: bool, strict: bool, export: Optional[str]) -> None:
    """Check the mock database against the schema registry."""
    import logging
    import sys

    import yaml
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    from ulticode_core.codebase.log import configure_logger
    from ulticode_core.models.validation_report import ValidationResult
    from ulticode_core.validation.formatting import format_issue
    from ulticode_core.validation.mock_data import run_passes

    console = Console(soft_wrap=True)

    if verbose:
        configure_logger(logging.DEBUG)

    try:
        console.print("\n[bold cyan]Mock Data Validation[/bold cyan]")

        loader, registry = build_loader(sources, schema)
        passes = run_passes(loader.load_all(), registry)
        result = ValidationResult.merge(r for _, r in passes)

        if export:
            with open(export, "w") as f:
                yaml.dump(result.model_dump(mode="json"), f, default_flow_style=False, sort_keys=True)
            console.print(f"[green]✓[/green] Findings exported to {escape(export)}")

        table = Table(title="Validation Summary")
        table.add_column("Check", style="cyan")
        table.add_column("Errors", justify="right")
        table.add_column("Warnings", justify="right")
        for name, pass_result in passes:
            table.add_row(name, str(len(pass_result.errors)), str(len(pass_result.warnings)))
        table.add_row("total", str(len(result.errors)), str(len(result.warnings)), style="bold")
        console.print(table)

        has_errors = bool(result.errors)
        has_warnings = bool(result.warnings)

        if has_errors or verbose:
            header = "Validation errors found:" if has_errors else "Validation passed. Verbose report (no errors):"
            console.print(f"\n[bold]{header}[/bold]")
            for issue in result.errors:
                console.print(escape(format_issue(issue)), style=SEVERITY_STYLE["error"])

        if has_warnings:
            prefix = "Treating warnings as errors in strict mode:" if strict else "Warnings:"
            console.print(f"\n[bold]{prefix}[/bold]")
            for issue in result.warnings:
                console.print(escape(format_issue(issue)), style=SEVERITY_STYLE["warning"])

        if has_errors:
            console.print(f"\n[red]✗[/red] Validation failed with {len(result.errors)} errors")
            sys.exit(1)
        elif strict and has_warnings:
            console.print(f"\n[yellow]⚠[/yellow] Validation completed with {len(result.warnings)} warnings (strict mode)")
            sys.exit(2)
        elif has_warnings:
            console.print("\n[green]✓[/green] Mock data validation passed with warnings. Use --strict to fail on warnings.")
        else:
            console.print("\n[green]✓[/green] Mock data validation passed with no issues.")
        sys.exit(0)

    except Exception as e:
        console.print(f"[red]Error during validation: {escape(str(e))}[/red]")
        sys.exit(1)
