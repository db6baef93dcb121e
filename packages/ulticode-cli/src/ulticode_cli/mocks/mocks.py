import click

from .entities import entities
from .validate import validate


@click.group()
def mocks() -> None:
    """Mock database inspection and integrity checks."""
    pass


mocks.add_command(validate)
mocks.add_command(entities)
