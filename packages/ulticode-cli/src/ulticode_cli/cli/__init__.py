import click
from ulticode_cli.mocks.mocks import mocks


@click.group()
def cli():
    pass


# add cli groups here

cli.add_command(mocks)
