import click
from dotenv import load_dotenv

from rosemary.commands.db_seed import db_seed
from rosemary.commands.videogames_import import videogames_import
from rosemary.commands.videogames_purge import videogames_purge
from rosemary.commands.videogames_search import videogames_search

load_dotenv()


@click.group()
def cli():
    """Management commands for the Video Game Archive."""


cli.add_command(db_seed)
cli.add_command(videogames_import)
cli.add_command(videogames_purge)
cli.add_command(videogames_search)


if __name__ == "__main__":
    cli()
