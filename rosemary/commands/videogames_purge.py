import click

from app import create_app
from app.modules.videogame.repositories import VideoGameRepository
from core.storage.storage_service import ArtworkStorage


@click.command(
    "videogames:purge",
    help="Delete ALL video game records, optionally clearing the artwork folder too.",
)
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    help="Confirm the operation without prompting.",
)
@click.option(
    "--artwork",
    is_flag=True,
    help="Also delete every file in the artwork folder.",
)
def videogames_purge(yes, artwork):
    app = create_app()
    with app.app_context():
        if not yes:
            click.confirm(
                click.style("This will delete ALL video games. Continue?", fg="red"),
                abort=True,
            )

        deleted = VideoGameRepository().delete_all()
        click.echo(click.style(f"Purge summary: videogames={deleted}.", fg="green"))

        if artwork:
            removed = ArtworkStorage(app.config["ARTWORK_FOLDER"]).clear()
            click.echo(click.style(f"Artwork folder cleared ({removed} files).", fg="green"))
