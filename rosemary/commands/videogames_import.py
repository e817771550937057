import click

from app import create_app
from app.modules.videogame.csv_service import VideoGameCSVService
from core.storage.storage_service import ArtworkStorage


@click.command(
    "videogames:import",
    help=(
        "Import video games from a CSV file with the headers "
        "title,developer,publisher,genre,platform,release_date,artwork_url."
    ),
)
@click.option(
    "--csv",
    "csv_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="CSV file with one game per row",
)
@click.option(
    "--artwork-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory holding the artwork files referenced by relative path",
)
def videogames_import(csv_path, artwork_dir):
    """Import a CSV catalog, copying referenced artwork into the artwork folder."""
    app = create_app()
    with app.app_context():
        service = VideoGameCSVService(storage=ArtworkStorage(app.config["ARTWORK_FOLDER"]))
        try:
            count = service.import_file(csv_path, artwork_dir=artwork_dir)
        except ValueError as e:
            raise click.ClickException(str(e))

        click.echo(click.style(f"Imported {count} video games from {csv_path}.", fg="green"))
