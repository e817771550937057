import click

from catalog_browser.artwork import resolve_artwork_url
from catalog_browser.client import CatalogClient
from catalog_browser.controller import CatalogBrowser
from catalog_browser.criteria import FIELDS
from catalog_browser.exceptions import CatalogBrowserError
from catalog_browser.state import Status
from core.configuration.configuration import api_base_url, asset_base_url

COLUMNS = [("id", 5), ("title", 34), ("developer", 20), ("publisher", 20), ("genre", 14), ("platform", 14)]


def _cells(values):
    return "  ".join(str(v)[:width].ljust(width) for v, (_, width) in zip(values, COLUMNS))


def _format_record(record):
    values = [record.id, record.title, record.developer, record.publisher, record.genre, record.platform]
    return f"{_cells(values)}  {record.display_date()}"


@click.command("videogames:search", help="Search the catalog API from the terminal.")
@click.option("--title", default="", help="Substring of the title")
@click.option("--developer", default="", help="Substring of the developer")
@click.option("--publisher", default="", help="Substring of the publisher")
@click.option("--genre", default="", help="Substring of the genre")
@click.option("--platform", default="", help="Substring of the platform")
@click.option("--sort", type=click.Choice(["title", "date"]), default=None, help="Sort the results locally")
@click.option("--artwork", "artwork_id", type=int, default=None, help="Print the artwork URL of a game id")
@click.option("--api-url", default=None, help="Catalog API base URL")
def videogames_search(title, developer, publisher, genre, platform, sort, artwork_id, api_url):
    client = CatalogClient(base_url=api_url or api_base_url())
    asset_base = f"{api_url.rstrip('/')}/game-images" if api_url else asset_base_url()

    if artwork_id is not None:
        try:
            url = client.artwork(artwork_id)
        except CatalogBrowserError as e:
            raise click.ClickException(str(e))
        resolved = resolve_artwork_url(url, asset_base)
        click.echo(resolved or click.style(f"Game {artwork_id} has no artwork.", fg="yellow"))
        return

    browser = CatalogBrowser(client=client, asset_base=asset_base, debounce_wait=0)
    values = {"title": title, "developer": developer, "publisher": publisher, "genre": genre, "platform": platform}
    for field in FIELDS:
        browser.edit(field, values[field])

    state = browser.search()
    if state.status == Status.FAILED:
        raise click.ClickException(state.message)
    if state.status in (Status.IDLE, Status.EMPTY):
        click.echo(click.style(state.message, fg="yellow"))
        return

    if sort == "title":
        state = browser.sort_by_title()
    elif sort == "date":
        state = browser.sort_by_release_date()

    click.echo(click.style(_cells([name for name, _ in COLUMNS]) + "  release_date", bold=True))
    for record in state.results:
        click.echo(_format_record(record))
    click.echo(f"{len(state.results)} result(s)")
