import importlib
import inspect
import os

import click

from app import create_app, db
from core.seeders.BaseSeeder import BaseSeeder


def get_installed_seeders(app):
    seeders = []
    modules_dir = os.path.join(app.root_path, "modules")
    for module_name in sorted(os.listdir(modules_dir)):
        if not os.path.exists(os.path.join(modules_dir, module_name, "seeders.py")):
            continue
        seeder_module = importlib.import_module(f"app.modules.{module_name}.seeders")
        for _, obj in inspect.getmembers(seeder_module, inspect.isclass):
            if issubclass(obj, BaseSeeder) and obj is not BaseSeeder:
                seeders.append(obj())
    return sorted(seeders, key=lambda seeder: seeder.priority)


@click.command("db:seed", help="Populate the database with the seeders of every module.")
@click.option("--reset", is_flag=True, help="Drop and recreate every table before seeding.")
@click.option("-y", "--yes", is_flag=True, help="Confirm the reset without prompting.")
def db_seed(reset, yes):
    app = create_app()
    with app.app_context():
        if reset:
            if not yes:
                click.confirm(
                    click.style("This will drop ALL tables before seeding. Continue?", fg="red"),
                    abort=True,
                )
            db.drop_all()
            db.create_all()
            click.echo(click.style("Database reset.", fg="yellow"))

        for seeder in get_installed_seeders(app):
            try:
                seeder.run()
                click.echo(click.style(f"{seeder.__class__.__name__} performed.", fg="green"))
            except Exception as e:
                click.echo(click.style(f"Error running seeder {seeder.__class__.__name__}: {e}", fg="red"))
                raise click.ClickException(str(e))

        click.echo(click.style("Database populated with test data.", fg="green"))
