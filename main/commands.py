import click
from flask.cli import with_appcontext

from app.categories.services import CategoryService
from external.catalog import get_catalog


@click.command("list-categories")
@with_appcontext
def list_categories():
    """List the category taxonomy with active product counts."""
    tree = CategoryService.get_category_tree(get_catalog())

    click.echo("📋 Categories Hierarchy:")
    click.echo("=" * 50)

    for category in tree:
        click.echo(f"📁 {category['name']} ({category['count']} active)")
        click.echo(f"   Description: {category['description']}")
        click.echo(f"   Slug: {category['slug']}")
        click.echo("   📂 Subcategories:")
        for subcategory in category["subcategories"]:
            click.echo(f"      • {subcategory['name']} ({subcategory['count']})")
        click.echo()


@click.command("export-catalog")
@click.argument("path", type=click.Path(dir_okay=False, writable=True))
@with_appcontext
def export_catalog(path):
    """Write the loaded catalog to PATH as JSON."""
    catalog = get_catalog()
    catalog.to_json(path)
    click.echo(f"✅ Exported {len(catalog)} products to {path}")


def register_commands(app):
    app.cli.add_command(list_categories)
    app.cli.add_command(export_catalog)
