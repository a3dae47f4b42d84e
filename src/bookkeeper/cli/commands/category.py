"""Category management commands."""

import click

from bookkeeper.cli.error_handling import report_domain_errors
from bookkeeper.domain.category import TransactionCategoryService


def print_category_tree(categories: list[dict], indent: int = 0) -> None:
    """Recursively print category tree."""
    for cat in categories:
        prefix = "  " * indent
        click.echo(f"{prefix}{cat['name']} (ID: {cat['id']})")
        if cat.get("children"):
            print_category_tree(cat["children"], indent + 1)


@click.group()
def category_group():
    """Manage transaction categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories in tree format."""
    service = TransactionCategoryService(ctx.obj["db"])

    tree = service.get_tree()
    if not tree:
        click.echo("No categories found. Use 'category create' to add one.")
        return

    click.echo("\nCategories:")
    print_category_tree(tree)


@category_group.command("create")
@click.argument("name")
@click.option("--parent", "parent_id", type=int, help="Parent category ID")
@click.pass_context
@report_domain_errors
def create_category(ctx, name: str, parent_id: int | None):
    """Create a new category."""
    service = TransactionCategoryService(ctx.obj["db"])

    category = service.create({"name": name, "parent_id": parent_id})
    path = service.format_category_path(category.id)
    click.echo(f"Created category '{path}' (ID: {category.id})")


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.pass_context
@report_domain_errors
def delete_category(ctx, category_id: int):
    """Delete a category without children or transactions."""
    service = TransactionCategoryService(ctx.obj["db"])

    path = service.format_category_path(category_id)
    service.remove(category_id)
    click.echo(f"Deleted category '{path}' (ID: {category_id})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
