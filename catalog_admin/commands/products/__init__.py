"""
Product commands for the catalog admin CLI.
Create, edit, inspect and delete products and their materialized inventory.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import click

from ...cli.base import BaseCommand, FileInputCommand, command_error_handler, json_default
from ...cli.config import Config
from ...errors import ValidationError
from ...processors.payload import ProductPayload, MediaBundle
from ...utils import is_standard_liner_code

def load_payload(path: Path) -> Tuple[ProductPayload, MediaBundle]:
    """Read a product payload JSON file.

    The file holds the form state; an optional ``media`` object lists new
    files, with relative paths resolved against the payload's directory.

    Raises:
        ValidationError: If the file is not valid JSON or a field cannot be parsed
    """
    try:
        data: Dict[str, Any] = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ValidationError([f"{path.name} is not valid JSON: {e}"])
    if not isinstance(data, dict):
        raise ValidationError([f"{path.name} must contain a JSON object"])
    media = MediaBundle.from_form(data.pop('media', None), base_dir=path.parent)
    return ProductPayload.from_form(data), media

class CreateProductCommand(FileInputCommand):
    """Create a product from a payload file."""

    @command_error_handler
    def execute(self) -> None:
        payload, media = load_payload(self.input_file)
        if not is_standard_liner_code(payload.code_liner):
            self.logger.warning(f"Liner code {payload.code_liner!r} is not a standard code")

        click.echo(f"Creating product {payload.name} ({payload.code_liner})...")
        orchestrator = self.build_orchestrator()
        result = orchestrator.create(payload, media)

        click.secho(
            f"Created product {result.product_id} with {result.inventory_count} inventory lines",
            fg='green'
        )
        orchestrator.error_tracker.log_summary(self.logger)

class EditProductCommand(FileInputCommand):
    """Replace a product's configuration from a payload file."""

    def __init__(self, config: Config, product_id: str, input_file: Path):
        super().__init__(config, input_file)
        self.product_id = product_id

    @command_error_handler
    def execute(self) -> None:
        payload, media = load_payload(self.input_file)

        click.echo(f"Updating product {self.product_id}...")
        orchestrator = self.build_orchestrator()
        result = orchestrator.replace(self.product_id, payload, media)

        click.secho(
            f"Updated product {result.product_id}; inventory rebuilt with "
            f"{result.inventory_count} lines",
            fg='green'
        )
        orchestrator.error_tracker.log_summary(self.logger)

class PreviewProductCommand(FileInputCommand):
    """Validate a payload file and report the inventory it would produce."""

    @command_error_handler
    def execute(self) -> None:
        payload, _ = load_payload(self.input_file)
        registry = self.build_orchestrator().validate(payload)
        click.secho("Payload is valid", fg='green')
        click.echo(
            f"{len(registry.pricing_models)} pricing models x "
            f"{len(registry.body_colors)} body colors x "
            f"{len(registry.light_keys)} light types = "
            f"{registry.expected_line_count} inventory lines"
        )

class DeleteProductCommand(BaseCommand):
    """Soft- or hard-delete a product."""

    def __init__(self, config: Config, product_id: str, hard: bool = False):
        super().__init__(config)
        self.product_id = product_id
        self.hard = hard

    @command_error_handler
    def execute(self) -> None:
        self.build_orchestrator().delete(self.product_id, hard=self.hard)
        action = "Deleted" if self.hard else "Moved to trash:"
        click.secho(f"{action} product {self.product_id}", fg='green')

class ListProductsCommand(BaseCommand):
    """List products, most recently updated first."""

    def __init__(self, config: Config, search: Optional[str] = None, include_deleted: bool = False):
        super().__init__(config)
        self.search = search
        self.include_deleted = include_deleted

    @command_error_handler
    def execute(self) -> None:
        products = self.build_orchestrator().list_products(self.search, self.include_deleted)
        click.echo(f"Products ({len(products)}):")
        for product in products:
            flags = []
            if not product['is_active']:
                flags.append('inactive')
            if product['deleted_at'] is not None:
                flags.append('deleted')
            suffix = f" [{', '.join(flags)}]" if flags else ''
            click.echo(f"  {product['code_liner']:<12} {product['name']} ({product['id']}){suffix}")

class ShowProductCommand(BaseCommand):
    """Print a product with all dependent rows."""

    def __init__(self, config: Config, product_id: str):
        super().__init__(config)
        self.product_id = product_id

    @command_error_handler
    def execute(self) -> None:
        full = self.build_orchestrator().get_product_full(self.product_id)
        click.echo(json.dumps(full, default=json_default, ensure_ascii=False, indent=2))

class ExportInventoryCommand(BaseCommand):
    """Export the inventory lines of a product."""

    def __init__(self, config: Config, product_id: str, output_file: Optional[Path] = None):
        super().__init__(config)
        self.product_id = product_id
        self.output_file = output_file

    @command_error_handler
    def execute(self) -> None:
        orchestrator = self.build_orchestrator()
        orchestrator.store.get('products', self.product_id)
        lines = orchestrator.get_inventory(self.product_id)
        self.write_rows(lines, self.output_file)
        if self.output_file:
            click.secho(f"Exported {len(lines)} inventory lines to {self.output_file}", fg='green')

@click.group()
def products():
    """Product management commands"""
    pass

@products.command('create')
@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.pass_context
def create_product(ctx, file: Path):
    """Create a product and its inventory from a payload JSON file."""
    command = CreateProductCommand(ctx.obj['config'], file)
    command.execute()

@products.command('edit')
@click.argument('product_id')
@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.pass_context
def edit_product(ctx, product_id: str, file: Path):
    """Replace a product's configuration and rebuild its inventory."""
    command = EditProductCommand(ctx.obj['config'], product_id, file)
    command.execute()

@products.command('preview')
@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.pass_context
def preview_product(ctx, file: Path):
    """Validate a payload and show how many inventory lines it produces."""
    command = PreviewProductCommand(ctx.obj['config'], file)
    command.execute()

@products.command('delete')
@click.argument('product_id')
@click.option('--hard', is_flag=True, help='Remove the product and all its rows permanently')
@click.pass_context
def delete_product(ctx, product_id: str, hard: bool):
    """Move a product to the trash, or delete it permanently with --hard."""
    if hard:
        click.confirm(f"Permanently delete product {product_id}?", abort=True)
    command = DeleteProductCommand(ctx.obj['config'], product_id, hard)
    command.execute()

@products.command('list')
@click.option('--search', help='Filter by name or liner code')
@click.option('--include-deleted', is_flag=True, help='Include products in the trash')
@click.pass_context
def list_products(ctx, search: Optional[str], include_deleted: bool):
    """List products, most recently updated first."""
    command = ListProductsCommand(ctx.obj['config'], search, include_deleted)
    command.execute()

@products.command('show')
@click.argument('product_id')
@click.pass_context
def show_product(ctx, product_id: str):
    """Show a product with specs, pricing, colors, gallery and FAQs."""
    command = ShowProductCommand(ctx.obj['config'], product_id)
    command.execute()

@products.command('inventory')
@click.argument('product_id')
@click.option('--output', type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
              help='Save inventory lines to a .csv or .json file')
@click.pass_context
def export_inventory(ctx, product_id: str, output: Optional[Path]):
    """Export a product's inventory lines."""
    command = ExportInventoryCommand(ctx.obj['config'], product_id, output)
    command.execute()

__all__ = [
    'products',
    'load_payload',
    'CreateProductCommand',
    'EditProductCommand',
    'PreviewProductCommand',
    'DeleteProductCommand',
    'ListProductsCommand',
    'ShowProductCommand',
    'ExportInventoryCommand'
]
