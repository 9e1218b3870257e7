"""
Light-type catalog commands for the catalog admin CLI.
"""

from pathlib import Path

import click

from ...catalog import LightKey, LightTypeCatalog, resolve
from ...cli.base import BaseCommand, FileInputCommand, command_error_handler
from ...processors.light_type_import import LightTypeImportProcessor

class ListLightTypesCommand(BaseCommand):
    """List the catalog and how each light key resolves against it."""

    @command_error_handler
    def execute(self) -> None:
        entries = LightTypeCatalog(self.store).list()
        click.echo(f"Light types ({len(entries)}):")
        for entry in entries:
            click.echo(f"  {entry.id}  {entry.name}")

        click.echo("\nKey resolution:")
        for key in LightKey:
            resolution = resolve(key, entries)
            color = 'green' if resolution.matched else 'yellow'
            click.secho(f"  {key.value:<8} -> {resolution.catalog_id} ({resolution.label})", fg=color)

class ImportLightTypesCommand(FileInputCommand):
    """Import light types from a CSV file."""

    @command_error_handler
    def execute(self) -> int:
        processor = LightTypeImportProcessor(
            self.session_manager,
            batch_size=self.config.batch_size,
            debug=self.debug
        )
        self.logger.info(f"Importing light types from {self.input_file}")
        processor.process_file(self.input_file)

        stats = processor.get_stats()
        self.logger.info("Processing complete:")
        self.logger.info(f"Total light types: {stats['total_light_types']}")
        self.logger.info(f"Created: {stats['created']}")
        self.logger.info(f"Renamed: {stats['updated']}")
        self.logger.info(f"Unchanged: {stats['unchanged']}")
        self.logger.info(f"Skipped: {stats['skipped']}")

        if stats['failed_batches'] > 0 or stats['total_errors'] > 0:
            self.logger.error(f"Failed batches: {stats['failed_batches']}")
            self.logger.error(f"Total errors: {stats['total_errors']}")
            return 1
        click.secho(f"Imported {stats['created']} new light types", fg='green')
        return 0

@click.group('light-types')
def light_types():
    """Light-type catalog commands"""
    pass

@light_types.command('list')
@click.pass_context
def list_light_types(ctx):
    """List light types and the key each one resolves."""
    command = ListLightTypesCommand(ctx.obj['config'])
    command.execute()

@light_types.command('import')
@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.pass_context
def import_light_types(ctx, file: Path):
    """Import light types from a CSV file with a name (and optional id) column."""
    command = ImportLightTypesCommand(ctx.obj['config'], file)
    if command.execute():
        ctx.exit(1)

__all__ = ['light_types', 'ListLightTypesCommand', 'ImportLightTypesCommand']
