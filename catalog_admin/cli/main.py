"""
Core CLI implementation for the catalog admin package.
"""

import click

from .config import Config
from .logging import setup_logging, get_logger
from ..commands.utils import TestConnectionCommand, InitDatabaseCommand, LinerCodesCommand
from ..commands.products import products
from ..commands.light_types import light_types

@click.group()
@click.option('--debug', is_flag=True, help='Enable detailed debug output')
@click.pass_context
def cli(ctx, debug: bool):
    """Catalog admin CLI tool"""
    # Store debug flag in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    
    try:
        config = Config.from_env()
        config.validate()
    except ValueError as e:
        setup_logging(debug=debug)
        click.echo(f"Error initializing configuration: {str(e)}", err=True)
        ctx.exit(1)
    
    setup_logging(debug=debug, level=config.log_level, log_dir=config.log_dir)
    ctx.obj['config'] = config
    
    logger = get_logger('cli')
    if debug:
        logger.debug("Debug mode enabled")

@cli.command('test-connection')
@click.pass_context
def test_connection(ctx):
    """Test database connectivity"""
    command = TestConnectionCommand(ctx.obj['config'])
    command.execute()

@cli.command('init-db')
@click.pass_context
def init_db(ctx):
    """Create the catalog tables if they do not exist"""
    command = InitDatabaseCommand(ctx.obj['config'])
    command.execute()

@cli.command('liner-codes')
@click.pass_context
def liner_codes(ctx):
    """List the standard liner codes"""
    command = LinerCodesCommand(ctx.obj['config'])
    command.execute()

cli.add_command(products)
cli.add_command(light_types)
