"""
Utility commands for the catalog admin CLI.
Provides helper commands for system operations and diagnostics.
"""

import click
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ...cli.base import BaseCommand, command_error_handler
from ...cli.config import Config
from ...utils import standard_liner_codes

class TestConnectionCommand(BaseCommand):
    """Command to test database connectivity."""
    
    def __init__(self, config: Config):
        super().__init__(config)
    
    def execute(self) -> None:
        """Execute the connection test."""
        self.logger.info("Testing database connection...")
        
        try:
            with self.session_manager as session:
                session.execute(text("SELECT 1")).scalar()
        except SQLAlchemyError as e:
            self.logger.error(f"Connection failed: {str(e)}")
            raise click.Abort()
            
        click.secho(
            "Successfully connected to the database!",
            fg='green'
        )

class InitDatabaseCommand(BaseCommand):
    """Create the catalog tables."""
    
    @command_error_handler
    def execute(self) -> None:
        try:
            self.session_manager.create_schema()
        except SQLAlchemyError as e:
            self.logger.error(f"Schema creation failed: {str(e)}")
            raise click.Abort()
        click.secho("Database schema is ready", fg='green')

class LinerCodesCommand(BaseCommand):
    """Print the standard liner code suggestions."""
    
    def execute(self) -> None:
        for code in standard_liner_codes():
            click.echo(code)

__all__ = ['TestConnectionCommand', 'InitDatabaseCommand', 'LinerCodesCommand']
