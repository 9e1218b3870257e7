"""
Base command infrastructure for the catalog admin CLI.
Provides common functionality and utilities for all commands.
"""

import csv
import functools
import io
import json
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from .config import Config
from ..catalog import LightTypeCatalog
from ..db.session import SessionManager
from ..db.store import RelationalStore
from ..errors import CatalogAdminError, ValidationError, DuplicateLinerCodeError
from ..processors.orchestrator import PersistenceOrchestrator
from ..processors.progress import ProgressLog, ProgressEntry, StepStatus
from ..storage import LocalObjectStorage

class BaseCommand(ABC):
    """Base class for all CLI commands."""

    def __init__(self, config: Config):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self._session_manager = None

        # Get debug status from click context
        ctx = click.get_current_context(silent=True)
        self.debug = bool(ctx and ctx.obj and ctx.obj.get('debug'))
        if self.debug:
            self.logger.debug(f"Debug mode enabled for {self.__class__.__name__}")

    @property
    def session_manager(self) -> SessionManager:
        """Get or create the session manager."""
        if self._session_manager is None:
            if self.debug:
                self.logger.debug(f"Creating new engine for {self.config.database_url}")
            self._session_manager = SessionManager(self.config.database_url)
        return self._session_manager

    @property
    def store(self) -> RelationalStore:
        return RelationalStore(self.session_manager)

    def build_orchestrator(self) -> PersistenceOrchestrator:
        """Create an orchestrator wired to the configured store and storage."""
        storage = LocalObjectStorage(
            self.config.storage_root,
            self.config.public_base_url,
            self.config.storage_bucket
        )
        store = self.store
        return PersistenceOrchestrator(
            store,
            LightTypeCatalog(store),
            storage=storage,
            progress=ProgressLog(sink=echo_progress),
            debug=self.debug
        )

    @abstractmethod
    def execute(self) -> None:
        """Execute the command. Must be implemented by subclasses."""
        pass

    def validate(self) -> bool:
        """Validate command configuration and requirements.

        Returns:
            bool: True if validation passes, False otherwise
        """
        if self.debug:
            self.logger.debug("Validating command configuration")
        return self.config.validate()

    def write_rows(self, rows: List[Dict[str, Any]], output: Optional[Path] = None) -> None:
        """Write rows as JSON or CSV (by output suffix or configured format)."""
        fmt = self.config.output_format
        if output is not None and output.suffix.lower() in ('.json', '.csv'):
            fmt = output.suffix.lower().lstrip('.')

        if fmt == 'csv':
            text = _rows_to_csv(rows)
        elif fmt == 'json':
            text = json.dumps(rows, default=json_default, ensure_ascii=False, indent=2)
        else:
            text = "\n".join(
                ", ".join(f"{k}={_display(v)}" for k, v in row.items())
                for row in rows
            )

        if output is None:
            click.echo(text)
        else:
            output.write_text(text, encoding='utf-8')
            self.logger.info(f"Wrote {len(rows)} rows to {output}")

class FileInputCommand(BaseCommand):
    """Base class for commands that process input files."""

    def __init__(self, config: Config, input_file: Path, output_file: Optional[Path] = None):
        super().__init__(config)
        self.input_file = input_file
        self.output_file = output_file

    def validate(self) -> bool:
        """Validate input file exists and is readable."""
        if not super().validate():
            return False

        if not self.input_file.exists():
            self.logger.error(f"Input file not found: {self.input_file}")
            return False

        if not self.input_file.is_file():
            self.logger.error(f"Input path is not a file: {self.input_file}")
            return False

        return True

def json_default(value: Any) -> Any:
    """Serialize values json does not handle natively."""
    if hasattr(value, 'isoformat'):
        return value.isoformat()
    if hasattr(value, 'value'):  # enums
        return value.value
    return str(value)

def _display(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float)):
        return value
    return json_default(value)

def _rows_to_csv(rows: List[Dict[str, Any]]) -> str:
    buffer = io.StringIO()
    if rows:
        writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for row in rows:
            writer.writerow({k: _display(v) for k, v in row.items()})
    return buffer.getvalue()

def echo_progress(entry: ProgressEntry) -> None:
    """Print a progress entry for the operator."""
    if entry.status is StepStatus.FAILED:
        click.secho(f"  x {entry.message}: {entry.error}", fg='red')
    else:
        click.secho(f"  - {entry.message}", fg='green')

def command_error_handler(f):
    """Decorator to handle command execution errors consistently."""
    @functools.wraps(f)
    def wrapper(self, *args, **kwargs):
        try:
            if self.debug:
                self.logger.debug(f"Starting command execution: {f.__name__}")
                start = time.time()

            result = f(self, *args, **kwargs)

            if self.debug:
                self.logger.debug(f"Command completed in {time.time() - start:.3f}s")

            return result

        except DuplicateLinerCodeError as e:
            click.secho(f"Error: {e.message}. Choose a different liner code.", fg='red')
            raise click.Abort()
        except ValidationError as e:
            click.secho("Validation failed:", fg='red')
            for issue in e.issues:
                click.secho(f"  - {issue}", fg='red')
            raise click.Abort()
        except CatalogAdminError as e:
            click.secho(f"Error: {e.message}", fg='red')
            if e.product_id:
                click.secho(
                    f"Rows written before the failure were kept for product {e.product_id}.",
                    fg='yellow'
                )
            raise click.Abort()
    return wrapper
