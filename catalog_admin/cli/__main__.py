"""Entry point for ``python -m catalog_admin.cli``."""

from .main import cli

if __name__ == '__main__':
    cli()
