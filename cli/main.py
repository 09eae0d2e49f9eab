# cli/main.py
import click
from catalog.sa.database import Database
from web.main import configure_logging
from .commands.db import initdb, serve
from .commands.genre import genre

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='SQLAlchemy database URL (defaults to $DATABASE_URL or sqlite:///catalog.db)')
@click.option('--log-level', envvar='CATALOG_LOG_LEVEL', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx: click.Context, database_url: str, log_level: str):
    """Local Library catalog CLI"""
    configure_logging(log_level.upper())
    # Callers (and tests) may hand in a ready Database as the context object
    if not isinstance(ctx.obj, Database):
        ctx.obj = Database(database_url)

cli.add_command(initdb)
cli.add_command(serve)
cli.add_command(genre)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
