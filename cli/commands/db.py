import click
from catalog import config
from catalog.sa.database import Database

@click.command()
@click.option('--drop/--no-drop', default=False, help='Drop existing tables first')
@click.option('--force/--no-force', default=False, help='Skip confirmation prompts')
@click.pass_obj
def initdb(database: Database, drop: bool, force: bool):
    """Create the catalog tables"""
    if drop:
        if not force:
            click.confirm("This will delete ALL genres, books and book instances. Continue?", abort=True)
        database.drop_db()
    database.init_db()
    click.echo(click.style("Catalog tables are ready", fg='green'))

@click.command()
@click.option('--host', default=None, help='Interface to bind (defaults to $CATALOG_HOST)')
@click.option('--port', default=None, type=int, help='Port to bind (defaults to $CATALOG_PORT)')
@click.option('--reload/--no-reload', default=False, help='Restart on code changes')
def serve(host: str, port: int, reload: bool):
    """Run the web application with uvicorn"""
    import uvicorn

    uvicorn.run(
        "web.main:create_app",
        factory=True,
        host=host or config.host(),
        port=port or config.port(),
        reload=reload,
        reload_dirs=["web", "catalog"] if reload else None
    )
