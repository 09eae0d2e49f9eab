import click
from catalog.errors import GenreNotFound
from catalog.sa.database import Database
from catalog.sa.repositories import GenreRepository
from catalog.services import GenreService
from web.schemas.genre import validate_genre_name

@click.group()
def genre():
    """Genre management commands"""
    pass

@genre.command(name="list")
@click.pass_obj
def list_genres(database: Database):
    """List all genres by name, with the number of books in each."""
    with database.get_db() as session:
        rows = GenreRepository(session).count_books_by_genre()

        if not rows:
            click.echo("No genres found.")
            return

        for item, book_count in rows:
            click.echo(f"{item.id:>5}  {item.name}  ({book_count} books)")

@genre.command(name="add")
@click.argument('name')
@click.pass_obj
def add_genre(database: Database, name: str):
    """
    Create a genre called NAME, unless one with that name already exists.
    """
    submission = validate_genre_name(name)
    if not submission.is_valid:
        for error in submission.errors:
            click.echo(click.style(error.msg, fg='red'), err=True)
        raise click.exceptions.Exit(1)

    with database.get_db() as session:
        item, created = GenreService(session).create_or_get_genre(submission.name)
        if created:
            click.echo(click.style(f"Created genre {item.name} ({item.url})", fg='green'))
        else:
            click.echo(click.style(f"Genre {item.name} already exists ({item.url})", fg='yellow'))

@genre.command(name="delete")
@click.argument('genre_id', type=int)
@click.option('--force/--no-force', default=False, help='Skip confirmation prompts')
@click.pass_obj
def delete_genre(database: Database, genre_id: int, force: bool):
    """
    Delete genre GENRE_ID together with its books and their instances.
    """
    with database.get_db() as session:
        service = GenreService(session)
        try:
            item, books = service.get_genre_for_delete(genre_id)
        except GenreNotFound as e:
            click.echo(click.style(f"{e.message}: {genre_id}", fg='red'), err=True)
            raise click.exceptions.Exit(1)

        click.echo(f"\nThis will delete genre '{item.name}' and {len(books)} book(s):")
        for book in books:
            click.echo(f"  - {book.title}")

        if not force:
            click.confirm("\nAre you sure?", abort=True)

        result = service.delete_genre_cascade(genre_id)
        click.echo(click.style(
            f"\nDeleted {result.genres} genre(s), {result.books} book(s), {result.instances} instance(s)",
            fg='green'
        ))
