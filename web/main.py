# web/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog import config
from catalog.errors import CatalogError
from catalog.sa.database import Database
from web.dependencies import templates
from web.routes import genres

logger = logging.getLogger(__name__)

def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or config.log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

def _render_error(request: Request, message: str, status_code: int):
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Error", "message": message, "status_code": status_code},
        status_code=status_code
    )

def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the catalog application.

    Args:
        database: Database to serve from. If None, one is created from
                  DATABASE_URL and disposed on shutdown.
    """
    owns_database = database is None
    database = database or Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.init_db()
        yield
        if owns_database:
            database.dispose()

    app = FastAPI(title="Local Library", lifespan=lifespan)
    app.state.database = database
    app.include_router(genres.router)

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
        return _render_error(request, exc.message, exc.status_code)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return _render_error(request, "Database error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(genres.GENRE_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)

    return app

# Main execution
if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(
        "web.main:create_app",
        factory=True,
        host=config.host(),
        port=config.port(),
        reload=True,  # Enable auto-reload
        reload_dirs=["web", "catalog"]  # Watch both web and catalog directories for changes
    )
