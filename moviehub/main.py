from typing import Optional
from fastapi import FastAPI
from .config import Settings, settings as default_settings
from .logging_config import setup_logging
from .api.error_handlers import register_error_handlers
from .api.movies import router as movies_router
from .api.responses import MovieJSONResponse
from .store.movie_store import MovieStore


def create_app(
    store: Optional[MovieStore] = None,
    settings: Optional[Settings] = None
) -> FastAPI:
    """
    Build the MovieHub application around a movie store.

    :param store: Store the handlers operate on. A fresh empty store is
        created when omitted, so every app owns its own collection.
    :param settings: Settings to use instead of the environment defaults.
    :return: Configured FastAPI application.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    # only /movies and /movies/{id} exist; /movies/ must not redirect
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        default_response_class=MovieJSONResponse,
        redirect_slashes=False,
    )
    app.state.store = store if store is not None else MovieStore()
    app.include_router(movies_router)
    register_error_handlers(app)
    return app


app = create_app()
