"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from exercise_tracker.api.errors import register_error_handlers
from exercise_tracker.api.exercise import router as exercise_router
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import parse_cors_origins
from exercise_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = app.state.container.settings
        logger.info(
            "Exercise tracker starting (%s): port %d, schema %s",
            settings.environment,
            settings.port,
            settings.supabase_schema,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(exercise_router)

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """Landing page with forms for the write endpoints."""
        return HTMLResponse(_INDEX_HTML)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


_INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Exercise Tracker</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      form { margin-bottom: 1.5rem; }
      input { display: block; padding: 0.4rem 0.6rem; width: 320px; margin: 0.3rem 0; }
      button { padding: 0.4rem 0.8rem; }
      code { background: #f6f6f6; padding: 0.1rem 0.3rem; }
    </style>
  </head>
  <body>
    <h1>Exercise Tracker</h1>
    <form action="/api/exercise/new-user" method="post">
      <h3>Create a new user</h3>
      <code>POST /api/exercise/new-user</code>
      <input name="username" type="text" placeholder="username" />
      <button type="submit">Submit</button>
    </form>
    <form action="/api/exercise/add" method="post">
      <h3>Add exercises</h3>
      <code>POST /api/exercise/add</code>
      <input name="userId" type="text" placeholder="userId*" />
      <input name="description" type="text" placeholder="description*" />
      <input name="duration" type="text" placeholder="duration* (mins.)" />
      <input name="date" type="text" placeholder="date (yyyy-mm-dd)" />
      <button type="submit">Submit</button>
    </form>
    <p>
      <strong>GET users:</strong> <code>/api/exercise/users</code><br />
      <strong>GET exercise log:</strong>
      <code>/api/exercise/log?userId=&lt;id&gt;[&amp;from][&amp;to][&amp;limit]</code>
    </p>
  </body>
</html>
"""
