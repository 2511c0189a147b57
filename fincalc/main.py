"""
Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from fincalc import __version__
from fincalc.api import router as api_router
from fincalc.config import get_settings
from fincalc.logging_config import configure_logging
from fincalc.preferences import JsonFileStorage, PreferencesStore
from fincalc.site.pages import inject, render_page
from fincalc.ui.templating import STATIC_DIR, load_shell

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the preferences store for the lifetime of the app."""
    current = get_settings()
    store = PreferencesStore(storage=JsonFileStorage(current.preferences_path))
    app.state.preferences = store
    logger.info("Preferences loaded from %s", current.preferences_path)
    try:
        yield
    finally:
        store.close()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Personal finance calculators",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

# Mount static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__}


@app.get("/{path:path}", response_class=HTMLResponse)
async def site_page(request: Request, path: str):
    """Render any site page; calculator inputs come from the query string."""
    route = "/" + path.strip("/")
    page = render_page(
        route,
        get_settings().canonical_site_url,
        preferences=request.app.state.preferences,
        inputs=dict(request.query_params),
    )
    return HTMLResponse(inject(load_shell(), page), status_code=page.status_code)


def run():
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "fincalc.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
