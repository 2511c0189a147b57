"""
Prerender every route to static HTML.
"""

import logging
from pathlib import Path
from typing import List, Optional

from fincalc.preferences import PreferencesStore
from fincalc.site.pages import inject, render_page
from fincalc.site.routes import RouteCatalog
from fincalc.ui.templating import load_shell

logger = logging.getLogger(__name__)


def output_path(dist_dir: Path, route: str) -> Path:
    """dist/index.html for the home page, dist/<route>/index.html otherwise."""
    if route == "/":
        return dist_dir / "index.html"
    return dist_dir / route.strip("/") / "index.html"


def prerender(
    catalog: RouteCatalog,
    site_url: str,
    dist_dir: Path,
    template: Optional[str] = None,
) -> List[Path]:
    """
    Render each route into dist_dir using the HTML shell.

    The packaged shell is used unless a template is given. Pages use
    default preferences.

    Returns:
        Paths written, in route order
    """
    if template is None:
        template = load_shell()

    written = []
    with PreferencesStore() as preferences:
        for route in catalog.all_routes():
            page = render_page(route, site_url, preferences=preferences, catalog=catalog)
            target = output_path(dist_dir, route)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(inject(template, page), encoding="utf-8")
            logger.debug("Prerendered %s -> %s", route, target)
            written.append(target)

    logger.info("Prerendered %d routes.", len(written))
    return written
