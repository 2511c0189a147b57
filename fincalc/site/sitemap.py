"""
Sitemap and robots.txt generation.
"""

import logging
import re
from pathlib import Path
from typing import Iterable
from xml.sax.saxutils import escape

from fincalc.site.routes import RouteCatalog

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "https://www.sitemaps.org/schemas/sitemap/0.9"
BASE_ROBOTS = "User-agent: *\nAllow: /\n"

_SITEMAP_LINE = re.compile(r"^Sitemap:.*$", re.MULTILINE)


def build_sitemap(site_url: str, routes: Iterable[str]) -> str:
    """One <url><loc> entry per route, in the order given."""
    entries = "\n".join(
        f"  <url>\n    <loc>{escape(site_url + route)}</loc>\n  </url>"
        for route in routes
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
        f"{entries}\n"
        "</urlset>\n"
    )


def update_robots(robots: str, site_url: str) -> str:
    """Point robots.txt at the sitemap, replacing any existing Sitemap line."""
    sitemap_line = f"Sitemap: {site_url}/sitemap.xml"
    if _SITEMAP_LINE.search(robots):
        robots = _SITEMAP_LINE.sub(sitemap_line, robots, count=1)
    else:
        robots = f"{robots.strip()}\n{sitemap_line}\n"
    return robots.strip() + "\n"


def write_sitemap(catalog: RouteCatalog, site_url: str, dist_dir: Path) -> int:
    """
    Write sitemap.xml and robots.txt into dist_dir.

    Returns:
        Number of routes in the sitemap
    """
    routes = catalog.all_routes()
    dist_dir.mkdir(parents=True, exist_ok=True)

    (dist_dir / "sitemap.xml").write_text(build_sitemap(site_url, routes), encoding="utf-8")

    robots_path = dist_dir / "robots.txt"
    robots = robots_path.read_text(encoding="utf-8") if robots_path.exists() else BASE_ROBOTS
    robots_path.write_text(update_robots(robots, site_url), encoding="utf-8")

    logger.info("Sitemap generated with %d routes.", len(routes))
    return len(routes)
