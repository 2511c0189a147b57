"""
Write dist/sitemap.xml and point dist/robots.txt at it.

Uses SITE_URL and DIST_DIR from the environment (see fincalc.config).
"""
import sys
import os
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fincalc.config import get_settings
from fincalc.logging_config import configure_logging
from fincalc.site.routes import get_catalog
from fincalc.site.sitemap import write_sitemap


def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    count = write_sitemap(get_catalog(), settings.canonical_site_url, Path(settings.dist_dir))
    print(f"Sitemap generated with {count} routes.")


if __name__ == "__main__":
    main()
