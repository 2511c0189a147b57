"""
Prerender every site route into static HTML under DIST_DIR.
"""
import sys
import os
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fincalc.config import get_settings
from fincalc.logging_config import configure_logging
from fincalc.site.prerender import prerender
from fincalc.site.routes import get_catalog


def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    dist_dir = Path(settings.dist_dir)
    written = prerender(get_catalog(), settings.canonical_site_url, dist_dir)
    for path in written:
        print(f"  {path}")
    print(f"Prerendered {len(written)} routes into {dist_dir}.")


if __name__ == "__main__":
    main()
