"""
Jinja2 templates shared by the web app and the prerender step.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

UI_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = UI_DIR / "templates"
STATIC_DIR = UI_DIR / "static"
SHELL_TEMPLATE = TEMPLATES_DIR / "shell.html"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def load_shell() -> str:
    """The HTML document that pages are injected into."""
    return SHELL_TEMPLATE.read_text(encoding="utf-8")
