"""
Route catalog for the site.

Page and calculator metadata lives in fincalc/data/routes.json and is shared
by the HTML pages, the sitemap and the prerender step.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

ROUTES_PATH = Path(__file__).resolve().parent.parent / "data" / "routes.json"


class SiteInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    tagline: str
    description: str
    contact_email: str = Field(alias="contactEmail")


class PageMeta(BaseModel):
    id: str
    path: str
    title: str
    description: str
    breadcrumb: str


class CalculatorMeta(PageMeta):
    category: str
    popular: bool = False
    related: List[str] = []


class RouteCatalog(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    site: SiteInfo
    core_pages: List[PageMeta] = Field(default_factory=list, alias="corePages")
    legal_pages: List[PageMeta] = Field(default_factory=list, alias="legalPages")
    calculators: List[CalculatorMeta] = Field(default_factory=list)

    @property
    def home_page(self) -> PageMeta:
        return self._core_page("home", 0)

    @property
    def calculators_index_page(self) -> PageMeta:
        return self._core_page("calculators", 1)

    def _core_page(self, page_id: str, fallback_index: int) -> PageMeta:
        for page in self.core_pages:
            if page.id == page_id:
                return page
        return self.core_pages[fallback_index]

    def all_pages(self) -> List[PageMeta]:
        """Core pages, then legal pages, then calculators."""
        return [*self.core_pages, *self.legal_pages, *self.calculators]

    def all_routes(self) -> List[str]:
        return [page.path for page in self.all_pages() if page.path]

    def get_calculator_by_id(self, calculator_id: str) -> Optional[CalculatorMeta]:
        return next((c for c in self.calculators if c.id == calculator_id), None)

    def get_calculator_by_path(self, path: str) -> Optional[CalculatorMeta]:
        return next((c for c in self.calculators if c.path == path), None)

    def get_page_by_path(self, path: str) -> Optional[PageMeta]:
        return next(
            (p for p in [*self.core_pages, *self.legal_pages] if p.path == path), None
        )

    def popular_calculators(self) -> List[CalculatorMeta]:
        return [c for c in self.calculators if c.popular]

    def related_calculators(self, calculator_id: str) -> List[CalculatorMeta]:
        """Related calculators in declared order; unknown ids are skipped."""
        calculator = self.get_calculator_by_id(calculator_id)
        if calculator is None:
            return []
        related = (self.get_calculator_by_id(rid) for rid in calculator.related)
        return [c for c in related if c is not None]

    def breadcrumbs(self, path: str) -> List[PageMeta]:
        """Trail of pages leading to `path`, starting at the home page."""
        if not self.core_pages or path == "/":
            return []

        home = self.home_page
        index = self.calculators_index_page

        if path == index.path:
            return [home, index]

        if path.startswith("/calculators/"):
            calculator = self.get_calculator_by_path(path)
            if calculator is not None:
                return [home, index, calculator]

        page = self.get_page_by_path(path)
        if page is not None:
            return [home, page]

        return [home]


def load_catalog(path: Path = ROUTES_PATH) -> RouteCatalog:
    """Read and validate the route data; raises FileNotFoundError when missing."""
    if not path.exists():
        raise FileNotFoundError(f"Missing routes data at {path}")
    # utf-8-sig drops a byte-order mark if an editor added one
    raw = path.read_text(encoding="utf-8-sig")
    return RouteCatalog.model_validate(json.loads(raw))


@lru_cache()
def get_catalog() -> RouteCatalog:
    """Get cached route catalog."""
    return load_catalog()
