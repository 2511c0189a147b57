"""
Server-side page rendering.

render_page() turns a site path into the page body, head tags and root
<html> attributes. The web app serves its output directly; the prerender
step writes it to disk for every route.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from fincalc.calculators.registry import CALCULATORS
from fincalc.preferences import PreferencesStore
from fincalc.site.routes import RouteCatalog, get_catalog
from fincalc.site.seo import generate_head_tags, page_title, render_head_tags
from fincalc.site.structured_data import (
    build_breadcrumb_schema,
    build_faq_schema,
    build_organization_schema,
    build_website_schema,
)
from fincalc.ui.templating import templates

logger = logging.getLogger(__name__)

STATIC_SECTIONS: Dict[str, List[Tuple[str, str]]] = {
    "accessibility": [
        (
            "Our commitment",
            "Every calculator works with a keyboard and a screen reader, and every "
            "input has a visible label, helper text, and a clear error message.",
        ),
        (
            "Display settings",
            "You can switch between light and dark themes, enlarge text, turn on "
            "high contrast, and reduce motion. The site follows your system theme "
            "and motion settings until you choose otherwise.",
        ),
        (
            "Feedback",
            "If something is hard to use, email us and tell us which page and "
            "which assistive technology you were using.",
        ),
    ],
    "privacy": [
        (
            "Calculations stay on your device",
            "The numbers you enter are used only to compute results on the page. "
            "We do not store or share them.",
        ),
        (
            "Preferences",
            "Theme and accessibility choices are saved in your browser so they "
            "persist between visits. Clearing site data removes them.",
        ),
    ],
    "terms": [
        (
            "Estimates only",
            "Results are estimates for planning and education. They are not "
            "financial, tax, or legal advice.",
        ),
        (
            "No warranty",
            "We work to keep the formulas accurate but provide the calculators "
            "as is, without any warranty.",
        ),
    ],
}


@dataclass(frozen=True)
class RenderedPage:
    status_code: int
    app_html: str
    head_tags: str
    html_attributes: Dict[str, str]

    def html_attributes_string(self) -> str:
        attrs = {"lang": "en", **self.html_attributes}
        return " ".join(f'{key}="{value}"' for key, value in attrs.items())


def _render(template_name: str, catalog: RouteCatalog, path: str, **context) -> str:
    template = templates.get_template(template_name)
    return template.render(
        site=catalog.site, breadcrumbs=catalog.breadcrumbs(path), **context
    )


def render_page(
    path: str,
    site_url: str,
    preferences: Optional[PreferencesStore] = None,
    inputs: Optional[Mapping[str, str]] = None,
    catalog: Optional[RouteCatalog] = None,
) -> RenderedPage:
    """
    Render the page at `path`.

    Args:
        path: Site path, e.g. "/calculators/loan-payment"
        site_url: Normalised site URL for canonical links
        preferences: Preferences whose html attributes go on <html>
        inputs: Raw calculator inputs; defaults are used when empty
        catalog: Route catalog, defaults to the packaged one

    Returns:
        RenderedPage, with status 404 for unknown paths
    """
    catalog = catalog or get_catalog()
    preferences = preferences or PreferencesStore()
    site = catalog.site
    status_code = 200

    calculator_meta = catalog.get_calculator_by_path(path)
    page = catalog.get_page_by_path(path)

    if calculator_meta is not None and calculator_meta.id in CALCULATORS:
        calculator = CALCULATORS[calculator_meta.id]
        raw = dict(inputs) if inputs else calculator.default_inputs()
        run = calculator.run(raw)
        body = _render(
            "calculator.html",
            catalog,
            path,
            calculator=calculator,
            meta=calculator_meta,
            run=run,
            inputs=raw,
            field_names={f.name for f in calculator.fields},
            related=catalog.related_calculators(calculator_meta.id),
        )
        title = page_title(calculator_meta.title)
        description = calculator_meta.description
        structured_data = [
            build_breadcrumb_schema(catalog.breadcrumbs(path), site_url),
            build_faq_schema(calculator.faqs),
        ]
    elif page is not None and page.id == "home":
        body = _render("home.html", catalog, path, popular=catalog.popular_calculators())
        title = page.title
        description = page.description
        structured_data = [
            build_website_schema(site, site_url),
            build_organization_schema(site, site_url),
        ]
    elif page is not None and page.id == "calculators":
        categories: Dict[str, list] = {}
        for meta in catalog.calculators:
            categories.setdefault(meta.category, []).append(meta)
        body = _render(
            "calculators_index.html", catalog, path, page=page, categories=categories
        )
        title = page_title(page.title)
        description = page.description
        structured_data = [build_breadcrumb_schema(catalog.breadcrumbs(path), site_url)]
    elif page is not None:
        body = _render(
            "page.html",
            catalog,
            path,
            page=page,
            sections=STATIC_SECTIONS.get(page.id, []),
        )
        title = page_title(page.title)
        description = page.description
        structured_data = [build_breadcrumb_schema(catalog.breadcrumbs(path), site_url)]
    else:
        logger.info("No page for path %s", path)
        status_code = 404
        body = _render("not_found.html", catalog, path)
        title = page_title("Page not found")
        description = site.description
        structured_data = None

    head = generate_head_tags(
        title=title,
        description=description,
        path=path,
        site_url=site_url,
        site_name=site.name,
        structured_data=structured_data,
    )

    return RenderedPage(
        status_code=status_code,
        app_html=body,
        head_tags=render_head_tags(head),
        html_attributes=preferences.html_attributes(),
    )


def inject(template: str, page: RenderedPage) -> str:
    """
    Place a rendered page into the HTML shell.

    Head tags replace <!--head-tags--> (or go before </head>); the body
    replaces <!--app-html--> (or fills an empty root div).
    """
    html = re.sub(
        r"<html[^>]*>",
        lambda _: f"<html {page.html_attributes_string()}>",
        template,
        count=1,
    )

    if "<!--head-tags-->" in html:
        html = html.replace("<!--head-tags-->", page.head_tags, 1)
    else:
        html = html.replace("</head>", f"{page.head_tags}\n</head>", 1)

    if "<!--app-html-->" in html:
        html = html.replace("<!--app-html-->", page.app_html, 1)
    else:
        html = html.replace(
            '<div id="root"></div>', f'<div id="root">{page.app_html}</div>', 1
        )

    return html
