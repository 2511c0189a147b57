"""
SEO Utilities

Canonical URLs and the <head> tags every page carries: title, description,
canonical link, Open Graph and Twitter cards, and JSON-LD scripts.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from markupsafe import Markup

from fincalc.ui.templating import templates

TITLE_SUFFIX = " | English Calculators"
SOCIAL_IMAGE_PATH = "/social-card.svg"

StructuredData = Union[Dict, List[Dict], None]


def build_canonical(site_url: str, path: str) -> str:
    """Absolute URL for a site path; site_url has no trailing slash."""
    return f"{site_url}{path}"


def default_social_image(site_url: str) -> str:
    return f"{site_url}{SOCIAL_IMAGE_PATH}"


def page_title(title: str) -> str:
    return f"{title}{TITLE_SUFFIX}"


def _json_ld(data: Dict) -> Markup:
    # "</" inside a string would end the script element early
    return Markup(json.dumps(data, ensure_ascii=False).replace("</", "<\\/"))


@dataclass(frozen=True)
class HeadTags:
    """Everything rendered into a page's <head>."""

    title: str
    description: str
    canonical: str
    site_name: str
    og_type: str = "website"
    image: str = ""
    structured_data: List[Dict] = field(default_factory=list)

    def meta(self) -> List[Dict[str, str]]:
        """Meta elements as attribute dicts, in document order."""
        return [
            {"name": "description", "content": self.description},
            {"property": "og:title", "content": self.title},
            {"property": "og:description", "content": self.description},
            {"property": "og:url", "content": self.canonical},
            {"property": "og:type", "content": self.og_type},
            {"property": "og:site_name", "content": self.site_name},
            {"property": "og:image", "content": self.image},
            {"name": "twitter:card", "content": "summary_large_image"},
            {"name": "twitter:title", "content": self.title},
            {"name": "twitter:description", "content": self.description},
            {"name": "twitter:image", "content": self.image},
        ]


def generate_head_tags(
    title: str,
    description: str,
    path: str,
    site_url: str,
    site_name: str,
    og_type: str = "website",
    image: Optional[str] = None,
    structured_data: StructuredData = None,
) -> HeadTags:
    """
    Build the head tags for one page.

    Args:
        title: Full document title
        description: Meta description
        path: Site path of the page, used for the canonical URL
        site_url: Normalised site URL
        site_name: Open Graph site name
        og_type: Open Graph type
        image: Social image URL, defaults to the site social card
        structured_data: One JSON-LD object or a list of them

    Returns:
        HeadTags
    """
    if structured_data is None:
        scripts = []
    elif isinstance(structured_data, dict):
        scripts = [structured_data]
    else:
        scripts = list(structured_data)

    return HeadTags(
        title=title,
        description=description,
        canonical=build_canonical(site_url, path),
        site_name=site_name,
        og_type=og_type,
        image=image or default_social_image(site_url),
        structured_data=scripts,
    )


def render_head_tags(head: HeadTags) -> str:
    """Render head tags to HTML."""
    template = templates.get_template("head.html")
    return template.render(
        head=head, scripts=[_json_ld(data) for data in head.structured_data]
    )
