"""
Schema.org JSON-LD builders.
"""

from typing import Dict, Iterable, List

from fincalc.calculators.base import FAQItem
from fincalc.site.routes import PageMeta, SiteInfo
from fincalc.site.seo import build_canonical, default_social_image

SCHEMA_CONTEXT = "https://schema.org"


def build_website_schema(site: SiteInfo, site_url: str) -> Dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": site.name,
        "url": site_url,
        "description": site.description,
    }


def build_organization_schema(site: SiteInfo, site_url: str) -> Dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": site.name,
        "url": site_url,
        "email": site.contact_email,
        "logo": default_social_image(site_url),
    }


def build_breadcrumb_schema(items: List[PageMeta], site_url: str) -> Dict:
    """BreadcrumbList with 1-based positions and canonical item URLs."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": index,
                "name": item.breadcrumb,
                "item": build_canonical(site_url, item.path),
            }
            for index, item in enumerate(items, start=1)
        ],
    }


def build_faq_schema(items: Iterable[FAQItem]) -> Dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": item.question,
                "acceptedAnswer": {"@type": "Answer", "text": item.answer},
            }
            for item in items
        ],
    }
