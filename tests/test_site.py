"""
Tests for the static-site tooling: routes, SEO, structured data, sitemap
and prerendering.
"""

import json
import re

import pytest

from fincalc.calculators import CALCULATORS
from fincalc.calculators.base import FAQItem
from fincalc.config import normalize_site_url
from fincalc.preferences import PreferencesStore
from fincalc.site.pages import inject, render_page
from fincalc.site.prerender import output_path, prerender
from fincalc.site.routes import load_catalog
from fincalc.site.seo import build_canonical, generate_head_tags, render_head_tags
from fincalc.site.sitemap import BASE_ROBOTS, build_sitemap, update_robots, write_sitemap
from fincalc.site.structured_data import (
    build_breadcrumb_schema,
    build_faq_schema,
    build_organization_schema,
    build_website_schema,
)


class TestSiteUrl:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "https://english-calculators.netlify.app"),
            ("   ", "https://english-calculators.netlify.app"),
            (" https://calc.example.com/ ", "https://calc.example.com"),
            ("https://calc.example.com", "https://calc.example.com"),
        ],
    )
    def test_normalize(self, value, expected):
        assert normalize_site_url(value) == expected

    def test_settings_use_environment(self, site_url):
        assert site_url == "https://calc.example.com"


class TestRouteCatalog:
    def test_every_calculator_has_a_route(self, catalog):
        assert {c.id for c in catalog.calculators} == set(CALCULATORS)

    def test_route_order(self, catalog):
        routes = catalog.all_routes()
        assert routes[:5] == ["/", "/calculators", "/accessibility", "/privacy", "/terms"]
        assert routes[5:] == [f"/calculators/{cid}" for cid in CALCULATORS]

    def test_breadcrumbs(self, catalog):
        assert catalog.breadcrumbs("/") == []
        assert [p.id for p in catalog.breadcrumbs("/calculators")] == ["home", "calculators"]
        assert [p.id for p in catalog.breadcrumbs("/calculators/loan-payment")] == [
            "home",
            "calculators",
            "loan-payment",
        ]
        assert [p.id for p in catalog.breadcrumbs("/privacy")] == ["home", "privacy"]
        assert [p.id for p in catalog.breadcrumbs("/nowhere")] == ["home"]
        assert [p.id for p in catalog.breadcrumbs("/calculators/nope")] == ["home"]

    def test_related_skips_unknown(self, catalog):
        catalog.calculators[0].related.append("does-not-exist")
        try:
            related = catalog.related_calculators(catalog.calculators[0].id)
            assert all(c is not None for c in related)
            assert "does-not-exist" not in [c.id for c in related]
        finally:
            catalog.calculators[0].related.remove("does-not-exist")

    def test_related_unknown_calculator(self, catalog):
        assert catalog.related_calculators("nope") == []

    def test_popular(self, catalog):
        assert all(c.popular for c in catalog.popular_calculators())
        assert catalog.popular_calculators()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "routes.json")

    def test_byte_order_mark_is_ignored(self, tmp_path):
        data = {
            "site": {"name": "X", "tagline": "t", "description": "d", "contactEmail": "a@b.c"},
            "corePages": [],
        }
        path = tmp_path / "routes.json"
        path.write_text("\ufeff" + json.dumps(data), encoding="utf-8")
        assert load_catalog(path).site.contact_email == "a@b.c"


class TestStructuredData:
    def test_breadcrumb_positions(self, catalog, site_url):
        schema = build_breadcrumb_schema(
            catalog.breadcrumbs("/calculators/loan-payment"), site_url
        )
        assert schema["@type"] == "BreadcrumbList"
        assert [i["position"] for i in schema["itemListElement"]] == [1, 2, 3]
        assert schema["itemListElement"][2]["item"] == (
            "https://calc.example.com/calculators/loan-payment"
        )

    def test_faq(self):
        schema = build_faq_schema([FAQItem("Q?", "A.")])
        assert schema["mainEntity"] == [
            {"@type": "Question", "name": "Q?", "acceptedAnswer": {"@type": "Answer", "text": "A."}}
        ]

    def test_site_schemas(self, catalog, site_url):
        website = build_website_schema(catalog.site, site_url)
        organization = build_organization_schema(catalog.site, site_url)
        assert website["url"] == site_url
        assert organization["email"] == catalog.site.contact_email
        assert organization["logo"] == "https://calc.example.com/social-card.svg"


class TestHeadTags:
    def test_generate(self, site_url):
        head = generate_head_tags(
            title="Loan | English Calculators",
            description="Desc",
            path="/calculators/loan-payment",
            site_url=site_url,
            site_name="English Calculators",
            structured_data={"@type": "Thing"},
        )
        assert head.canonical == build_canonical(site_url, "/calculators/loan-payment")
        assert head.image == "https://calc.example.com/social-card.svg"
        assert head.structured_data == [{"@type": "Thing"}]

    def test_render_escapes(self, site_url):
        head = generate_head_tags(
            title='Fees & "costs"',
            description="<b>x</b>",
            path="/",
            site_url=site_url,
            site_name="English Calculators",
            structured_data={"text": "</script><script>alert(1)"},
        )
        html = render_head_tags(head)

        assert "<title>Fees &amp; &#34;costs&#34;</title>" in html
        assert "&lt;b&gt;x&lt;/b&gt;" in html
        assert '<link rel="canonical" href="https://calc.example.com/" />' in html
        assert '<meta name="twitter:card" content="summary_large_image" />' in html
        assert "</script><script>" not in html


class TestSitemap:
    def test_build(self):
        xml = build_sitemap("https://calc.example.com", ["/", "/terms"])
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<urlset')
        assert "<loc>https://calc.example.com/</loc>" in xml
        assert "<loc>https://calc.example.com/terms</loc>" in xml
        assert xml.endswith("</urlset>\n")

    def test_robots_added(self):
        robots = update_robots(BASE_ROBOTS, "https://calc.example.com")
        assert robots == (
            "User-agent: *\nAllow: /\nSitemap: https://calc.example.com/sitemap.xml\n"
        )

    def test_robots_replaced(self):
        robots = update_robots(
            "User-agent: *\nSitemap: https://old.example.com/sitemap.xml\nDisallow: /tmp\n",
            "https://calc.example.com",
        )
        assert robots.count("Sitemap:") == 1
        assert "Sitemap: https://calc.example.com/sitemap.xml" in robots
        assert "Disallow: /tmp" in robots

    def test_write(self, catalog, site_url, tmp_path):
        dist = tmp_path / "dist"
        count = write_sitemap(catalog, site_url, dist)

        assert count == len(catalog.all_routes())
        sitemap = (dist / "sitemap.xml").read_text(encoding="utf-8")
        assert sitemap.count("<url>") == count
        assert (dist / "robots.txt").read_text(encoding="utf-8").endswith(
            "Sitemap: https://calc.example.com/sitemap.xml\n"
        )

        # Running twice keeps a single Sitemap line
        write_sitemap(catalog, site_url, dist)
        assert (dist / "robots.txt").read_text(encoding="utf-8").count("Sitemap:") == 1


class TestRenderPage:
    def test_calculator_page(self, site_url):
        page = render_page("/calculators/salary-to-hourly", site_url)

        assert page.status_code == 200
        assert "$34.62" in page.app_html
        assert "Salary to Hourly Calculator | English Calculators" in page.head_tags
        assert '"@type": "FAQPage"' in page.head_tags
        assert '"@type": "BreadcrumbList"' in page.head_tags

    def test_calculator_inputs(self, site_url):
        page = render_page(
            "/calculators/student-loan-payoff",
            site_url,
            inputs={"balance": "10000", "rate": "10", "payment": "50"},
        )
        assert "Payment is too low to reduce the balance." in page.app_html
        assert "0 months" in page.app_html

    def test_mortgage_cross_field_error_shown(self, site_url):
        page = render_page(
            "/calculators/mortgage-payment",
            site_url,
            inputs={
                "home_price": "350000",
                "down_payment": "400000",
                "rate": "6.2",
                "years": "30",
                "tax_rate": "1.1",
                "insurance": "1200",
                "hoa": "0",
            },
        )
        assert "Down payment cannot exceed the home price." in page.app_html

    def test_home_page(self, site_url):
        page = render_page("/", site_url)
        assert '"@type": "WebSite"' in page.head_tags
        assert '"@type": "Organization"' in page.head_tags

    def test_not_found(self, site_url):
        page = render_page("/missing", site_url)
        assert page.status_code == 404
        assert "Page not found" in page.app_html

    def test_html_attributes_follow_preferences(self, site_url):
        with PreferencesStore() as preferences:
            preferences.set_theme_setting("dark")
            page = render_page("/", site_url, preferences=preferences)
        assert page.html_attributes["data-theme"] == "dark"

    def test_inject_without_placeholders(self, site_url):
        page = render_page("/terms", site_url)
        shell = '<html lang="fr"><head></head><body><div id="root"></div></body></html>'
        html = inject(shell, page)

        assert html.startswith('<html lang="en" data-theme="light"')
        assert "Terms of Use | English Calculators</title>" in html
        assert html.index("</title>") < html.index("</head>")
        assert '<div id="root"><a class="skip-link"' in html


class TestPrerender:
    def test_output_path(self, tmp_path):
        assert output_path(tmp_path, "/") == tmp_path / "index.html"
        assert output_path(tmp_path, "/calculators/loan-payment") == (
            tmp_path / "calculators" / "loan-payment" / "index.html"
        )

    def test_every_route_written(self, catalog, site_url, tmp_path):
        dist = tmp_path / "dist"
        written = prerender(catalog, site_url, dist)

        assert len(written) == len(catalog.all_routes())
        loan = (dist / "calculators" / "loan-payment" / "index.html").read_text(encoding="utf-8")
        assert "<!--head-tags-->" not in loan
        assert "<!--app-html-->" not in loan
        assert "$396.02" in loan
        assert re.search(r'<link rel="canonical" href="https://calc.example.com/calculators/loan-payment" />', loan)

    def test_rerun_is_stable(self, catalog, site_url, tmp_path):
        dist = tmp_path / "dist"
        prerender(catalog, site_url, dist)
        first = (dist / "index.html").read_text(encoding="utf-8")
        prerender(catalog, site_url, dist)
        assert (dist / "index.html").read_text(encoding="utf-8") == first
