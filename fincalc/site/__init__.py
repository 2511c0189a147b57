"""
Static-site tooling: route catalog, SEO head tags, structured data,
sitemap and prerendering.
"""
