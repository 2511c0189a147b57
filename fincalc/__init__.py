"""
Personal-finance calculators with a static, prerendered marketing site.
"""

__version__ = "0.1.0"
