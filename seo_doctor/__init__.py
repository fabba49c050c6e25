# seo_doctor/__init__.py
"""
SEO Doctor package initializer.
Defines package version.
"""
__version__ = "0.1.0"
