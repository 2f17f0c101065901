# site_splitter/__init__.py
"""Split a site customization export into per-site files, and back."""

__version__ = "0.1.0"
