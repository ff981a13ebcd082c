"""
Iconify Client - Remote Icon Lookup

A small client for Iconify-compatible icon registries: resolves icon
metadata and raw SVG markup by icon set prefix and icon name, caching the
registry's collection index between lookups.
"""

__version__ = "1.0.0"
__author__ = "Iconify Client Contributors"
