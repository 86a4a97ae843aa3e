"""
Visit map package.

Turns a CSV log of travel visits into GeoJSON feature collections, optionally
geocoding addresses that have no coordinates yet. The public entrypoint for CLI
usage is ``visitmap.cli.main``.
"""

from .cli import main  # noqa: F401
