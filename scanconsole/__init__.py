# scanconsole/__init__.py
"""Scan console API: global settings, registry accounts and scan result listings."""

__version__ = "1.0.0"
