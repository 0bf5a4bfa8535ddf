"""
Lift Pass Pricing Package

Prices ski lift passes from a pass type, an optional rider age and an
optional visit date, and serves the quotes over HTTP.
"""

__version__ = "1.0.0"
