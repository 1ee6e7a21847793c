from __future__ import annotations

"""
lssuppress: condenses recursive directory listings for agent tool hooks.
"""

__version__ = "1.0.0"
