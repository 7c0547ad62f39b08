"""Core helpers shared by the loaders.

Submodules in core/ should not import from inspector/ or cli/.
"""
from __future__ import annotations
