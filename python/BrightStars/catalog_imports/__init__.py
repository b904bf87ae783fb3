"""
Catalog import package for BrightStars.

Loaders for the Bright Star Catalogue (BSC5), its BSC4 supplement and
the symbol table used to build star names.
"""

# Import main function for easy access
from .main import main

__version__ = "1.0.0"
__all__ = ["main"]
