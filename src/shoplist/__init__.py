"""Shoplist: recipe ingredient lines to shopping-list items."""

__version__ = "0.1.0"
