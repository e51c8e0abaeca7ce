"""Terminal sales management: product catalog, accounts, customer checkout and reports."""

__version__ = "0.1.0"