"""Read-only HTTP API over the customers, products and orders collections."""

__version__ = "1.0.0"
