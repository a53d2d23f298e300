"""Plain-text exchange rate and bank-day API backed by the Riksbank."""

__version__ = "0.1.0"
