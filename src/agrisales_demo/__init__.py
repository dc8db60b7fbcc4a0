"""Demo data generation for AgriSales.

This package builds the synthetic dealer network dataset every report runs
against: dealers, customers, a product catalogue and a year of sales
transactions. All data is fictional.

Usage:
    agrisales-seed
    # or
    python -m agrisales_demo.seed
"""

__version__ = "0.1.0"
