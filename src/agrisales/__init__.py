"""AgriSales: sales reporting engine for a crop-input dealer network."""

__version__ = "0.1.0"
