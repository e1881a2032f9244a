"""
Ecosystem Service Valuation Report
Package for cleaning valuation records, normalizing currency and area units,
and summarizing per-hectare values by biome and service category.
"""

__version__ = "1.0.0"

# Lazy imports to keep matplotlib out of plain cleaning runs
# Import as needed in code

__all__ = ["config", "io", "cleaning", "classify", "aggregate", "charts", "qc", "pipeline"]
