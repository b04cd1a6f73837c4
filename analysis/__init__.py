"""
Analysis Module

Descriptive statistics, charts, and the report pipeline

Modules:
- summary: Per-column statistics, correlations, grouped tables
- plots: Histograms, boxplots, scatterplots, correlation heatmaps
- wine_report: Runs every report section in order
"""

__version__ = "1.0.0"
