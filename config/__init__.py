"""
Configuration Package

- paths: data and output locations
- settings: dataset schema, rating thresholds, plot and model settings
"""
