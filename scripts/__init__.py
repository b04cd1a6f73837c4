"""Command-line entry points: data verification and the report pipeline"""
