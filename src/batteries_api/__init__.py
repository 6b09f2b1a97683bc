"""Batteries API: cluster status aggregation backend for the dashboard."""

__version__ = "0.1.0"
