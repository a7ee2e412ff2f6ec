"""Diagnostics collection tool for Elasticsearch nodes."""

__version__ = "1.0.0"
