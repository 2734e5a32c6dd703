"""Audit engine: configuration, discovery, extraction, aggregation."""
