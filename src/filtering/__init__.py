"""Criteria aggregation and record matching.

This package holds the pure functions that turn enabled filter rules
into one criteria map and apply it to records.
"""
