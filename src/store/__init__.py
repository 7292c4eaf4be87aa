"""Reactive in-memory stores.

This package holds the record and filter rule collections and the
typed events they emit after each mutation.
"""
