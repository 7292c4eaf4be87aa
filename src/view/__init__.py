"""View coordination layer.

This package wires store events to recomputation of the visible set
and hands results to external renderers.
"""
