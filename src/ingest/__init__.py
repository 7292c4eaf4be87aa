"""Bootstrap data ingestion.

This package reads persons and filter rules from local JSON or YAML
documents and hands them to the stores as typed bootstrap data.
"""
