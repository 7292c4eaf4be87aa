"""Core constants used across people list modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

RECORD_ID_FIELD = "id"
RULE_ID_FIELD = "id"
RULE_LABEL_FIELD = "label"
RULE_CRITERIA_FIELD = "criteria"
RULE_ENABLED_FIELD = "enabled"
RULE_ORDER_FIELD = "order"
BOOTSTRAP_PERSONS_KEY = "persons"
BOOTSTRAP_FILTERS_KEY = "filters"
DEFAULT_SORT_FIELD = "lastName"
DEFAULT_DISPLAY_FIELDS = ("firstName", "lastName", "streetAddress", "city", "state", "zip")
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
JSON_EXTENSIONS = (".json",)
YAML_EXTENSIONS = (".yaml", ".yml")
SUPPORTED_BOOTSTRAP_EXTENSIONS = JSON_EXTENSIONS + YAML_EXTENSIONS
