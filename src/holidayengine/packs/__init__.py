"""
holidayengine Rule Packs

Schema validation and loading for rule packs.

Rule packs are YAML or JSON files that describe a jurisdiction's holiday
rule table as data: fixed, nth-weekday and Easter-relative rules, their
subdivision scopes and validity windows, and observed-date policies.

Usage:
    from holidayengine.packs import load_rule_pack, RulePackLoader

    # Load a single rule pack
    rule_set = load_rule_pack("path/to/xx.yaml")

    # Use a loader for multiple packs
    loader = RulePackLoader()
    loader.load("path/to/xx.yaml")
    loader.load("path/to/yy.json")
    rule_set = loader.get_rule_set("XX")
"""
from __future__ import annotations

from .loader import (
    RulePackLoader,
    load_rule_pack,
    load_rule_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    RulePackSchema,
    RuleSchema,
    SubstitutionSchema,
    check_schema_version,
    validate_rule_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "RulePackLoader",
    "load_rule_pack",
    "load_rule_pack_from_string",
    # Validation
    "validate_rule_pack",
    "check_schema_version",
    # Schemas (for advanced usage)
    "RulePackSchema",
    "RuleSchema",
    "SubstitutionSchema",
]
