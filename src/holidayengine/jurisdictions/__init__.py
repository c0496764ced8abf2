"""
holidayengine Jurisdictions

Static holiday rule tables, one module per jurisdiction, and the
registry that maps jurisdiction codes to rule sets.

Usage:
    from holidayengine.jurisdictions import get_rule_set, register_rule_set

    us_rules = get_rule_set("us")          # Case-insensitive
    register_rule_set(my_rule_set)         # Add a custom jurisdiction
"""
from __future__ import annotations

from ..exceptions import UnsupportedJurisdictionError
from ..models import HolidayRuleSet
from .ca import CA_RULE_SET
from .de import DE_RULE_SET
from .gb import GB_RULE_SET
from .us import US_RULE_SET

_REGISTRY: dict[str, HolidayRuleSet] = {
    rule_set.code: rule_set
    for rule_set in (US_RULE_SET, CA_RULE_SET, GB_RULE_SET, DE_RULE_SET)
}


def get_rule_set(code: str) -> HolidayRuleSet:
    """
    Get the rule set for a jurisdiction.

    Raises:
        UnsupportedJurisdictionError: If no rule set is registered
    """
    if not code:
        raise UnsupportedJurisdictionError(message="jurisdiction code cannot be empty")

    rule_set = _REGISTRY.get(code.upper())
    if rule_set is None:
        raise UnsupportedJurisdictionError(
            message=f"jurisdiction code '{code}' is not supported",
            details={"supported": supported_jurisdictions()},
            jurisdiction=code,
        )
    return rule_set


def supported_jurisdictions() -> list[str]:
    """Sorted list of registered jurisdiction codes."""
    return sorted(_REGISTRY)


def is_supported(code: str) -> bool:
    return bool(code) and code.upper() in _REGISTRY


def register_rule_set(rule_set: HolidayRuleSet, replace: bool = False) -> None:
    """
    Register a rule set under its jurisdiction code.

    Raises:
        ValueError: If the code is taken and replace is False
    """
    if rule_set.code in _REGISTRY and not replace:
        raise ValueError(f"Jurisdiction '{rule_set.code}' is already registered")
    _REGISTRY[rule_set.code] = rule_set


def unregister_rule_set(code: str) -> None:
    """Remove a jurisdiction from the registry (no-op if absent)."""
    _REGISTRY.pop(code.upper(), None)


__all__ = [
    "US_RULE_SET",
    "CA_RULE_SET",
    "GB_RULE_SET",
    "DE_RULE_SET",
    "get_rule_set",
    "supported_jurisdictions",
    "is_supported",
    "register_rule_set",
    "unregister_rule_set",
]
