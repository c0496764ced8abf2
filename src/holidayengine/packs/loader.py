"""
holidayengine Rule Pack Loader

Loads and validates rule packs from YAML or JSON files.

Converts Pydantic schema models to holidayengine domain models.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import (
    HolidayEngineError,
    RulePackLoadError,
    RulePackValidationError,
    RulePackVersionMismatch,
)
from ..models import (
    HolidayCategory,
    HolidayRule,
    HolidayRuleSet,
    OrdinalPolicy,
    RuleKind,
    SubdivisionCollision,
    SubstitutionMode,
    SubstitutionPolicy,
)
from .schema import (
    SCHEMA_VERSION,
    RulePackSchema,
    RuleSchema,
    SubstitutionSchema,
    check_schema_version,
    validate_rule_pack,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_substitution(schema: SubstitutionSchema) -> SubstitutionPolicy:
    """Convert SubstitutionSchema to SubstitutionPolicy model."""
    return SubstitutionPolicy(
        shifts=schema.shifts,
        mode=SubstitutionMode(schema.mode),
        roll_past_holidays=schema.roll_past_holidays,
        suffix=schema.suffix,
    )


def _convert_rule(
    schema: RuleSchema,
    policies: dict[str, SubstitutionPolicy],
) -> HolidayRule:
    """Convert RuleSchema to HolidayRule model."""
    if isinstance(schema.substitution, str):
        substitution: Optional[SubstitutionPolicy] = policies[schema.substitution]
    elif schema.substitution is not None:
        substitution = _convert_substitution(schema.substitution)
    else:
        substitution = None

    return HolidayRule(
        kind=RuleKind(schema.kind),
        name=schema.name,
        category=HolidayCategory(schema.category),
        names=schema.names,
        month=schema.month,
        day=schema.day,
        weekday=schema.weekday,
        ordinal=schema.ordinal,
        offset_days=schema.offset_days,
        subdivisions=frozenset(schema.subdivisions),
        first_year=schema.first_year,
        last_year=schema.last_year,
        substitution=substitution,
        ordinal_policy=OrdinalPolicy(schema.ordinal_policy),
    )


def _convert_rule_pack(schema: RulePackSchema) -> HolidayRuleSet:
    """Convert RulePackSchema to HolidayRuleSet model."""
    policies = {
        name: _convert_substitution(policy)
        for name, policy in schema.substitutions.items()
    }
    return HolidayRuleSet(
        code=schema.code,
        name=schema.name,
        rules=tuple(_convert_rule(r, policies) for r in schema.rules),
        subdivisions=frozenset(schema.subdivisions),
        categories=frozenset(HolidayCategory(c) for c in schema.categories),
        default_language=schema.default_language,
        subdivision_collision=SubdivisionCollision(schema.subdivision_collision),
    )


# =============================================================================
# Rule Pack Loader
# =============================================================================

class RulePackLoader:
    """
    Loads rule packs from YAML or JSON files.

    Usage:
        loader = RulePackLoader()
        rule_set = loader.load("path/to/xx.yaml")
        provider = HolidayProvider(rule_set)
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version

        # Loaded rule sets by jurisdiction code
        self._rule_sets: dict[str, HolidayRuleSet] = {}

    def load(self, path: Union[str, Path]) -> HolidayRuleSet:
        """
        Load a rule pack from a file.

        Args:
            path: Path to YAML or JSON file

        Returns:
            Loaded HolidayRuleSet

        Raises:
            RulePackLoadError: If file cannot be read
            RulePackValidationError: If validation fails
            RulePackVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise RulePackLoadError(
                message=f"Failed to load rule pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        return self.load_dict(data, source=str(path))

    def load_string(self, content: str, format: str = "yaml") -> HolidayRuleSet:
        """
        Load a rule pack from a string.

        Args:
            content: YAML or JSON content
            format: "yaml" or "json"
        """
        try:
            if format == "json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (ValueError, yaml.YAMLError) as e:
            raise RulePackLoadError(
                message=f"Failed to parse rule pack: {e}",
                details={"format": format, "error": str(e)},
            ) from e

        return self.load_dict(data, source=f"<{format} string>")

    def load_dict(self, data: Any, source: str = "<dict>") -> HolidayRuleSet:
        """Validate and convert an already-parsed rule pack."""
        if not isinstance(data, dict):
            raise RulePackLoadError(
                message="Rule pack must be a mapping at the top level",
                details={"source": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise RulePackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_rule_pack(data)
        except ValidationError as e:
            raise RulePackValidationError(
                message=f"Rule pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "source": source},
            ) from e

        try:
            rule_set = _convert_rule_pack(schema)
        except HolidayEngineError as e:
            raise RulePackValidationError(
                message=f"Rule pack definition is invalid: {e.message}",
                details={"source": source, **e.details},
                jurisdiction=schema.code,
            ) from e

        self._rule_sets[rule_set.code] = rule_set
        logger.debug(
            "Loaded rule pack %s from %s (%d rules)",
            rule_set.code, source, len(rule_set.rules),
        )
        return rule_set

    def _load_file(self, path: Path) -> dict[str, Any]:
        """Load raw data from YAML or JSON file."""
        content = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            return json.loads(content)
        return yaml.safe_load(content)

    def get_rule_set(self, code: str) -> Optional[HolidayRuleSet]:
        """Get a previously loaded rule set by jurisdiction code."""
        return self._rule_sets.get(code.upper())

    @property
    def loaded_codes(self) -> list[str]:
        return sorted(self._rule_sets)


# =============================================================================
# Convenience Functions
# =============================================================================

def load_rule_pack(path: Union[str, Path], strict_version: bool = True) -> HolidayRuleSet:
    """Load a single rule pack from a file."""
    return RulePackLoader(strict_version=strict_version).load(path)


def load_rule_pack_from_string(
    content: str,
    format: str = "yaml",
    strict_version: bool = True,
) -> HolidayRuleSet:
    """Load a single rule pack from a YAML or JSON string."""
    return RulePackLoader(strict_version=strict_version).load_string(content, format)
