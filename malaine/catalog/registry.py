"""
Garment catalog: loads the garment type table from YAML at startup,
validates it, and exposes a read-only query API.

The catalog decides which definition steps a garment type walks through.
Those step lists are the ``available_steps`` the readiness evaluator needs;
the evaluator itself never computes them.

The catalog is a module-level singleton; call get_catalog() to obtain it.
Instantiate GarmentCatalog directly to load a different data directory.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from malaine.readiness.evaluator import ACCESSORY_GARMENT_TYPES, DEFAULTED_GARMENT_TYPES
from malaine.schemas.section import DEFINITION_STEPS, PatternSectionKey

from .types import GarmentCategory, GarmentTypeEntry, UnknownGarmentType

_DATA_DIR = Path(__file__).parent / "data"
_FILENAME = "garment_types.yaml"
_REQUIRED_FIELDS = ("key", "display_name", "category", "steps")


class GarmentCatalog:
    """Immutable table of garment types and their definition steps."""

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = Path(data_dir)

        self.default_steps: tuple[PatternSectionKey, ...] = DEFINITION_STEPS
        self.garment_types: dict[str, GarmentTypeEntry] = {}

        self._errors: list[str] = []
        self._load()
        self._validate()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self) -> dict:
        path = self._data_dir / _FILENAME
        with open(path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping at top level")
        return data

    def _parse_steps(self, owner: str, raw: list) -> tuple[PatternSectionKey, ...]:
        steps: list[PatternSectionKey] = []
        for value in raw or []:
            try:
                steps.append(PatternSectionKey(value))
            except ValueError:
                self._errors.append(f"{owner} references unknown step: {value!r}")
        return tuple(steps)

    def _load(self) -> None:
        data = self._load_yaml()

        if "default_steps" in data:
            self.default_steps = self._parse_steps("default_steps", data["default_steps"])

        for index, entry in enumerate(data.get("garment_types") or []):
            if not isinstance(entry, dict):
                self._errors.append(f"garment type entry #{index} must be a mapping")
                continue
            missing = [name for name in _REQUIRED_FIELDS if name not in entry]
            if missing:
                label = repr(entry["key"]) if "key" in entry else f"entry #{index}"
                self._errors.append(
                    f"garment type {label} is missing required field(s): {', '.join(missing)}"
                )
                continue
            key = entry["key"]
            if key in self.garment_types:
                self._errors.append(f"duplicate garment type key: {key!r}")
                continue
            try:
                category = GarmentCategory(entry["category"])
            except ValueError:
                self._errors.append(
                    f"garment type {key!r} has unknown category: {entry['category']!r}"
                )
                continue
            self.garment_types[key] = GarmentTypeEntry(
                key=key,
                display_name=entry["display_name"],
                category=category,
                steps=self._parse_steps(f"garment type {key!r}", entry["steps"]),
                description=(entry.get("description") or "").strip(),
            )

    # ── Validation ─────────────────────────────────────────────────────────────

    def _check_step_list(self, owner: str, steps: tuple[PatternSectionKey, ...]) -> None:
        if not steps:
            self._errors.append(f"{owner} has no steps")
            return
        if steps[0] is not PatternSectionKey.GARMENT_TYPE:
            self._errors.append(f"{owner} must start with 'garment-type'")
        if steps[-1] is not PatternSectionKey.SUMMARY:
            self._errors.append(f"{owner} must end with 'summary'")
        if len(set(steps)) != len(steps):
            self._errors.append(f"{owner} lists a step more than once")

    def _validate(self) -> None:
        """
        Raises ValueError listing every problem found, if the table references
        unknown steps, breaks step-list ordering, or disagrees with the
        readiness policy sets.
        """
        errors = self._errors

        self._check_step_list("default_steps", self.default_steps)

        for key, entry in self.garment_types.items():
            owner = f"garment type {key!r}"
            self._check_step_list(owner, entry.steps)
            has_accessory_step = PatternSectionKey.ACCESSORY_DEFINITION in entry.steps
            if entry.category is GarmentCategory.ACCESSORY and not has_accessory_step:
                errors.append(f"{owner} is an accessory but has no 'accessory-definition' step")

        for key in sorted(DEFAULTED_GARMENT_TYPES):
            entry = self.garment_types.get(key)
            if entry is None:
                errors.append(f"defaulted garment type {key!r} is not in the catalog")
            elif entry.category is not GarmentCategory.GARMENT:
                errors.append(f"defaulted garment type {key!r} must be a garment")

        for key in sorted(ACCESSORY_GARMENT_TYPES):
            entry = self.garment_types.get(key)
            if entry is None:
                errors.append(f"accessory garment type {key!r} is not in the catalog")
            elif entry.category is not GarmentCategory.ACCESSORY:
                errors.append(f"accessory garment type {key!r} must be an accessory")

        if errors:
            raise ValueError(
                "Garment catalog validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def get(self, type_key: str) -> GarmentTypeEntry:
        """
        Raises
        ------
        UnknownGarmentType
            If *type_key* is not in the catalog.
        """
        try:
            return self.garment_types[type_key]
        except KeyError:
            raise UnknownGarmentType(f"Unknown garment type: {type_key!r}") from None

    def available_steps(self, type_key: str | None) -> tuple[PatternSectionKey, ...]:
        """Steps for *type_key*; the default steps when no type is selected yet."""
        if type_key is None:
            return self.default_steps
        return self.get(type_key).steps

    def list_types(self) -> list[str]:
        """Return a sorted list of all garment type keys."""
        return sorted(self.garment_types)


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Loaded eagerly at import time.  Read-only after construction.

_catalog: GarmentCatalog = GarmentCatalog()


def get_catalog() -> GarmentCatalog:
    """Return the module-level catalog singleton."""
    return _catalog
