"""
Tests for defaults.applier — apply_default_parameters().

Covers:
  - Missing structure, neckline, and sleeves filled for sweater and cardigan
  - Partially specified sections left exactly as entered
  - Other garment types (and no garment type) unchanged
  - Input snapshot never modified; applying twice equals applying once
  - Defaulted sections agree with the readiness evaluator
"""

import pytest

from malaine.defaults import (
    DEFAULT_GARMENT_STRUCTURE,
    DEFAULT_NECKLINE,
    DEFAULT_SLEEVES,
    apply_default_parameters,
    defaulted_sections,
)
from malaine.readiness import is_section_complete
from malaine.schemas import (
    BodyShape,
    ConstructionMethod,
    CuffStyle,
    GarmentStructureSection,
    GarmentTypeSelection,
    GaugeSection,
    NecklineSection,
    NecklineStyle,
    PatternSectionKey,
    ScarfAttributes,
    SessionSnapshot,
    SleeveLength,
    SleevesSection,
    SleeveStyle,
)

K = PatternSectionKey


def _garment(type_key: str, **sections) -> SessionSnapshot:
    return SessionSnapshot(garment_type=GarmentTypeSelection(type_key=type_key), **sections)


# ── Default values ─────────────────────────────────────────────────────────────


class TestDefaultValues:
    def test_garment_structure(self):
        assert DEFAULT_GARMENT_STRUCTURE.construction_method is ConstructionMethod.DROP_SHOULDER
        assert DEFAULT_GARMENT_STRUCTURE.body_shape is BodyShape.STRAIGHT

    def test_neckline(self):
        assert DEFAULT_NECKLINE.style is NecklineStyle.ROUND
        assert DEFAULT_NECKLINE.depth_cm == 8.0
        assert DEFAULT_NECKLINE.width_cm == 20.0

    def test_sleeves(self):
        assert DEFAULT_SLEEVES.style is SleeveStyle.STRAIGHT
        assert DEFAULT_SLEEVES.length_key is SleeveLength.LONG
        assert DEFAULT_SLEEVES.cuff_style is CuffStyle.RIBBED_1X1
        assert DEFAULT_SLEEVES.cuff_length_cm == 5.0


# ── Substitution ───────────────────────────────────────────────────────────────


class TestApplyDefaults:
    @pytest.mark.parametrize("type_key", ["sweater", "cardigan"])
    def test_fills_all_missing_sections(self, type_key):
        result = apply_default_parameters(_garment(type_key))
        assert result.garment_structure == DEFAULT_GARMENT_STRUCTURE
        assert result.neckline == DEFAULT_NECKLINE
        assert result.sleeves == DEFAULT_SLEEVES

    def test_keeps_other_sections(self):
        gauge = GaugeSection(profile_id="g-1")
        result = apply_default_parameters(_garment("sweater", gauge=gauge))
        assert result.gauge is gauge
        assert result.garment_type_key == "sweater"

    def test_user_sections_preserved(self):
        neckline = NecklineSection(style=NecklineStyle.V_NECK, depth_cm=15)
        result = apply_default_parameters(_garment("sweater", neckline=neckline))
        assert result.neckline is neckline
        assert result.garment_structure == DEFAULT_GARMENT_STRUCTURE

    def test_partial_section_not_completed(self):
        """A section with some fields set is left exactly as entered."""
        partial = SleevesSection(cuff_style=CuffStyle.FOLDED)
        result = apply_default_parameters(_garment("cardigan", sleeves=partial))
        assert result.sleeves is partial
        assert result.sleeves.style is None
        assert result.sleeves.length_key is None

    def test_empty_records_are_filled(self):
        """A record with every field unset is as missing as no record at all."""
        snap = _garment(
            "sweater",
            garment_structure=GarmentStructureSection(),
            neckline=NecklineSection(),
            sleeves=SleevesSection(),
        )
        for key in (K.GARMENT_STRUCTURE, K.NECKLINE, K.SLEEVES):
            assert is_section_complete(snap, key), key
        result = apply_default_parameters(snap)
        assert result.garment_structure == DEFAULT_GARMENT_STRUCTURE
        assert result.neckline == DEFAULT_NECKLINE
        assert result.sleeves == DEFAULT_SLEEVES

    def test_single_field_keeps_record(self):
        partial = GarmentStructureSection(body_shape=BodyShape.A_LINE)
        result = apply_default_parameters(_garment("sweater", garment_structure=partial))
        assert result.garment_structure is partial

    def test_input_not_modified(self):
        snap = _garment("sweater")
        apply_default_parameters(snap)
        assert snap.garment_structure is None
        assert snap.neckline is None
        assert snap.sleeves is None

    def test_idempotent(self):
        once = apply_default_parameters(_garment("cardigan"))
        twice = apply_default_parameters(once)
        assert twice == once

    def test_fully_specified_returns_same_object(self):
        snap = _garment(
            "sweater",
            garment_structure=DEFAULT_GARMENT_STRUCTURE,
            neckline=DEFAULT_NECKLINE,
            sleeves=DEFAULT_SLEEVES,
        )
        assert apply_default_parameters(snap) is snap


class TestNoSubstitution:
    @pytest.mark.parametrize("type_key", ["scarf", "beanie", "cowl", "vest"])
    def test_other_garment_types_unchanged(self, type_key):
        snap = _garment(type_key)
        result = apply_default_parameters(snap)
        assert result is snap
        assert result.neckline is None

    def test_scarf_with_accessory_unchanged(self):
        snap = _garment("scarf", accessory=ScarfAttributes(width_cm=25, length_cm=180))
        assert apply_default_parameters(snap) == snap

    def test_no_garment_type_unchanged(self):
        snap = SessionSnapshot()
        assert apply_default_parameters(snap) is snap


# ── defaulted_sections ─────────────────────────────────────────────────────────


class TestDefaultedSections:
    def test_lists_missing_in_definition_order(self):
        assert defaulted_sections(_garment("sweater")) == (
            K.GARMENT_STRUCTURE,
            K.NECKLINE,
            K.SLEEVES,
        )

    def test_skips_present_sections(self):
        snap = _garment("sweater", neckline=NecklineSection(style=NecklineStyle.SCOOP))
        assert defaulted_sections(snap) == (K.GARMENT_STRUCTURE, K.SLEEVES)

    def test_lists_empty_records(self):
        snap = _garment("cardigan", neckline=NecklineSection())
        assert K.NECKLINE in defaulted_sections(snap)

    def test_empty_for_accessories(self):
        assert defaulted_sections(_garment("beanie")) == ()

    def test_defaulted_sections_count_as_complete(self):
        snap = _garment("cardigan")
        for key in defaulted_sections(snap):
            assert is_section_complete(snap, key), key

    def test_applied_snapshot_complete_without_defaults(self):
        """After applying, the filled sections are complete on their own merits."""
        result = apply_default_parameters(_garment("sweater"))
        vest = result.with_sections(garment_type=GarmentTypeSelection(type_key="vest"))
        for key in (K.GARMENT_STRUCTURE, K.NECKLINE, K.SLEEVES):
            assert is_section_complete(vest, key), key
