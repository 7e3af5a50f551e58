"""
Tests for the SessionSnapshot schema and its section records.

Covers:
  - Section record validation in __post_init__
  - Frozen records reject mutation
  - garment_type_key discriminator
  - section() lookup by PatternSectionKey
  - with_sections() returns a new snapshot and rejects unknown names
"""

import pytest

from malaine.schemas import (
    SECTION_FIELDS,
    BeanieAttributes,
    BrimStyle,
    CrownStyle,
    GarmentTypeSelection,
    GaugeSection,
    MeasurementUnit,
    NecklineSection,
    NecklineStyle,
    PatternSectionKey,
    ScarfAttributes,
    SessionSnapshot,
    SleevesSection,
    WorkStyle,
)

# ── Section records ────────────────────────────────────────────────────────────


class TestGarmentTypeSelection:
    def test_construction(self):
        sel = GarmentTypeSelection(type_key="sweater", display_name="Sweater")
        assert sel.type_key == "sweater"
        assert sel.garment_type_id is None

    def test_empty_type_key_rejected(self):
        with pytest.raises(ValueError, match="type_key"):
            GarmentTypeSelection(type_key="")

    def test_frozen(self):
        sel = GarmentTypeSelection(type_key="scarf")
        with pytest.raises(AttributeError):
            sel.type_key = "cowl"  # type: ignore[misc]


class TestGaugeSection:
    def test_profile_only(self):
        g = GaugeSection(profile_id="g-1")
        assert g.stitch_count is None

    def test_manual_counts(self):
        g = GaugeSection(stitch_count=22, row_count=30, unit=MeasurementUnit.CM)
        assert g.unit is MeasurementUnit.CM

    @pytest.mark.parametrize("field", ["stitch_count", "row_count"])
    def test_non_positive_counts_rejected(self, field):
        with pytest.raises(ValueError, match=field):
            GaugeSection(**{field: 0})


class TestDimensionValidation:
    def test_neckline_depth_must_be_positive(self):
        with pytest.raises(ValueError, match="depth_cm"):
            NecklineSection(style=NecklineStyle.V_NECK, depth_cm=-2)

    def test_cuff_length_must_be_positive(self):
        with pytest.raises(ValueError, match="cuff_length_cm"):
            SleevesSection(cuff_length_cm=0)

    def test_beanie_circumference_must_be_positive(self):
        with pytest.raises(ValueError, match="target_circumference_cm"):
            BeanieAttributes(
                target_circumference_cm=0,
                body_height_cm=20,
                crown_style=CrownStyle.CLASSIC_TAPERED,
                brim_style=BrimStyle.NO_BRIM,
            )

    def test_scarf_defaults_to_flat(self):
        scarf = ScarfAttributes(width_cm=25, length_cm=180)
        assert scarf.work_style is WorkStyle.FLAT


# ── Snapshot ───────────────────────────────────────────────────────────────────


class TestSessionSnapshot:
    def test_empty_snapshot(self):
        snap = SessionSnapshot()
        assert snap.garment_type_key is None
        for key in PatternSectionKey:
            assert snap.section(key) is None

    def test_garment_type_key(self):
        snap = SessionSnapshot(garment_type=GarmentTypeSelection(type_key="cardigan"))
        assert snap.garment_type_key == "cardigan"

    def test_section_lookup(self):
        gauge = GaugeSection(profile_id="g-1")
        snap = SessionSnapshot(gauge=gauge)
        assert snap.section(PatternSectionKey.GAUGE) is gauge

    def test_accessory_section_lookup(self):
        scarf = ScarfAttributes(width_cm=25, length_cm=180)
        snap = SessionSnapshot(accessory=scarf)
        assert snap.section(PatternSectionKey.ACCESSORY_DEFINITION) is scarf

    def test_summary_has_no_section(self):
        assert PatternSectionKey.SUMMARY not in SECTION_FIELDS
        assert SessionSnapshot().section(PatternSectionKey.SUMMARY) is None

    def test_every_data_section_maps_to_a_field(self):
        snap = SessionSnapshot()
        for key, field_name in SECTION_FIELDS.items():
            assert hasattr(snap, field_name), key

    def test_with_sections_returns_new_snapshot(self):
        original = SessionSnapshot()
        gauge = GaugeSection(profile_id="g-1")
        updated = original.with_sections(gauge=gauge)
        assert updated is not original
        assert updated.gauge is gauge
        assert original.gauge is None

    def test_with_sections_can_clear(self):
        snap = SessionSnapshot(gauge=GaugeSection(profile_id="g-1"))
        assert snap.with_sections(gauge=None).gauge is None

    def test_with_sections_rejects_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown snapshot section"):
            SessionSnapshot().with_sections(collar=None)

    def test_snapshots_compare_by_value(self):
        a = SessionSnapshot(gauge=GaugeSection(profile_id="g-1"))
        b = SessionSnapshot(gauge=GaugeSection(profile_id="g-1"))
        assert a == b
