"""Tests for the stitch pattern integration schemas."""

import pytest

from malaine.schemas import (
    IntegrationAnalysis,
    IntegrationChoice,
    IntegrationKind,
    IntegrationOption,
    IntegrationRequest,
    Side,
    StitchPatternRef,
)


def _option(**overrides) -> IntegrationOption:
    values = dict(
        kind=IntegrationKind.ABSORB_INTO_EDGES,
        description="Add the 3 leftover stitches to the edges",
        total_stitches=103,
        edge_stitches_each_side=3,
        repeats=12,
        extra_stitch_side=Side.RIGHT,
    )
    values.update(overrides)
    return IntegrationOption(**values)


class TestStitchPatternRef:
    def test_construction(self):
        ref = StitchPatternRef(id="moss", repeat_width=2, name="Moss Stitch")
        assert ref.row_repeat_height is None

    def test_zero_repeat_width_rejected(self):
        with pytest.raises(ValueError, match="repeat_width must be >= 1"):
            StitchPatternRef(id="bad", repeat_width=0)

    def test_zero_row_repeat_rejected(self):
        with pytest.raises(ValueError, match="row_repeat_height"):
            StitchPatternRef(id="bad", repeat_width=4, row_repeat_height=0)


class TestIntegrationRequest:
    def test_not_validated_at_construction(self):
        """The fitter, not the record, rejects nonsense values."""
        req = IntegrationRequest(
            target_stitch_count=-1, repeat_width=0, desired_edge_stitches_per_side=-3
        )
        assert req.repeat_width == 0


class TestIntegrationOption:
    def test_edge_total_with_extra_stitch(self):
        assert _option().edge_stitches_total == 7

    def test_edge_total_even_split(self):
        assert _option(extra_stitch_side=None).edge_stitches_total == 6

    def test_panel_defaults_to_zero(self):
        assert _option().panel_stitches == 0


class TestIntegrationAnalysis:
    def _analysis(self, full_repeats: int, remaining: int) -> IntegrationAnalysis:
        return IntegrationAnalysis(
            available_for_repeats=full_repeats * 8 + remaining,
            full_repeats=full_repeats,
            stitches_used_by_repeats=full_repeats * 8,
            remaining_stitches=remaining,
            edge_stitches=2,
            options=(),
            suggested_adjusted_stitch_count=100,
        )

    def test_fits_exactly(self):
        a = self._analysis(12, 0)
        assert a.fits and a.fits_exactly

    def test_fits_with_remainder(self):
        a = self._analysis(12, 3)
        assert a.fits and not a.fits_exactly

    def test_no_fit(self):
        a = self._analysis(0, 1)
        assert not a.fits and not a.fits_exactly

    def test_notice_defaults_to_none(self):
        assert self._analysis(12, 0).notice is None


class TestIntegrationChoice:
    def test_final_stitch_count_is_option_total(self):
        choice = IntegrationChoice(
            option=_option(),
            stitch_pattern_id="cable-8",
            stitch_pattern_name="Cable",
            full_repeats=12,
        )
        assert choice.final_stitch_count == 103
