# -*- coding: utf-8 -*-
"""
Scaling Model Tests - Unit tests for scaling descriptors and AnalyzedMetadata.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import dataclasses

import pytest

from guiscale.models import AnalyzedMetadata, GuiScaling, NineSlice, Stretch, Tile
from guiscale.vocabulary import ScalingType


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

class TestScalingDescriptors:
    """Test equality, type tags and serialization of descriptors."""

    def test_all_subclass_gui_scaling(self):
        for scaling in (Stretch(), Tile(), NineSlice(0, 0, 0, 0)):
            assert isinstance(scaling, GuiScaling)

    def test_scaling_types(self):
        assert Stretch().scaling_type is ScalingType.STRETCH
        assert Tile().scaling_type is ScalingType.TILE
        assert NineSlice(1, 1, 1, 1).scaling_type is ScalingType.NINE_SLICE

    def test_parameterless_equality(self):
        assert Stretch() == Stretch()
        assert Tile() == Tile()
        assert Stretch() != Tile()

    def test_nine_slice_equality(self):
        assert NineSlice(1, 2, 3, 4) == NineSlice(left=1, right=2, top=3, bottom=4)
        assert NineSlice(1, 2, 3, 4) != NineSlice(4, 3, 2, 1)

    def test_base_not_instantiable(self):
        with pytest.raises(TypeError, match="GuiScaling is abstract"):
            GuiScaling()

    def test_uniform(self):
        assert NineSlice.uniform(5) == NineSlice(5, 5, 5, 5)

    def test_hashable(self):
        assert len({Stretch(), Stretch(), NineSlice(1, 1, 1, 1)}) == 2

    def test_frozen(self):
        border = NineSlice(1, 2, 3, 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            border.left = 7

    def test_to_dict(self):
        assert Stretch().to_dict() == {'type': 'stretch'}
        assert NineSlice(1, 2, 3, 4).to_dict() == {
            'type': 'nine_slice', 'left': 1, 'right': 2, 'top': 3, 'bottom': 4,
        }


# ---------------------------------------------------------------------------
# AnalyzedMetadata
# ---------------------------------------------------------------------------

class TestAnalyzedMetadata:
    """Test the analysis result record."""

    def test_defaults(self):
        result = AnalyzedMetadata(Stretch())
        assert result.frame_width is None
        assert result.frame_height is None

    def test_equality(self):
        a = AnalyzedMetadata(Tile(), frame_width=10, frame_height=20)
        b = AnalyzedMetadata(Tile(), frame_width=10, frame_height=20)
        assert a == b
        assert a != AnalyzedMetadata(Tile(), frame_width=20, frame_height=10)

    def test_to_dict_omits_missing_frame(self):
        assert AnalyzedMetadata(Stretch()).to_dict() == {'scaling': {'type': 'stretch'}}

    def test_to_dict_with_frame(self):
        result = AnalyzedMetadata(NineSlice.uniform(2), frame_width=8, frame_height=6)
        assert result.to_dict() == {
            'frame_width': 8,
            'frame_height': 6,
            'scaling': {
                'type': 'nine_slice', 'left': 2, 'right': 2, 'top': 2, 'bottom': 2,
            },
        }
