# -*- coding: utf-8 -*-
"""
Analyzer Base Tests - Tests for MetadataAnalyzer and @analyzer_version.

Tests the version decorator, the once-per-class missing-version warning,
image dimension extraction, and the public import surface.

Author
------
Steven Siebert

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

import warnings

import numpy as np
import pytest

from guiscale.analyzers.base import MetadataAnalyzer, image_dimensions
from guiscale.analyzers.gui import GuiMetadataAnalyzer
from guiscale.analyzers.versioning import analyzer_version
from guiscale.exceptions import ValidationError
from guiscale.metadata import MappingMetadataView
from guiscale.models import AnalyzedMetadata, Stretch


def _version_warnings(records):
    return [
        x for x in records
        if issubclass(x.category, UserWarning)
        and 'analyzer version' in str(x.message).lower()
    ]


# ---------------------------------------------------------------------------
# @analyzer_version decorator
# ---------------------------------------------------------------------------

class TestAnalyzerVersionDecorator:
    """Test that @analyzer_version stamps the version correctly."""

    def test_stamps_version_on_class(self):
        @analyzer_version('2.1.0')
        class _Versioned(MetadataAnalyzer):
            def analyze(self, metadata, image_width, image_height):
                return AnalyzedMetadata(Stretch())

        assert _Versioned.__analyzer_version__ == '2.1.0'

    def test_decorated_class_is_same_class(self):
        class _Original(MetadataAnalyzer):
            def analyze(self, metadata, image_width, image_height):
                return AnalyzedMetadata(Stretch())

        assert analyzer_version('1.0.0')(_Original) is _Original

    def test_version_inferred_without_argument(self):
        @analyzer_version()
        class _Inferred:
            pass

        assert isinstance(_Inferred.__analyzer_version__, str)
        assert _Inferred.__analyzer_version__

    def test_gui_analyzer_is_versioned(self):
        assert GuiMetadataAnalyzer.__analyzer_version__ == '1.0.0'


# ---------------------------------------------------------------------------
# Version warning at instantiation
# ---------------------------------------------------------------------------

class TestMissingVersionWarning:
    """Test that unversioned concrete analyzers warn at instantiation."""

    def test_warns_only_once(self):
        class _Unversioned(MetadataAnalyzer):
            def analyze(self, metadata, image_width, image_height):
                return AnalyzedMetadata(Stretch())

        MetadataAnalyzer._version_warned_classes.discard(_Unversioned)

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _Unversioned()
            _Unversioned()

            found = _version_warnings(w)
            assert len(found) == 1
            assert '_Unversioned' in str(found[0].message)

    def test_no_warning_for_decorated_class(self):
        MetadataAnalyzer._version_warned_classes.discard(GuiMetadataAnalyzer)

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            GuiMetadataAnalyzer()
            assert len(_version_warnings(w)) == 0

    def test_abstract_base_not_instantiable(self):
        with pytest.raises(TypeError):
            MetadataAnalyzer()


# ---------------------------------------------------------------------------
# Image dimensions
# ---------------------------------------------------------------------------

class TestImageDimensions:
    """Test (width, height) extraction from arrays."""

    def test_grayscale(self):
        assert image_dimensions(np.zeros((20, 30))) == (30, 20)

    def test_rgba(self):
        assert image_dimensions(np.zeros((16, 48, 4), dtype=np.uint8)) == (48, 16)

    def test_returns_python_ints(self):
        width, height = image_dimensions(np.zeros((2, 3)))
        assert type(width) is int
        assert type(height) is int

    def test_one_dimensional_raises(self):
        with pytest.raises(ValidationError, match="at least 2 dimensions"):
            image_dimensions(np.zeros(10))

    def test_analyze_image_forwards_dimensions(self):
        seen = {}

        @analyzer_version('1.0.0')
        class _Recording(MetadataAnalyzer):
            def analyze(self, metadata, image_width, image_height):
                seen['size'] = (image_width, image_height)
                return AnalyzedMetadata(Stretch())

        _Recording().analyze_image(MappingMetadataView(), np.zeros((5, 7, 3)))
        assert seen['size'] == (7, 5)


# ---------------------------------------------------------------------------
# Public surface
# ---------------------------------------------------------------------------

def test_top_level_exports():
    import guiscale

    for name in guiscale.__all__:
        assert hasattr(guiscale, name), name
