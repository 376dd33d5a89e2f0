# -*- coding: utf-8 -*-
"""
guiscale - GUI texture scaling metadata for texture managers.

Interprets the ``scaling`` section of a GUI texture's metadata (stretch,
tile, or nine-slice) into a typed scaling descriptor plus frame size.
The host texture manager supplies the parsed metadata and the image size
and consumes the ``AnalyzedMetadata`` result.

Dependencies
------------
numpy
pyyaml

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from guiscale.exceptions import (
    GuiScaleError,
    ValidationError,
    InvalidMetadataError,
    MissingSectionError,
    MissingFieldError,
    InvalidValueError,
    UnknownTypeError,
)
from guiscale.vocabulary import ScalingType
from guiscale.models import (
    GuiScaling,
    Stretch,
    Tile,
    NineSlice,
    AnalyzedMetadata,
)
from guiscale.metadata import (
    MetadataView,
    MappingMetadataView,
    load_metadata,
    parse_metadata,
)
from guiscale.analyzers import (
    MetadataAnalyzer,
    GuiMetadataAnalyzer,
    analyzer_version,
)

__all__ = [
    'GuiScaleError',
    'ValidationError',
    'InvalidMetadataError',
    'MissingSectionError',
    'MissingFieldError',
    'InvalidValueError',
    'UnknownTypeError',
    'ScalingType',
    'GuiScaling',
    'Stretch',
    'Tile',
    'NineSlice',
    'AnalyzedMetadata',
    'MetadataView',
    'MappingMetadataView',
    'load_metadata',
    'parse_metadata',
    'MetadataAnalyzer',
    'GuiMetadataAnalyzer',
    'analyzer_version',
]
