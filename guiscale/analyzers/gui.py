# -*- coding: utf-8 -*-
"""
GUI Metadata Analyzer - Interprets the ``scaling`` section of GUI textures.

Reads how a GUI texture should be scaled (stretched, tiled, or
nine-sliced) and the size of one frame of the texture. Validation stops at
the first violation, checked in a fixed order: the ``scaling`` section,
its ``type``, ``width``, ``height``, then the border fields. A result is
only built once every check has passed.

Accepted metadata::

    scaling:
      type: stretch | tile | nine_slice
      width: <int > 0>        # tile and nine_slice
      height: <int > 0>       # tile and nine_slice
      border: <int >= 0>      # nine_slice, same border on all sides
      border:                 # nine_slice, per-side borders (takes precedence)
        left: <int >= 0>
        right: <int >= 0>
        top: <int >= 0>
        bottom: <int >= 0>

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

# Standard library
import logging

# guiscale internal
from guiscale.analyzers._validation import (
    require_non_negative,
    require_positive,
    require_section,
    require_string,
)
from guiscale.analyzers.base import MetadataAnalyzer
from guiscale.analyzers.versioning import analyzer_version
from guiscale.exceptions import UnknownTypeError
from guiscale.metadata.base import MetadataView
from guiscale.models import AnalyzedMetadata, NineSlice, Stretch, Tile
from guiscale.vocabulary import ScalingType

logger = logging.getLogger(__name__)

SCALING_SECTION = 'scaling'
BORDER_SECTION = 'border'
BORDER_SIDES = ('left', 'right', 'top', 'bottom')


@analyzer_version('1.0.0')
class GuiMetadataAnalyzer(MetadataAnalyzer):
    """Reads GUI scaling information from texture metadata.

    The image dimensions are accepted for conformance with
    ``MetadataAnalyzer`` but do not constrain the scaling parameters.

    Examples
    --------
    >>> from guiscale.metadata import MappingMetadataView
    >>> analyzer = GuiMetadataAnalyzer()
    >>> view = MappingMetadataView({
    ...     'scaling': {'type': 'nine_slice', 'width': 32, 'height': 32,
    ...                 'border': 4},
    ... })
    >>> analyzer.analyze(view, 64, 64).gui_scaling
    NineSlice(left=4, right=4, top=4, bottom=4)
    """

    def analyze(
        self,
        metadata: MetadataView,
        image_width: int,
        image_height: int,
    ) -> AnalyzedMetadata:
        """Interpret the ``scaling`` section of a texture's metadata.

        Parameters
        ----------
        metadata : MetadataView
            Root metadata view containing a ``scaling`` section.
        image_width : int
            Width of the texture image in pixels. Unused.
        image_height : int
            Height of the texture image in pixels. Unused.

        Returns
        -------
        AnalyzedMetadata
            ``Stretch`` without frame dimensions, or ``Tile`` /
            ``NineSlice`` with frame width and height.

        Raises
        ------
        MissingSectionError
            If the ``scaling`` section is absent.
        MissingFieldError
            If ``type``, ``width``, ``height`` or a border field is absent.
        InvalidValueError
            If ``width``/``height`` are not positive or a border is negative.
        UnknownTypeError
            If ``type`` is not a known scaling kind.
        """
        scaling_section = require_section(metadata, SCALING_SECTION)
        raw_type = require_string(scaling_section, 'type', SCALING_SECTION)

        try:
            scaling_type = ScalingType(raw_type)
        except ValueError:
            raise UnknownTypeError(raw_type) from None

        if scaling_type is ScalingType.STRETCH:
            logger.debug("Analyzed GUI scaling: stretch")
            return AnalyzedMetadata(Stretch())

        frame_width = require_positive(scaling_section, 'width', SCALING_SECTION)
        frame_height = require_positive(scaling_section, 'height', SCALING_SECTION)

        if scaling_type is ScalingType.TILE:
            scaling = Tile()
        else:
            scaling = self._read_nine_slice(scaling_section)

        logger.debug(
            "Analyzed GUI scaling: %s with %dx%d frames",
            scaling_type.value, frame_width, frame_height,
        )
        return AnalyzedMetadata(
            scaling,
            frame_width=frame_width,
            frame_height=frame_height,
        )

    @staticmethod
    def _read_nine_slice(scaling_section: MetadataView) -> NineSlice:
        """Read nine-slice borders from the nested or the flat form.

        The nested ``border`` section wins when both forms are present.
        """
        border_section = scaling_section.sub_view(BORDER_SECTION)
        if border_section is not None:
            left, right, top, bottom = (
                require_non_negative(border_section, side, BORDER_SECTION)
                for side in BORDER_SIDES
            )
            return NineSlice(left=left, right=right, top=top, bottom=bottom)

        border = require_non_negative(scaling_section, 'border', SCALING_SECTION)
        return NineSlice.uniform(border)
