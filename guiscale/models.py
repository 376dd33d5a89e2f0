# -*- coding: utf-8 -*-
"""
Scaling Models - Typed results produced by metadata analyzers.

Provides the closed set of GUI scaling descriptors (``Stretch``, ``Tile``,
``NineSlice``) under the common ``GuiScaling`` base, and
``AnalyzedMetadata``, the immutable record an analyzer hands back to the
host. All classes are frozen dataclasses, so two descriptors with the same
parameters compare equal and can be used as dictionary keys.

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
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Optional

# guiscale internal
from guiscale.vocabulary import ScalingType


@dataclass(frozen=True)
class GuiScaling:
    """Base class for GUI scaling descriptors.

    Not instantiated directly; use one of ``Stretch``, ``Tile`` or
    ``NineSlice``.
    """

    scaling_type: ClassVar[ScalingType]

    def __post_init__(self) -> None:
        if type(self) is GuiScaling:
            raise TypeError(
                "GuiScaling is abstract; use Stretch, Tile or NineSlice"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dictionary keyed like the metadata schema.

        Returns
        -------
        Dict[str, Any]
            ``{'type': <scaling type value>, ...parameters}``.
        """
        result: Dict[str, Any] = {'type': self.scaling_type.value}
        result.update(asdict(self))
        return result


@dataclass(frozen=True)
class Stretch(GuiScaling):
    """Stretch the whole texture over the target area."""

    scaling_type: ClassVar[ScalingType] = ScalingType.STRETCH


@dataclass(frozen=True)
class Tile(GuiScaling):
    """Repeat a fixed-size frame to fill the target area.

    The frame size is carried by ``AnalyzedMetadata``, not the descriptor.
    """

    scaling_type: ClassVar[ScalingType] = ScalingType.TILE


@dataclass(frozen=True)
class NineSlice(GuiScaling):
    """Scale with fixed corners and edges, stretching only the center.

    Parameters
    ----------
    left : int
        Width of the left border in pixels. Non-negative.
    right : int
        Width of the right border in pixels. Non-negative.
    top : int
        Height of the top border in pixels. Non-negative.
    bottom : int
        Height of the bottom border in pixels. Non-negative.
    """

    scaling_type: ClassVar[ScalingType] = ScalingType.NINE_SLICE

    left: int
    right: int
    top: int
    bottom: int

    @classmethod
    def uniform(cls, border: int) -> 'NineSlice':
        """Build a nine-slice with the same border on all four sides."""
        return cls(left=border, right=border, top=border, bottom=border)


@dataclass(frozen=True)
class AnalyzedMetadata:
    """Result of analyzing a texture's GUI scaling metadata.

    Frame dimensions are ``None`` for ``Stretch`` and always set for
    ``Tile`` and ``NineSlice``.

    Parameters
    ----------
    gui_scaling : GuiScaling
        The validated scaling descriptor.
    frame_width : int, optional
        Width in pixels of one frame of the texture.
    frame_height : int, optional
        Height in pixels of one frame of the texture.

    Examples
    --------
    >>> result = AnalyzedMetadata(Tile(), frame_width=16, frame_height=16)
    >>> result.gui_scaling.scaling_type
    <ScalingType.TILE: 'tile'>
    >>> result.to_dict()
    {'frame_width': 16, 'frame_height': 16, 'scaling': {'type': 'tile'}}
    """

    gui_scaling: GuiScaling
    frame_width: Optional[int] = None
    frame_height: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary.

        Frame dimensions that are ``None`` are excluded.

        Returns
        -------
        Dict[str, Any]
        """
        result: Dict[str, Any] = {}
        if self.frame_width is not None:
            result['frame_width'] = self.frame_width
        if self.frame_height is not None:
            result['frame_height'] = self.frame_height
        result['scaling'] = self.gui_scaling.to_dict()
        return result
