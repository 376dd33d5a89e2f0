# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for guiscale.

Defines the single source of truth for the controlled vocabulary of GUI
scaling kinds. Values match the strings accepted in the ``type`` field of
a texture's ``scaling`` metadata section.

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

from enum import Enum


class ScalingType(Enum):
    """How a GUI texture is scaled to fill its on-screen area.

    Matching against metadata is case-sensitive: ``'Tile'`` is not a
    valid spelling of ``TILE``.
    """

    STRETCH = "stretch"
    TILE = "tile"
    NINE_SLICE = "nine_slice"
