# -*- coding: utf-8 -*-
"""
Analyzers - Texture metadata analyzers and their base interface.

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

from guiscale.analyzers.base import MetadataAnalyzer, image_dimensions
from guiscale.analyzers.gui import GuiMetadataAnalyzer
from guiscale.analyzers.versioning import analyzer_version

__all__ = [
    'MetadataAnalyzer',
    'GuiMetadataAnalyzer',
    'analyzer_version',
    'image_dimensions',
]
