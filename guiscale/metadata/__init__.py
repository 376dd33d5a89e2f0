# -*- coding: utf-8 -*-
"""
Metadata - Read-only views over parsed texture metadata.

Re-exports the view interface, its mapping-backed implementation, and the
JSON/YAML loaders:

    from guiscale.metadata import MetadataView, MappingMetadataView, load_metadata

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

from guiscale.metadata.base import MetadataView
from guiscale.metadata.mapping import MappingMetadataView
from guiscale.metadata.loader import (
    METADATA_FORMATS,
    load_metadata,
    parse_metadata,
)

__all__ = [
    'MetadataView',
    'MappingMetadataView',
    'METADATA_FORMATS',
    'load_metadata',
    'parse_metadata',
]
