# -*- coding: utf-8 -*-
"""
Metadata Loader - Parse JSON or YAML texture metadata into a view.

Provides ``parse_metadata`` for metadata already held as text and
``load_metadata`` for metadata files sitting next to a texture. The
format is chosen from the file suffix: ``.json``, ``.mcmeta`` and
``.moremcmeta`` are JSON; ``.yaml`` and ``.yml`` are YAML.

Dependencies
------------
pyyaml

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

# Standard library
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

# Third-party
import yaml

# guiscale internal
from guiscale.exceptions import ValidationError
from guiscale.metadata.mapping import MappingMetadataView

logger = logging.getLogger(__name__)

METADATA_FORMATS = ('json', 'yaml')

_SUFFIX_FORMATS: Dict[str, str] = {
    '.json': 'json',
    '.mcmeta': 'json',
    '.moremcmeta': 'json',
    '.yaml': 'yaml',
    '.yml': 'yaml',
}


def parse_metadata(text: str, fmt: str = 'json') -> MappingMetadataView:
    """Parse metadata text into a view.

    Parameters
    ----------
    text : str
        Serialized metadata.
    fmt : str
        ``'json'`` or ``'yaml'``. Default ``'json'``.

    Returns
    -------
    MappingMetadataView

    Raises
    ------
    ValidationError
        If ``fmt`` is not supported, the text does not parse, or the
        document root is not a mapping.
    """
    if fmt not in METADATA_FORMATS:
        raise ValidationError(
            f"fmt must be one of {METADATA_FORMATS}, got {fmt!r}"
        )

    data: Any
    try:
        if fmt == 'json':
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValidationError(f"Could not parse {fmt} metadata: {e}") from e

    # An empty YAML document loads as None
    if data is None and fmt == 'yaml':
        data = {}

    if not isinstance(data, dict):
        raise ValidationError(
            f"Metadata root must be a mapping, got {type(data).__name__}"
        )
    return MappingMetadataView(data)


def load_metadata(path: Union[str, Path]) -> MappingMetadataView:
    """Read a metadata file into a view.

    Parameters
    ----------
    path : Union[str, Path]
        Path to a ``.json``, ``.mcmeta``, ``.moremcmeta``, ``.yaml`` or
        ``.yml`` file.

    Returns
    -------
    MappingMetadataView

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValidationError
        If the suffix is not recognized or the contents are invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    fmt = _SUFFIX_FORMATS.get(path.suffix.lower())
    if fmt is None:
        raise ValidationError(
            f"Unsupported metadata file suffix {path.suffix!r}; "
            f"expected one of {tuple(_SUFFIX_FORMATS)}"
        )

    logger.debug("Loading %s metadata from %s", fmt, path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ValidationError(
            f"Could not decode metadata file {path}: {e}"
        ) from e
    return parse_metadata(text, fmt=fmt)
