# -*- coding: utf-8 -*-
"""
Analyzer Validation Helpers - Shared required-field lookups.

Provides reusable lookups for metadata analyzers that need a field to be
present and within range. Each helper raises the matching
``InvalidMetadataError`` subclass on the first violation.

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

# guiscale internal
from guiscale.exceptions import (
    InvalidValueError,
    MissingFieldError,
    MissingSectionError,
)
from guiscale.metadata.base import MetadataView


def require_section(metadata: MetadataView, name: str) -> MetadataView:
    """Get a nested section that must be present.

    Raises
    ------
    MissingSectionError
        If the section is absent.
    """
    section = metadata.sub_view(name)
    if section is None:
        raise MissingSectionError(name)
    return section


def require_string(section: MetadataView, key: str, section_name: str) -> str:
    """Get a string field that must be present.

    Raises
    ------
    MissingFieldError
        If the field is absent.
    """
    value = section.string_value(key)
    if value is None:
        raise MissingFieldError(key, section_name)
    return value


def require_positive(section: MetadataView, key: str, section_name: str) -> int:
    """Get an integer field that must be present and greater than zero.

    Parameters
    ----------
    section : MetadataView
        Section to read from.
    key : str
        Field name.
    section_name : str
        Name of ``section``, for error messages.

    Returns
    -------
    int

    Raises
    ------
    MissingFieldError
        If the field is absent.
    InvalidValueError
        If the value is zero or negative.
    """
    value = section.integer_value(key)
    if value is None:
        raise MissingFieldError(key, section_name)
    if value <= 0:
        raise InvalidValueError(f"{key} must be positive", key=key)
    return value


def require_non_negative(section: MetadataView, key: str, section_name: str) -> int:
    """Get an integer field that must be present and not negative.

    Parameters
    ----------
    section : MetadataView
        Section to read from.
    key : str
        Field name.
    section_name : str
        Name of ``section``, for error messages.

    Returns
    -------
    int

    Raises
    ------
    MissingFieldError
        If the field is absent.
    InvalidValueError
        If the value is negative.
    """
    value = section.integer_value(key)
    if value is None:
        raise MissingFieldError(key, section_name)
    if value < 0:
        raise InvalidValueError(f"{key} is negative", key=key)
    return value
