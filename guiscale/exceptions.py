# -*- coding: utf-8 -*-
"""
guiscale Exception Hierarchy - Domain-specific exceptions for metadata analysis.

Provides a small exception hierarchy that lets the host texture manager
catch guiscale-specific errors distinctly from Python built-in exceptions.
All guiscale exceptions subclass both ``GuiScaleError`` and the appropriate
built-in exception for backward compatibility.

Metadata violations share the ``InvalidMetadataError`` base so a host can
reject a texture with a single ``except`` clause while still inspecting
the concrete failure (missing section, missing field, invalid value, or
unknown scaling type).

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
from typing import Optional


class GuiScaleError(Exception):
    """Base exception for all guiscale errors."""


class ValidationError(GuiScaleError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for malformed metadata files, unsupported formats, image
    arrays without two spatial dimensions, and other input failures.
    """


class InvalidMetadataError(ValidationError):
    """Texture metadata that cannot be interpreted.

    Base class for every failure raised while analyzing a metadata view.
    Analysis stops at the first violation; no partial result is returned.
    """


class MissingSectionError(InvalidMetadataError):
    """A required metadata section is absent.

    Parameters
    ----------
    section : str
        Name of the missing section (e.g. ``'scaling'``).
    """

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f"Missing {section} section")


class MissingFieldError(InvalidMetadataError):
    """A required field is absent from a metadata section.

    Parameters
    ----------
    field : str
        Name of the missing field.
    section : str
        Name of the section expected to contain the field.
    """

    def __init__(self, field: str, section: str) -> None:
        self.field = field
        self.section = section
        super().__init__(f"Missing {field} field in {section} section")


class InvalidValueError(InvalidMetadataError):
    """A field is present but its value violates a constraint.

    Parameters
    ----------
    message : str
        Human-readable description (e.g. ``'width must be positive'``).
    key : str, optional
        Name of the offending field, when known.
    """

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        self.key = key
        super().__init__(message)


class UnknownTypeError(InvalidMetadataError):
    """The scaling ``type`` names a kind outside the known set.

    Parameters
    ----------
    raw_type : str
        The type string exactly as found in the metadata.
    """

    def __init__(self, raw_type: str) -> None:
        self.raw_type = raw_type
        super().__init__(f"Unknown scaling type {raw_type}")
