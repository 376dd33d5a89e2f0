# -*- coding: utf-8 -*-
"""
Analyzer Base Classes - Abstract interface for texture metadata analyzers.

Defines the ``MetadataAnalyzer`` ABC that the host texture manager calls
for each texture carrying metadata. The host selects which analyzer to run
from the metadata section name; analyzers only interpret the view they are
handed. ``MetadataAnalyzer`` provides version checking at first
instantiation and an ``analyze_image`` convenience entry point that reads
the image dimensions from a NumPy array.

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
import warnings
from abc import ABC, abstractmethod
from typing import Any, Tuple

# Third-party
import numpy as np

# guiscale internal
from guiscale.exceptions import ValidationError
from guiscale.metadata.base import MetadataView
from guiscale.models import AnalyzedMetadata

logger = logging.getLogger(__name__)


def image_dimensions(image: np.ndarray) -> Tuple[int, int]:
    """Get the ``(width, height)`` of an image array.

    Parameters
    ----------
    image : np.ndarray
        Image with shape ``(rows, cols)`` or ``(rows, cols, channels)``.

    Returns
    -------
    Tuple[int, int]
        ``(cols, rows)``.

    Raises
    ------
    ValidationError
        If ``image`` has fewer than two dimensions.
    """
    image = np.asarray(image)
    if image.ndim < 2:
        raise ValidationError(
            f"image must have at least 2 dimensions, got {image.ndim}"
        )
    rows, cols = image.shape[0], image.shape[1]
    return int(cols), int(rows)


class MetadataAnalyzer(ABC):
    """
    Abstract base class for texture metadata analyzers.

    Analyzers are stateless: ``analyze`` depends only on its arguments,
    so a single instance may be shared by every texture and thread.

    **Version checking**: Concrete subclasses that do not declare a
    version via ``@analyzer_version('x.y.z')`` trigger a ``UserWarning``
    at first instantiation.
    """

    # Track which classes have been checked to warn only once per class.
    _version_warned_classes: set = set()

    def __new__(cls, *args: Any, **kwargs: Any) -> 'MetadataAnalyzer':
        if cls not in MetadataAnalyzer._version_warned_classes:
            MetadataAnalyzer._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__analyzer_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare an analyzer version. "
                    f"Use @analyzer_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    @abstractmethod
    def analyze(
        self,
        metadata: MetadataView,
        image_width: int,
        image_height: int,
    ) -> AnalyzedMetadata:
        """
        Interpret the metadata attached to one texture.

        Parameters
        ----------
        metadata : MetadataView
            The texture's metadata section. Not retained after the call.
        image_width : int
            Width of the texture image in pixels.
        image_height : int
            Height of the texture image in pixels.

        Returns
        -------
        AnalyzedMetadata
            A fully validated result.

        Raises
        ------
        InvalidMetadataError
            If the metadata cannot be interpreted.
        """
        pass

    def analyze_image(
        self,
        metadata: MetadataView,
        image: np.ndarray,
    ) -> AnalyzedMetadata:
        """
        Interpret metadata for a texture already loaded as an array.

        Parameters
        ----------
        metadata : MetadataView
            The texture's metadata section.
        image : np.ndarray
            Texture pixels with shape ``(rows, cols[, channels])``.

        Returns
        -------
        AnalyzedMetadata

        Raises
        ------
        ValidationError
            If ``image`` has fewer than two dimensions.
        InvalidMetadataError
            If the metadata cannot be interpreted.
        """
        width, height = image_dimensions(image)
        return self.analyze(metadata, width, height)
