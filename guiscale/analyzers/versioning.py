# -*- coding: utf-8 -*-
"""
Analyzer Versioning - Version decorator for metadata analyzers.

Provides the ``@analyzer_version`` class decorator for stamping a semantic
version string on any metadata analyzer class. The host records this
version alongside analyzed textures so results can be traced back to the
analyzer that produced them.

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
from typing import Optional, Type, TypeVar, overload
import importlib.metadata

T = TypeVar('T')


@overload
def analyzer_version(version: str):
    ...

@overload
def analyzer_version():
    ...

def analyzer_version(version: Optional[str] = None):
    """Class decorator that stamps a version on a metadata analyzer.

    Sets ``__analyzer_version__`` as a class attribute. If a version is
    not provided, it is inferred from the installed ``guiscale``
    distribution, falling back to ``'unknown'``.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Returns
    -------
    Callable
        Class decorator that sets ``__analyzer_version__`` on the class.

    Examples
    --------
    >>> from guiscale.analyzers.versioning import analyzer_version
    >>> from guiscale.analyzers.base import MetadataAnalyzer
    >>>
    >>> @analyzer_version('1.0.0')
    ... class MyAnalyzer(MetadataAnalyzer):
    ...     def analyze(self, metadata, image_width, image_height):
    ...         ...
    >>>
    >>> MyAnalyzer.__analyzer_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__analyzer_version__ = version
        else:
            try:
                cls.__analyzer_version__ = importlib.metadata.version('guiscale')
            except importlib.metadata.PackageNotFoundError:
                cls.__analyzer_version__ = "unknown"
        return cls
    return decorator
