# -*- coding: utf-8 -*-
"""
Metadata View Base Class - Abstract interface over parsed texture metadata.

Defines ``MetadataView``, the narrow read-only capability interface that
analyzers consume. Concrete backends (JSON, YAML, a host's own property
tree) implement three lookups: nested section, string value, and integer
value. Absent keys return ``None`` rather than raising, so analyzers decide
which keys are required.

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

from abc import ABC, abstractmethod
from typing import Optional


class MetadataView(ABC):
    """
    Abstract base class for read-only views over hierarchical metadata.

    A view maps string keys to strings, integers, or nested views.
    Implementations must not mutate their underlying data in response to
    lookups, and must return ``None`` for keys that are not present.
    """

    @abstractmethod
    def sub_view(self, key: str) -> Optional['MetadataView']:
        """
        Get a nested section.

        Parameters
        ----------
        key : str
            Section name.

        Returns
        -------
        Optional[MetadataView]
            The nested view, or None if the key is absent or does not
            hold a section.
        """
        pass

    @abstractmethod
    def string_value(self, key: str) -> Optional[str]:
        """
        Get a string field.

        Parameters
        ----------
        key : str
            Field name.

        Returns
        -------
        Optional[str]
            The value, or None if the key is absent.
        """
        pass

    @abstractmethod
    def integer_value(self, key: str) -> Optional[int]:
        """
        Get an integer field.

        Parameters
        ----------
        key : str
            Field name.

        Returns
        -------
        Optional[int]
            The value, or None if the key is absent.
        """
        pass
