# -*- coding: utf-8 -*-
"""
Mapping Metadata View - ``MetadataView`` backed by a parsed mapping.

Provides ``MappingMetadataView``, the concrete view used for metadata
parsed from JSON or YAML (any nested ``Mapping[str, Any]``). Nested
mappings are exposed as sub-views; scalars are exposed through the typed
lookups. Also supports read-only dict-like access (``'scaling' in view``,
``view.keys()``, ``len(view)``) for code that inspects raw metadata.

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
import copy
from collections import abc
from typing import Any, Dict, Iterator, List, Mapping, Optional

# guiscale internal
from guiscale.exceptions import InvalidValueError
from guiscale.metadata.base import MetadataView


class MappingMetadataView(MetadataView):
    """Read-only metadata view over a nested mapping.

    The mapping is deep-copied on construction, so later changes to the
    source do not leak into the view. Views compare equal when their
    contents are equal, and are unhashable because the wrapped mapping is.

    Parameters
    ----------
    data : Mapping[str, Any], optional
        Parsed metadata. Nested mappings become sub-views. Default is an
        empty mapping.

    Examples
    --------
    >>> view = MappingMetadataView({'scaling': {'type': 'tile', 'width': 16}})
    >>> view.sub_view('scaling').string_value('type')
    'tile'
    >>> view.sub_view('scaling').integer_value('width')
    16
    >>> view.sub_view('missing') is None
    True
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(dict(data or {}))

    # ----------------------------------------------------------------
    # MetadataView lookups
    # ----------------------------------------------------------------

    def sub_view(self, key: str) -> Optional['MappingMetadataView']:
        """Get a nested section.

        A key holding a scalar is treated as absent, so the same key may
        be read either as a section or as a value.

        Parameters
        ----------
        key : str
            Section name.

        Returns
        -------
        Optional[MappingMetadataView]
        """
        value = self._data.get(key)
        if isinstance(value, abc.Mapping):
            return MappingMetadataView(value)
        return None

    def string_value(self, key: str) -> Optional[str]:
        """Get a string field.

        Parameters
        ----------
        key : str
            Field name.

        Returns
        -------
        Optional[str]

        Raises
        ------
        InvalidValueError
            If the key is present but does not hold a string.
        """
        value = self._data.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidValueError(
                f"{key} must be a string, got {type(value).__name__}",
                key=key,
            )
        return value

    def integer_value(self, key: str) -> Optional[int]:
        """Get an integer field.

        Parameters
        ----------
        key : str
            Field name.

        Returns
        -------
        Optional[int]

        Raises
        ------
        InvalidValueError
            If the key is present but does not hold an integer. Booleans
            are rejected even though ``bool`` subclasses ``int``.
        """
        value = self._data.get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidValueError(
                f"{key} must be an integer, got {type(value).__name__}",
                key=key,
            )
        return value

    # ----------------------------------------------------------------
    # Read-only dict-like access
    # ----------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MappingMetadataView):
            return NotImplemented
        return self._data == other._data

    __hash__ = None

    def __repr__(self) -> str:
        return f"MappingMetadataView({self._data!r})"

    def keys(self) -> List[str]:
        """Return the top-level keys of this view.

        Returns
        -------
        List[str]
        """
        return list(self._data.keys())

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the underlying mapping.

        Returns
        -------
        Dict[str, Any]
        """
        return copy.deepcopy(self._data)
