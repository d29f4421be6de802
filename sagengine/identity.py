"""Objects that compare equal only to themselves, by a unique id."""

from __future__ import annotations

import itertools


class ComparableObject:
    """Base class giving every instance a unique id used for equality."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self._object_id = next(ComparableObject._ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparableObject):
            return NotImplemented
        return self._object_id == other._object_id

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._object_id)