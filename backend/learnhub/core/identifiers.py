from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId

from learnhub.core.errors import FormatError


class ObjectIdFormat:
    """
    Identifier capability for the MongoDB store.

    Identifiers travel over the wire as 24 character hex strings and are
    stored as ``ObjectId`` values.
    """

    @staticmethod
    def is_valid(value: Any) -> bool:
        return isinstance(value, str) and ObjectId.is_valid(value)

    @classmethod
    def parse(cls, value: Any, message: str = "Invalid ID format") -> ObjectId:
        """
        Convert an identifier string to a storage key.

        Raises:
            FormatError: if ``value`` is not a valid identifier string
        """
        if not cls.is_valid(value):
            raise FormatError(message)
        try:
            return ObjectId(value)
        except (InvalidId, TypeError) as e:
            raise FormatError(message, str(e)) from e

    @staticmethod
    def to_str(key: ObjectId) -> str:
        return str(key)

    @classmethod
    def normalize(cls, value: Any) -> Optional[str]:
        """Canonical (lowercase hex) form of an identifier, or None if malformed."""
        if not cls.is_valid(value):
            return None
        return cls.to_str(ObjectId(value))


def parse_course_id(value: Any) -> ObjectId:
    return ObjectIdFormat.parse(value, "Invalid course ID format")
