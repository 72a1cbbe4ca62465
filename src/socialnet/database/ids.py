"""
Conversion between API identifiers and MongoDB ObjectIds
"""

from bson import ObjectId
from bson.errors import InvalidId

from ..errors import StoreError


def parse_object_id(value: str | ObjectId) -> ObjectId:
    """Parse the canonical string form of an identifier into an ObjectId.

    Raises:
        StoreError: If the value is not a valid ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise StoreError(str(e)) from e
