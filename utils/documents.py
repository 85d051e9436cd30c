from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value, not_found):
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise not_found


def serialize_doc(doc):
    if isinstance(doc, ObjectId):
        return str(doc)
    if isinstance(doc, dict):
        return {key: serialize_doc(value) for key, value in doc.items()}
    if isinstance(doc, list):
        return [serialize_doc(item) for item in doc]
    return doc
