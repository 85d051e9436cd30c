import logging
from datetime import datetime, timezone
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError
from model.quiz_model import QuizIn, QuizModel
from utils.documents import serialize_doc, to_object_id
from utils.errors import ConflictError, NotFoundError, ValidationError
from utils.validate_quiz import validate_quiz_data

logger = logging.getLogger("quiz_app.quizzes")

PUBLIC_PROJECTION = {"title": 1, "description": 1, "slug": 1, "settings": 1, "createdAt": 1}


def quiz_not_found():
    return NotFoundError("Quiz not found")


async def ensure_slug_available(db, slug, exclude_id=None):
    filters = {"slug": slug}
    if exclude_id is not None:
        filters["_id"] = {"$ne": exclude_id}
    if await db['Quizzes'].find_one(filters, {"_id": 1}):
        raise ValidationError("Slug already exists")


async def list_public_quizzes(db):
    cursor = db['Quizzes'].find({"isActive": True}, PUBLIC_PROJECTION).sort("createdAt", DESCENDING)
    return [serialize_doc(quiz) async for quiz in cursor]


async def list_admin_quizzes(db):
    cursor = db['Quizzes'].find({}, {"questions": 0}).sort("createdAt", DESCENDING)
    return [serialize_doc(quiz) async for quiz in cursor]


async def get_quiz_by_slug(db, slug: str):
    quiz = await db['Quizzes'].find_one({"slug": slug, "isActive": True})
    if not quiz:
        raise quiz_not_found()
    return serialize_doc(quiz)


async def find_quiz(db, quiz_id):
    quiz = await db['Quizzes'].find_one({"_id": to_object_id(quiz_id, quiz_not_found())})
    if not quiz:
        raise quiz_not_found()
    return quiz


async def get_quiz_by_id(db, quiz_id):
    return serialize_doc(await find_quiz(db, quiz_id))


async def create_quiz(db, payload: QuizIn):
    validate_quiz_data(payload)
    await ensure_slug_available(db, payload.slug)

    now = datetime.now(timezone.utc)
    quiz = QuizModel(
        **payload.model_dump(exclude={"is_active", "revision"}),
        is_active=True if payload.is_active is None else payload.is_active,
        revision=1,
        created_at=now,
        updated_at=now,
    )
    quiz_dict = quiz.to_document()
    try:
        result = await db['Quizzes'].insert_one(quiz_dict)
    except DuplicateKeyError:
        raise ValidationError("Slug already exists")

    quiz_dict["_id"] = result.inserted_id
    logger.info(f"Created quiz {result.inserted_id} ({payload.slug})")
    return serialize_doc(quiz_dict)


async def update_quiz(db, quiz_id, payload: QuizIn):
    """
    Replace the mutable fields of a quiz.

    When the payload carries a revision the write only applies if it still
    matches the stored one; otherwise the last write wins.
    """
    object_id = to_object_id(quiz_id, quiz_not_found())
    if not await db['Quizzes'].find_one({"_id": object_id}, {"_id": 1}):
        raise quiz_not_found()
    validate_quiz_data(payload)
    await ensure_slug_available(db, payload.slug, exclude_id=object_id)

    changes = payload.to_document(exclude={"is_active", "revision", "created_by"})
    if payload.is_active is not None:
        changes["isActive"] = payload.is_active
    changes["updatedAt"] = datetime.now(timezone.utc)

    filters = {"_id": object_id}
    if payload.revision is not None:
        filters["revision"] = payload.revision

    try:
        quiz = await db['Quizzes'].find_one_and_update(
            filters,
            {"$set": changes, "$inc": {"revision": 1}},
            return_document=ReturnDocument.AFTER,
        )
    except DuplicateKeyError:
        raise ValidationError("Slug already exists")

    if quiz is None:
        if payload.revision is not None:
            raise ConflictError("Quiz was modified by someone else, reload and try again")
        raise quiz_not_found()

    logger.info(f"Updated quiz {quiz_id} to revision {quiz.get('revision')}")
    return serialize_doc(quiz)


async def soft_delete_quiz(db, quiz_id):
    quiz = await db['Quizzes'].find_one_and_update(
        {"_id": to_object_id(quiz_id, quiz_not_found())},
        {"$set": {"isActive": False, "updatedAt": datetime.now(timezone.utc)}},
    )
    if quiz is None:
        raise quiz_not_found()
    logger.info(f"Deactivated quiz {quiz_id}")
