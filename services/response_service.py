import logging
from datetime import datetime, timezone
from bson import ObjectId
from pymongo import DESCENDING
from model.answer_model import AnswerModel
from model.response_model import RequestMetadata, ResponseModel, SubmissionIn, NotificationResult
from services import email_service
from services.quiz_service import find_quiz
from utils.documents import serialize_doc, to_object_id
from utils.errors import NotFoundError

logger = logging.getLogger("quiz_app.responses")

UNKNOWN_QUESTION = "Unknown question"
RECENT_LIMIT = 10


def response_not_found():
    return NotFoundError("Response not found")


def quiz_filter(quiz_id):
    if not ObjectId.is_valid(quiz_id):
        return None
    return {"quizId": ObjectId(quiz_id)}


async def record_notification(db, response_id, channel: str, flag: str, result: NotificationResult):
    await db['Responses'].update_one(
        {"_id": response_id},
        {"$set": {
            f"notifications.{channel}": result.to_document(),
            flag: result.sent,
            "updatedAt": datetime.now(timezone.utc),
        }},
    )


async def submit_response(db, submission: SubmissionIn, ip_address=None, user_agent=None):
    quiz = await find_quiz(db, submission.quiz_id)
    questions = {question["id"]: question for question in quiz.get("questions", [])}

    answers = []
    for answer in submission.answers:
        question = questions.get(answer.question_id)
        answers.append(AnswerModel(
            question_id=answer.question_id,
            question_text=question["question"] if question else UNKNOWN_QUESTION,
            answer=answer.answer,
            type=answer.type,
        ))

    now = datetime.now(timezone.utc)
    response = ResponseModel(
        quiz_id=quiz["_id"],
        quiz_slug=quiz["slug"],
        answers=answers,
        contact_info=submission.contact_info,
        metadata=RequestMetadata(ip_address=ip_address, user_agent=user_agent, submitted_at=now),
        created_at=now,
        updated_at=now,
    )
    response_dict = response.to_document()
    result = await db['Responses'].insert_one(response_dict)
    response_id = result.inserted_id
    response_dict["_id"] = response_id
    logger.info(f"Stored response {response_id} for quiz {quiz['slug']}")

    settings = quiz.get("settings") or {}
    contact_info = submission.contact_info
    if settings.get("sendConfirmationEmail", True) and contact_info and contact_info.email:
        user_result = await email_service.send_user_confirmation_email(contact_info.email, quiz["title"], response_dict)
        await record_notification(db, response_id, "user", "userEmailSent", user_result)

    admin_result = await email_service.send_admin_notification_email(quiz["title"], response_dict)
    await record_notification(db, response_id, "admin", "adminNotified", admin_result)

    return str(response_id)


async def list_quiz_responses(db, quiz_id):
    filters = quiz_filter(quiz_id)
    if filters is None:
        return []
    cursor = db['Responses'].find(filters).sort("createdAt", DESCENDING)
    return [serialize_doc(response) async for response in cursor]


async def list_all_responses(db):
    cursor = db['Responses'].find({}, {"answers": 0}).sort("createdAt", DESCENDING)
    return [serialize_doc(response) async for response in cursor]


async def get_response_by_id(db, response_id):
    response = await db['Responses'].find_one({"_id": to_object_id(response_id, response_not_found())})
    if not response:
        raise response_not_found()
    return serialize_doc(response)


async def get_response_stats(db, quiz_id):
    filters = quiz_filter(quiz_id)
    if filters is None:
        return {"totalResponses": 0, "recentResponses": []}

    total = await db['Responses'].count_documents(filters)
    cursor = db['Responses'].find(filters).sort("createdAt", DESCENDING).limit(RECENT_LIMIT)
    recent = [serialize_doc(response) async for response in cursor]
    return {"totalResponses": total, "recentResponses": recent}


async def delete_response(db, response_id):
    response = await db['Responses'].find_one_and_delete({"_id": to_object_id(response_id, response_not_found())})
    if response is None:
        raise response_not_found()
    logger.info(f"Deleted response {response_id}")
