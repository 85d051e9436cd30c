"""
Tests for the service layer working directly against the database.
"""

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

from model.quiz_model import QuizIn
from model.response_model import SubmissionIn
from services import quiz_service, response_service
from utils.errors import ConflictError, NotFoundError, ValidationError

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


async def insert_quiz(db, slug, minutes, is_active=True):
    result = await db["Quizzes"].insert_one({
        "title": slug.title(),
        "description": "",
        "slug": slug,
        "questions": [{"id": "q1", "type": "text", "question": "Why?"}],
        "settings": {"sendConfirmationEmail": False},
        "isActive": is_active,
        "createdAt": BASE_TIME + timedelta(minutes=minutes),
        "updatedAt": BASE_TIME + timedelta(minutes=minutes),
    })
    return result.inserted_id


class TestQuizService:
    """Tests for quiz_service."""

    async def test_public_list_is_newest_first_and_active_only(self, db):
        """Inactive quizzes are hidden and order is by creation time."""
        await insert_quiz(db, "old", 0)
        await insert_quiz(db, "new", 10)
        await insert_quiz(db, "retired", 20, is_active=False)

        quizzes = await quiz_service.list_public_quizzes(db)

        assert [quiz["slug"] for quiz in quizzes] == ["new", "old"]

    async def test_admin_list_includes_inactive(self, db):
        """Admins see every quiz, newest first."""
        await insert_quiz(db, "old", 0)
        await insert_quiz(db, "retired", 20, is_active=False)

        quizzes = await quiz_service.list_admin_quizzes(db)

        assert [quiz["slug"] for quiz in quizzes] == ["retired", "old"]

    async def test_create_rejects_duplicate_slug(self, db):
        """Duplicate slugs raise a validation error."""
        await insert_quiz(db, "taken", 0)

        with pytest.raises(ValidationError):
            await quiz_service.create_quiz(db, QuizIn(title="Again", slug="taken"))
        assert await db["Quizzes"].count_documents({}) == 1

    async def test_blank_title_rejected(self, db):
        """Whitespace-only titles are not accepted."""
        with pytest.raises(ValidationError):
            await quiz_service.create_quiz(db, QuizIn(title="   ", slug="blank"))

    async def test_update_without_revision_is_last_write_wins(self, db):
        """Writes without a revision always apply."""
        quiz_id = await insert_quiz(db, "edit-me", 0)

        await quiz_service.update_quiz(db, str(quiz_id), QuizIn(title="One", slug="edit-me"))
        updated = await quiz_service.update_quiz(db, str(quiz_id), QuizIn(title="Two", slug="edit-me"))

        assert updated["title"] == "Two"
        assert updated["revision"] == 2

    async def test_update_with_stale_revision(self, db):
        """A mismatched revision raises a conflict."""
        quiz = await quiz_service.create_quiz(db, QuizIn(title="Quiz", slug="quiz"))
        await quiz_service.update_quiz(db, quiz["_id"], QuizIn(title="Quiz", slug="quiz", revision=1))

        with pytest.raises(ConflictError):
            await quiz_service.update_quiz(db, quiz["_id"], QuizIn(title="Late", slug="quiz", revision=1))

    async def test_soft_delete_missing_quiz(self, db):
        """Soft delete of an unknown id is a not-found error."""
        with pytest.raises(NotFoundError):
            await quiz_service.soft_delete_quiz(db, str(ObjectId()))


class TestResponseService:
    """Tests for response_service."""

    async def test_listing_is_newest_first(self, db):
        """Responses for a quiz come back newest first."""
        quiz_id = await insert_quiz(db, "survey", 0)
        for minutes, label in ((0, "first"), (5, "second")):
            await db["Responses"].insert_one({
                "quizId": quiz_id,
                "quizSlug": "survey",
                "answers": [{"questionId": "q1", "questionText": "Why?", "answer": label, "type": "text"}],
                "createdAt": BASE_TIME + timedelta(minutes=minutes),
            })

        responses = await response_service.list_quiz_responses(db, str(quiz_id))
        stats = await response_service.get_response_stats(db, str(quiz_id))

        assert [r["answers"][0]["answer"] for r in responses] == ["second", "first"]
        assert stats["recentResponses"][0]["answers"][0]["answer"] == "second"

    async def test_submit_to_inactive_quiz_by_id(self, db, sent_emails):
        """Submissions resolve the quiz by id even after it was retired."""
        quiz_id = await insert_quiz(db, "retired", 0, is_active=False)
        submission = SubmissionIn.model_validate({
            "quizId": str(quiz_id),
            "answers": [{"questionId": "q1", "type": "text", "answer": "Because"}],
        })

        response_id = await response_service.submit_response(db, submission, ip_address="10.0.0.1")
        stored = await db["Responses"].find_one({"_id": ObjectId(response_id)})

        assert stored["answers"][0]["questionText"] == "Why?"
        assert stored["metadata"]["ipAddress"] == "10.0.0.1"
        assert stored["adminNotified"] is True

    async def test_delete_missing_response(self, db):
        """Deleting an unknown response raises not-found."""
        with pytest.raises(NotFoundError):
            await response_service.delete_response(db, "bad-id")


class TestSeed:
    """Tests for the sample data loader."""

    async def test_seed_is_idempotent(self, db):
        """The sample quiz is created once and skipped afterwards."""
        import seed

        quiz = await seed.seed_database(db)
        assert quiz["slug"] == "feedback-form"
        assert len(quiz["questions"]) == 6

        assert await seed.seed_database(db) is None
        assert await db["Quizzes"].count_documents({}) == 1
