"""
Tests for the admin authoring state machine.
"""

from classes.admin_panel import AdminPanel, AdminView


def fill_draft(panel, slug="survey"):
    panel.edit("set_field", "title", "Survey")
    panel.edit("set_field", "slug", slug)
    panel.edit("add_question")
    panel.edit("update_question", 0, "question", "Pick one")
    panel.edit("update_question", 0, "type", "radio")
    panel.edit("add_option", 0)
    panel.edit("update_option", 0, 0, "A")


class TestAuthoring:
    """Tests for creating and editing quizzes."""

    async def test_create_returns_to_list(self, api):
        """A successful save goes back to the list and clears the form."""
        panel = AdminPanel(api)
        panel.start_create()
        fill_draft(panel)

        assert await panel.save() is True
        assert panel.view == AdminView.LIST
        assert panel.draft.title == ""
        assert [quiz["slug"] for quiz in panel.quizzes] == ["survey"]

    async def test_failed_save_stays_in_form(self, api):
        """Server errors are kept and the form is not left."""
        panel = AdminPanel(api)
        panel.start_create()
        fill_draft(panel)
        await panel.save()

        panel.start_create()
        fill_draft(panel)
        assert await panel.save() is False
        assert panel.view == AdminView.EDIT
        assert panel.error == "Slug already exists"
        assert panel.draft.title == "Survey"

    async def test_blank_question_text_is_rejected(self, api):
        """A question left empty fails server validation."""
        panel = AdminPanel(api)
        panel.start_create()
        panel.edit("set_field", "title", "Survey")
        panel.edit("add_question")

        assert await panel.save() is False
        assert panel.view == AdminView.EDIT

    async def test_edit_updates_existing_quiz(self, api):
        """Editing loads the full quiz and saves with an update."""
        panel = AdminPanel(api)
        panel.start_create()
        fill_draft(panel)
        await panel.save()

        await panel.start_edit(panel.quizzes[0]["_id"])
        assert panel.draft.questions[0].question == "Pick one"
        panel.edit("set_field", "title", "Renamed")
        assert await panel.save() is True

        assert panel.quizzes[0]["title"] == "Renamed"
        assert len(panel.quizzes) == 1

    async def test_concurrent_edit_conflicts(self, api):
        """A second session saving over a newer revision gets an error."""
        first = AdminPanel(api)
        first.start_create()
        fill_draft(first)
        await first.save()
        quiz_id = first.quizzes[0]["_id"]

        second = AdminPanel(api)
        await first.start_edit(quiz_id)
        await second.start_edit(quiz_id)
        first.edit("set_field", "title", "First")
        second.edit("set_field", "title", "Second")

        assert await first.save() is True
        assert await second.save() is False
        assert second.view == AdminView.EDIT

    async def test_undo_redo(self, api):
        """Drafts can be stepped back and forward."""
        panel = AdminPanel(api)
        panel.start_create()
        panel.edit("set_field", "title", "One")
        panel.edit("set_field", "title", "Two")

        assert panel.undo().title == "One"
        assert panel.undo().title == ""
        assert panel.redo().title == "One"
        panel.edit("set_field", "title", "Three")
        assert panel.redo().title == "Three"


class TestDeletion:
    """Tests for quiz and response deletion."""

    async def test_delete_requires_confirmation(self, api):
        """Declining the prompt leaves the quiz alone."""
        panel = AdminPanel(api)
        panel.start_create()
        fill_draft(panel)
        await panel.save()
        quiz_id = panel.quizzes[0]["_id"]

        assert await panel.delete_quiz(quiz_id, confirm=lambda message: False) is False
        assert panel.quizzes[0]["isActive"] is True

        assert await panel.delete_quiz(quiz_id, confirm=lambda message: True) is True
        assert panel.quizzes[0]["isActive"] is False

    async def test_responses_view(self, api):
        """The responses view lists and deletes submissions."""
        panel = AdminPanel(api)
        panel.start_create()
        fill_draft(panel)
        await panel.save()
        quiz = panel.quizzes[0]
        await api.submit_response(quiz["_id"], [{"questionId": "q1", "type": "radio", "answer": "A"}], {})

        await panel.view_responses(quiz)
        assert panel.view == AdminView.RESPONSES
        assert len(panel.responses) == 1

        response_id = panel.responses[0]["_id"]
        assert await panel.delete_response(response_id, confirm=lambda message: True) is True
        assert panel.responses == []

        panel.back_to_list()
        assert panel.view == AdminView.LIST
