import logging
from enum import Enum
import aiohttp
from classes.quiz_builder import QuizDraft
from utils.quiz_api import QuizApiError

logger = logging.getLogger("quiz_app.admin")


class AdminView(str, Enum):
    LIST = "list"
    EDIT = "edit"
    RESPONSES = "responses"


class AdminPanel:
    def __init__(self, api):
        self.api = api
        self.view = AdminView.LIST
        self.quizzes = []
        self.current_quiz = None
        self.responses = []
        self.draft = QuizDraft()
        self.error = None
        self.undo_stack = []
        self.redo_stack = []

    async def load_quizzes(self):
        try:
            self.quizzes = await self.api.get_all_quizzes_admin()
        except (QuizApiError, aiohttp.ClientError) as e:
            self.error = str(e)

    def start_create(self):
        self.current_quiz = None
        self.reset_form()
        self.view = AdminView.EDIT

    async def start_edit(self, quiz_id: str):
        try:
            quiz = await self.api.get_quiz_by_id(quiz_id)
        except (QuizApiError, aiohttp.ClientError) as e:
            self.error = str(e)
            return
        self.current_quiz = quiz
        self.reset_form(QuizDraft.from_quiz(quiz))
        self.view = AdminView.EDIT

    def reset_form(self, draft: QuizDraft = None):
        self.draft = draft or QuizDraft()
        self.undo_stack = []
        self.redo_stack = []
        self.error = None

    def edit(self, operation: str, *args):
        """Apply a QuizDraft operation by name, e.g. edit("update_option", 0, 1, "Yes")."""
        self._require_view(AdminView.EDIT)
        new_draft = getattr(self.draft, operation)(*args)
        if new_draft is not self.draft:
            self.undo_stack.append(self.draft)
            self.redo_stack = []
            self.draft = new_draft
        return self.draft

    def undo(self):
        if self.undo_stack:
            self.redo_stack.append(self.draft)
            self.draft = self.undo_stack.pop()
        return self.draft

    def redo(self):
        if self.redo_stack:
            self.undo_stack.append(self.draft)
            self.draft = self.redo_stack.pop()
        return self.draft

    async def save(self) -> bool:
        self._require_view(AdminView.EDIT)
        payload = self.draft.with_suggested_slug().to_payload()
        try:
            if self.current_quiz:
                await self.api.update_quiz(self.current_quiz["_id"], payload)
            else:
                await self.api.create_quiz(payload)
        except (QuizApiError, aiohttp.ClientError) as e:
            logger.warning(f"Saving quiz failed: {e}")
            self.error = str(e)
            return False

        self.back_to_list()
        await self.load_quizzes()
        return True

    async def delete_quiz(self, quiz_id: str, confirm) -> bool:
        if not confirm("Are you sure you want to delete this quiz?"):
            return False
        try:
            await self.api.delete_quiz(quiz_id)
        except (QuizApiError, aiohttp.ClientError) as e:
            self.error = str(e)
            return False
        await self.load_quizzes()
        return True

    async def view_responses(self, quiz: dict):
        self.current_quiz = quiz
        self.view = AdminView.RESPONSES
        try:
            self.responses = await self.api.get_quiz_responses(quiz["_id"])
        except (QuizApiError, aiohttp.ClientError) as e:
            self.responses = []
            self.error = str(e)

    async def delete_response(self, response_id: str, confirm) -> bool:
        self._require_view(AdminView.RESPONSES)
        if not confirm("Are you sure you want to delete this response?"):
            return False
        try:
            await self.api.delete_response(response_id)
        except (QuizApiError, aiohttp.ClientError) as e:
            self.error = str(e)
            return False
        self.responses = [response for response in self.responses if response["_id"] != response_id]
        return True

    def back_to_list(self):
        self.view = AdminView.LIST
        self.current_quiz = None
        self.responses = []
        self.reset_form()

    def _require_view(self, view: AdminView):
        if self.view != view:
            raise RuntimeError(f"Admin panel is showing '{self.view.value}'")
