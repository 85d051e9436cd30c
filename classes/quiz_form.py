import logging
from enum import Enum
import aiohttp
from model.question_model import QuestionModel
from model.settings_model import SettingsModel
from utils.quiz_api import QuizApiError

logger = logging.getLogger("quiz_app.form")

SCALE_MIN = 1
SCALE_MAX = 10


class FormState(str, Enum):
    LOADING = "loading"
    QUESTION = "question"
    CONTACT = "contact"
    SUBMITTING = "submitting"
    COMPLETED = "completed"
    ERROR = "error"


class FormPrompt(Exception):
    """A message shown to the respondent; the form stays where it was."""


class QuizForm:
    def __init__(self, api, slug: str):
        self.api = api
        self.slug = slug
        self.quiz = None
        self.questions = []
        self.settings = SettingsModel()
        self.answers = {}
        self.contact_info = {}
        self.current_step = 0
        self.state = FormState.LOADING
        self.error = None
        self.response_id = None

    async def load(self):
        try:
            self.quiz = await self.api.get_quiz_by_slug(self.slug)
        except (QuizApiError, aiohttp.ClientError) as e:
            logger.warning(f"Could not load quiz {self.slug}: {e}")
            self.state = FormState.ERROR
            self.error = "Quiz not found"
            return

        self.questions = [QuestionModel.model_validate(question) for question in self.quiz.get("questions", [])]
        self.settings = SettingsModel.model_validate(self.quiz.get("settings") or {})
        self.state = FormState.QUESTION
        if not self.questions and self.settings.require_contact_info:
            self.state = FormState.CONTACT

    @property
    def current_question(self):
        if self.state != FormState.QUESTION or self.current_step >= len(self.questions):
            return None
        return self.questions[self.current_step]

    @property
    def progress(self) -> float:
        offset = 1 if self.state in (FormState.CONTACT, FormState.SUBMITTING, FormState.COMPLETED) else 0
        return (self.current_step + offset) / (len(self.questions) + 1)

    @property
    def confirmation_email(self):
        if self.state == FormState.COMPLETED and self.settings.send_confirmation_email:
            return self.contact_info.get("email") or None
        return None

    def _require_state(self, *states):
        if self.state not in states:
            raise RuntimeError(f"Form is in state '{self.state.value}'")

    def set_answer(self, value):
        self._require_state(FormState.QUESTION)
        question = self.current_question
        if question is None:
            raise RuntimeError("No question on this step")
        self.answers[question.id] = normalize_answer(question, value)

    def toggle_option(self, option: str):
        self._require_state(FormState.QUESTION)
        question = self.current_question
        if question is None or question.type != "checkbox":
            raise RuntimeError("Current question is not a checkbox question")
        if option not in question.options:
            raise FormPrompt(f"'{option}' is not one of the options.")

        current = list(self.answers.get(question.id, []))
        if option in current:
            current.remove(option)
        else:
            current.append(option)
        self.answers[question.id] = current

    def set_contact(self, field: str, value: str):
        self.contact_info[field] = value

    def validate_current_step(self) -> bool:
        question = self.current_question
        if question is None or not question.required:
            return True
        return has_value(self.answers.get(question.id))

    async def next(self):
        self._require_state(FormState.QUESTION)
        if not self.validate_current_step():
            raise FormPrompt("Please answer this question before continuing.")

        if self.current_step + 1 < len(self.questions):
            self.current_step += 1
            return

        self.current_step = len(self.questions)
        if self.settings.require_contact_info:
            self.state = FormState.CONTACT
        else:
            await self._send()

    def previous(self):
        self._require_state(FormState.QUESTION, FormState.CONTACT)
        if self.state == FormState.CONTACT:
            if not self.questions:
                return
            self.state = FormState.QUESTION
        elif self.current_step == 0:
            return
        self.current_step -= 1

    async def submit(self):
        self._require_state(FormState.CONTACT)
        for field in self.settings.contact_fields:
            if not (self.contact_info.get(field) or "").strip():
                raise FormPrompt(f"Please fill in your {field}.")
        await self._send()

    def collect_answers(self):
        answers = []
        for question in self.questions:
            value = self.answers.get(question.id)
            if not has_value(value):
                continue
            answers.append({"questionId": question.id, "type": question.type, "answer": value})
        return answers

    async def _send(self):
        self.state = FormState.SUBMITTING
        try:
            result = await self.api.submit_response(self.quiz["_id"], self.collect_answers(), self.contact_info)
        except (QuizApiError, aiohttp.ClientError) as e:
            logger.error(f"Submitting response for {self.slug} failed: {e}")
            self.state = FormState.ERROR
            self.error = "Failed to submit response"
            return

        self.response_id = result.get("responseId")
        self.state = FormState.COMPLETED


def has_value(value) -> bool:
    if isinstance(value, list):
        return len(value) > 0
    return value is not None and str(value).strip() != ""


def normalize_answer(question: QuestionModel, value):
    match question.type:
        case "checkbox":
            if isinstance(value, str):
                value = [value]
            chosen = list(value)
            unknown = [option for option in chosen if option not in question.options]
            if unknown:
                raise FormPrompt(f"'{unknown[0]}' is not one of the options.")
            return chosen
        case "radio" | "select":
            if value and value not in question.options:
                raise FormPrompt(f"'{value}' is not one of the options.")
            return value
        case "scale":
            if value in (None, ""):
                return ""
            try:
                number = int(value)
            except (TypeError, ValueError):
                raise FormPrompt(f"Pick a number from {SCALE_MIN} to {SCALE_MAX}.")
            if not SCALE_MIN <= number <= SCALE_MAX:
                raise FormPrompt(f"Pick a number from {SCALE_MIN} to {SCALE_MAX}.")
            return str(number)
        case "text" | "textarea" | "email" | "date":
            return "" if value is None else str(value)
        case _:
            raise ValueError(f"Unsupported question type: {question.type}")
