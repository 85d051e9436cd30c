from typing import Optional, Tuple
from model.base_model import CamelModel
from model.question_model import QuestionType, ScaleLabels
from model.settings_model import ContactField, SettingsModel
from utils.generate_unique_id import generate_question_id, slugify

QUIZ_FIELDS = ("title", "description", "slug")


class ScaleLabelsDraft(ScaleLabels):
    class Config:
        frozen = True


class SettingsDraft(SettingsModel):
    contact_fields: Tuple[ContactField, ...] = ()

    class Config:
        frozen = True


class QuestionDraft(CamelModel):
    id: str
    type: QuestionType = "text"
    question: str = ""
    description: str = ""
    required: bool = False
    options: Tuple[str, ...] = ()
    min_length: int = 0
    max_length: int = 0
    min_value: int = 0
    max_value: int = 10
    scale_labels: ScaleLabelsDraft = ScaleLabelsDraft()
    order: int = 0

    class Config:
        frozen = True

    def replace(self, **changes):
        return type(self).model_validate({**self.model_dump(), **changes})


class QuizDraft(CamelModel):
    """
    Snapshot of the admin form.

    Every editing method returns a new, validated draft and leaves the original
    untouched, so callers can keep older snapshots around for undo.
    """
    title: str = ""
    description: str = ""
    slug: str = ""
    questions: Tuple[QuestionDraft, ...] = ()
    settings: SettingsDraft = SettingsDraft(contact_fields=("name", "email"))
    revision: Optional[int] = None

    class Config:
        frozen = True

    @classmethod
    def from_quiz(cls, quiz: dict):
        return cls.model_validate({
            "title": quiz.get("title", ""),
            "description": quiz.get("description", ""),
            "slug": quiz.get("slug", ""),
            "questions": quiz.get("questions", []),
            "settings": quiz.get("settings") or {},
            "revision": quiz.get("revision"),
        })

    def replace(self, **changes):
        return type(self).model_validate({**self.model_dump(), **changes})

    def set_field(self, name: str, value: str):
        if name not in QUIZ_FIELDS:
            raise KeyError(name)
        return self.replace(**{name: value})

    def with_suggested_slug(self):
        if self.slug.strip() or not self.title.strip():
            return self
        return self.replace(slug=slugify(self.title))

    def set_setting(self, name: str, value):
        if name not in SettingsDraft.model_fields:
            raise KeyError(name)
        return self.replace(settings={**self.settings.model_dump(), name: value})

    def add_question(self):
        question = QuestionDraft(id=generate_question_id(), order=len(self.questions))
        return self.replace(questions=self.questions + (question,))

    def update_question(self, index: int, field: str, value):
        if field not in QuestionDraft.model_fields or field == "id":
            raise KeyError(field)
        return self._replace_question(index, self.questions[index].replace(**{field: value}))

    def remove_question(self, index: int):
        if not 0 <= index < len(self.questions):
            raise IndexError(index)
        return self.replace(questions=self.questions[:index] + self.questions[index + 1:])

    def add_option(self, question_index: int):
        question = self.questions[question_index]
        return self._replace_question(question_index, question.replace(options=question.options + ("",)))

    def update_option(self, question_index: int, option_index: int, value: str):
        question = self.questions[question_index]
        options = list(question.options)
        options[option_index] = value
        return self._replace_question(question_index, question.replace(options=options))

    def remove_option(self, question_index: int, option_index: int):
        question = self.questions[question_index]
        options = list(question.options)
        del options[option_index]
        return self._replace_question(question_index, question.replace(options=options))

    def _replace_question(self, index: int, question: QuestionDraft):
        questions = list(self.questions)
        questions[index] = question
        return self.replace(questions=questions)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
