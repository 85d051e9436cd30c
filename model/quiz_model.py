from datetime import datetime
from typing import List, Optional
from pydantic import Field
from model.base_model import CamelModel
from model.question_model import QuestionModel
from model.settings_model import SettingsModel

SLUG_PATTERN = r'^[A-Za-z0-9_-]+$'


class QuizIn(CamelModel):
    title: str = Field(min_length=1)
    description: str = ''
    slug: str = Field(min_length=1, pattern=SLUG_PATTERN)
    questions: List[QuestionModel] = []
    settings: SettingsModel = SettingsModel()
    is_active: Optional[bool] = None
    created_by: str = 'admin'
    revision: Optional[int] = None


class QuizModel(CamelModel):
    title: str
    description: str = ''
    slug: str
    questions: List[QuestionModel] = []
    settings: SettingsModel = SettingsModel()
    is_active: bool = True
    created_by: str = 'admin'
    revision: int = 1
    created_at: datetime
    updated_at: datetime
