from typing import List, Literal
from pydantic import Field
from model.base_model import CamelModel

QuestionType = Literal['text', 'textarea', 'radio', 'checkbox', 'select', 'scale', 'date', 'email']
CHOICE_TYPES = ('radio', 'checkbox', 'select')


class ScaleLabels(CamelModel):
    left: str = ''
    right: str = ''


class QuestionModel(CamelModel):
    id: str = Field(min_length=1)
    type: QuestionType
    question: str = Field(min_length=1)
    description: str = ''
    required: bool = False
    options: List[str] = []
    min_length: int = 0
    max_length: int = 0
    min_value: int = 0
    max_value: int = 10
    scale_labels: ScaleLabels = ScaleLabels()
    order: int = 0
