from typing import Annotated, List, Literal, Union
from pydantic import Field
from model.base_model import CamelModel


class ScalarAnswerIn(CamelModel):
    question_id: str
    type: Literal['text', 'textarea', 'radio', 'select', 'scale', 'date', 'email']
    answer: str

    class Config:
        coerce_numbers_to_str = True


class CheckboxAnswerIn(CamelModel):
    question_id: str
    type: Literal['checkbox']
    answer: List[str]


AnswerIn = Annotated[Union[ScalarAnswerIn, CheckboxAnswerIn], Field(discriminator='type')]


class AnswerModel(CamelModel):
    question_id: str
    question_text: str
    answer: Union[str, List[str]]
    type: str
