from model.quiz_model import QuizIn
from utils.errors import ValidationError


def validate_quiz_data(quiz: QuizIn):
    if not quiz.title or quiz.title.strip() == "":
        raise ValidationError("Quiz title is required")

    seen_ids = set()
    for idx, question in enumerate(quiz.questions):
        if not question.question.strip():
            raise ValidationError(f"Question {idx + 1} text is required")
        if question.id in seen_ids:
            raise ValidationError(f"Duplicate question id: {question.id}")
        seen_ids.add(question.id)
