import asyncio
import logging
from config import config
from config.config import ensure_indexes
from model.quiz_model import QuizIn
from services import quiz_service
from utils.errors import ValidationError
from utils.logger import set_logger

logger = logging.getLogger("quiz_app.seed")

SAMPLE_QUIZ = {
    "title": "Customer Feedback Form",
    "description": "Help us improve our products and services by sharing your feedback.",
    "slug": "feedback-form",
    "questions": [
        {
            "id": "q1",
            "type": "scale",
            "question": "How satisfied are you with our overall service?",
            "description": "Rate from 1 (not satisfied) to 10 (very satisfied)",
            "required": True,
            "scaleLabels": {"left": "Not satisfied", "right": "Very satisfied"},
        },
        {
            "id": "q2",
            "type": "radio",
            "question": "How often do you use our product?",
            "required": True,
            "options": ["Daily", "Weekly", "Monthly", "Rarely", "First time"],
        },
        {
            "id": "q3",
            "type": "checkbox",
            "question": "Which features do you use most?",
            "options": ["Dashboard", "Reports", "Analytics", "Integrations", "Mobile App"],
        },
        {
            "id": "q4",
            "type": "select",
            "question": "How would you rate the ease of use?",
            "required": True,
            "options": ["Very Easy", "Easy", "Neutral", "Difficult", "Very Difficult"],
        },
        {
            "id": "q5",
            "type": "textarea",
            "question": "What could we improve?",
            "description": "Share your suggestions for improvement",
            "maxLength": 1000,
        },
        {
            "id": "q6",
            "type": "text",
            "question": "What is your favorite feature?",
        },
    ],
    "settings": {
        "showProgressBar": True,
        "allowAnonymous": True,
        "sendConfirmationEmail": True,
        "requireContactInfo": True,
        "contactFields": ["name", "email", "company"],
    },
}


async def seed_database(db):
    await ensure_indexes(db)
    try:
        quiz = await quiz_service.create_quiz(db, QuizIn.model_validate(SAMPLE_QUIZ))
    except ValidationError:
        logger.info("Sample quiz already exists")
        return None
    logger.info(f"Sample quiz created: /quiz/{quiz['slug']}")
    return quiz


if __name__ == "__main__":
    set_logger(log_file=config.LOG_FILE)
    asyncio.run(seed_database(config.db))
