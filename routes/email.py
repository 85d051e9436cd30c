from datetime import datetime, timezone
from typing import Any, List, Optional
from fastapi import APIRouter
from pydantic import Field
from model.base_model import CamelModel
from model.response_model import ContactInfo
from services import email_service
from utils.errors import QuizAppError

email_router = APIRouter(prefix="/api/email")


class SampleAnswer(CamelModel):
    question_id: Optional[str] = None
    question_text: str = ""
    answer: Any = None
    type: Optional[str] = None


class SampleResponseData(CamelModel):
    answers: List[SampleAnswer] = []
    contact_info: Optional[ContactInfo] = None


class EmailTestIn(CamelModel):
    email: str = Field(min_length=1)
    quiz_title: str = "Test Quiz"
    response_data: Optional[SampleResponseData] = None


@email_router.post("/test")
async def send_test_email(payload: EmailTestIn):
    response_data = (payload.response_data or SampleResponseData()).to_document(exclude_none=True)
    now = datetime.now(timezone.utc)
    mock_response = {
        "_id": f"test-{int(now.timestamp() * 1000)}",
        "createdAt": now,
        "answers": response_data["answers"],
        "contactInfo": response_data.get("contactInfo") or {},
    }

    result = await email_service.send_user_confirmation_email(payload.email, payload.quiz_title, mock_response)
    if not result.sent:
        raise QuizAppError(result.reason or "Failed to send test email")
    return {"message": "Test email sent successfully"}
