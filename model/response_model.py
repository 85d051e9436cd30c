from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field
from model.PyId import PyObjectId
from model.base_model import CamelModel
from model.answer_model import AnswerIn, AnswerModel


class ContactInfo(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None


class RequestMetadata(CamelModel):
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    submitted_at: datetime


class NotificationResult(CamelModel):
    status: Literal['sent', 'failed', 'skipped'] = 'skipped'
    reason: Optional[str] = None

    @property
    def sent(self):
        return self.status == 'sent'


class Notifications(CamelModel):
    user: NotificationResult = NotificationResult()
    admin: NotificationResult = NotificationResult()


class SubmissionIn(CamelModel):
    quiz_id: str
    answers: List[AnswerIn] = []
    contact_info: Optional[ContactInfo] = None


class ResponseModel(CamelModel):
    quiz_id: PyObjectId
    quiz_slug: str
    answers: List[AnswerModel] = []
    contact_info: Optional[ContactInfo] = None
    metadata: RequestMetadata
    admin_notified: bool = False
    user_email_sent: bool = False
    notifications: Notifications = Field(default_factory=Notifications)
    created_at: datetime
    updated_at: datetime

    class Config:
        arbitrary_types_allowed = True
