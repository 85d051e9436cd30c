import logging
import os
import smtplib
from datetime import datetime, timezone
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate

import pytz
from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.concurrency import run_in_threadpool

from config import config
from model.response_model import NotificationResult

logger = logging.getLogger("quiz_app.email")

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates", "email")
templates = Environment(loader=FileSystemLoader(TEMPLATE_DIR), autoescape=select_autoescape(["html"]))

CONTACT_LABELS = [("name", "Name"), ("email", "Email"), ("phone", "Phone"), ("company", "Company")]


def generate_response_summary(answers) -> str:
    blocks = []
    for answer in answers:
        value = answer.get("answer")
        if isinstance(value, list):
            value = ", ".join(map(str, value))
        blocks.append(f"\n## {answer.get('questionText')}\n{value}\n")
    return "\n".join(blocks)


def format_submitted_on(created_at) -> str:
    if created_at is None:
        created_at = datetime.now(timezone.utc)
    if created_at.tzinfo is None:
        created_at = pytz.utc.localize(created_at)
    time_zone = pytz.timezone(config.TIME_ZONE)
    return created_at.astimezone(time_zone).strftime('%d-%m-%Y %H:%M:%S')


def render_confirmation(quiz_title: str, response: dict) -> str:
    return templates.get_template("confirmation.html").render(
        quiz_title=quiz_title,
        submitted_on=format_submitted_on(response.get("createdAt")),
        summary=generate_response_summary(response.get("answers", [])),
    )


def render_admin_notification(quiz_title: str, response: dict) -> str:
    contact_info = response.get("contactInfo") or {}
    contact_rows = [(label, contact_info[key]) for key, label in CONTACT_LABELS if contact_info.get(key)]
    return templates.get_template("admin_notification.html").render(
        quiz_title=quiz_title,
        submitted_on=format_submitted_on(response.get("createdAt")),
        contact_rows=contact_rows,
        summary=generate_response_summary(response.get("answers", [])),
    )


def send_email(to_email: str, subject: str, html_content: str):
    """
    Send an HTML email through the configured SMTP server.

    Raises whatever smtplib raises; callers decide whether a failure matters.
    """
    msg = MIMEMultipart()
    msg['From'] = config.EMAIL_FROM
    msg['To'] = to_email
    msg['Subject'] = subject
    msg['Date'] = formatdate(localtime=True)
    msg.attach(MIMEText(html_content, 'html'))

    with smtplib.SMTP(config.SMTP_HOST, config.SMTP_PORT) as server:
        if config.SMTP_USE_TLS:
            server.starttls()
        if config.SMTP_USER:
            server.login(config.SMTP_USER, config.SMTP_PASS)
        server.sendmail(config.EMAIL_FROM, [to_email], msg.as_string())


async def deliver(to_email: str, subject: str, render, *args) -> NotificationResult:
    try:
        html_content = render(*args)
        await run_in_threadpool(send_email, to_email, subject, html_content)
    except Exception as e:
        logger.error(f"Failed to send email '{subject}' to {to_email}: {e}")
        return NotificationResult(status="failed", reason=str(e))
    return NotificationResult(status="sent")


async def send_user_confirmation_email(email: str, quiz_title: str, response: dict) -> NotificationResult:
    result = await deliver(email, f"Confirmation: {quiz_title}", render_confirmation, quiz_title, response)
    if result.sent:
        logger.info(f"Confirmation email sent to {email}")
    return result


async def send_admin_notification_email(quiz_title: str, response: dict) -> NotificationResult:
    result = await deliver(
        config.ADMIN_EMAIL,
        f"New Quiz Response: {quiz_title}",
        render_admin_notification,
        quiz_title,
        response,
    )
    if result.sent:
        logger.info("Admin notification email sent")
    return result
