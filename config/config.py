import os
from urllib.parse import urlparse
from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv
import asyncio

load_dotenv()

uri = os.environ.get('MONGODB_URI', 'mongodb://localhost:27017/quiz_db')
db_name = os.environ.get('MONGODB_DB') or urlparse(uri).path.lstrip('/') or 'quiz_db'

PORT = int(os.environ.get('PORT', 3001))
API_URL = os.environ.get('API_URL', f'http://localhost:{PORT}/api')
LOG_FILE = os.environ.get('LOG_FILE')
TIME_ZONE = os.environ.get('TIME_ZONE', 'UTC')

SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.example.com')
SMTP_PORT = int(os.environ.get('SMTP_PORT', 587))
SMTP_USER = os.environ.get('SMTP_USER')
SMTP_PASS = os.environ.get('SMTP_PASS')
SMTP_USE_TLS = os.environ.get('SMTP_USE_TLS', 'true').lower() in ('1', 'true', 'yes')
EMAIL_FROM = os.environ.get('EMAIL_FROM', '"Quiz System" <noreply@example.com>')
ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@example.com')

client = AsyncIOMotorClient(uri, tz_aware=True)
client.get_io_loop = asyncio.get_event_loop

db = client[db_name]
quiz_collection = db['Quizzes']
response_collection = db['Responses']


def get_db():
    return db


async def ensure_indexes(database):
    await database['Quizzes'].create_index('slug', unique=True)
    await database['Responses'].create_index([('quizId', 1), ('createdAt', -1)])
