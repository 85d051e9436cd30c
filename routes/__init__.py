from fastapi import FastAPI
from .main import main_router
from .quiz import quiz_router
from .response import response_router
from .email import email_router

def init_routes(app: FastAPI):
    app.include_router(main_router)
    app.include_router(quiz_router)
    app.include_router(response_router)
    app.include_router(email_router)
