from fastapi import APIRouter
from fastapi.params import Depends
from config.config import get_db
from model.quiz_model import QuizIn
from services import quiz_service

quiz_router = APIRouter(prefix="/api/quizzes")


@quiz_router.get("/")
async def get_all_quizzes(db=Depends(get_db)):
    return await quiz_service.list_public_quizzes(db)


@quiz_router.get("/slug/{slug}")
async def get_quiz_by_slug(slug: str, db=Depends(get_db)):
    return await quiz_service.get_quiz_by_slug(db, slug)


@quiz_router.get("/admin/all")
async def get_all_quizzes_admin(db=Depends(get_db)):
    return await quiz_service.list_admin_quizzes(db)


@quiz_router.get("/admin/{quiz_id}")
async def get_quiz_by_id(quiz_id: str, db=Depends(get_db)):
    return await quiz_service.get_quiz_by_id(db, quiz_id)


@quiz_router.post("/", status_code=201)
async def create_quiz(quiz: QuizIn, db=Depends(get_db)):
    return await quiz_service.create_quiz(db, quiz)


@quiz_router.put("/{quiz_id}")
async def update_quiz(quiz_id: str, quiz: QuizIn, db=Depends(get_db)):
    return await quiz_service.update_quiz(db, quiz_id, quiz)


@quiz_router.delete("/{quiz_id}")
async def delete_quiz(quiz_id: str, db=Depends(get_db)):
    await quiz_service.soft_delete_quiz(db, quiz_id)
    return {"message": "Quiz deleted successfully"}
