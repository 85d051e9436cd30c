from fastapi import APIRouter, Request
from fastapi.params import Depends
from config.config import get_db
from model.response_model import SubmissionIn
from services import response_service

response_router = APIRouter(prefix="/api/responses")


@response_router.post("/", status_code=201)
async def submit_response(submission: SubmissionIn, request: Request, db=Depends(get_db)):
    response_id = await response_service.submit_response(
        db,
        submission,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    return {"message": "Response submitted successfully", "responseId": response_id}


@response_router.get("/")
async def get_all_responses(db=Depends(get_db)):
    return await response_service.list_all_responses(db)


@response_router.get("/quiz/{quiz_id}")
async def get_quiz_responses(quiz_id: str, db=Depends(get_db)):
    return await response_service.list_quiz_responses(db, quiz_id)


@response_router.get("/stats/{quiz_id}")
async def get_response_stats(quiz_id: str, db=Depends(get_db)):
    return await response_service.get_response_stats(db, quiz_id)


@response_router.get("/{response_id}")
async def get_response_by_id(response_id: str, db=Depends(get_db)):
    return await response_service.get_response_by_id(db, response_id)


@response_router.delete("/{response_id}")
async def delete_response(response_id: str, db=Depends(get_db)):
    await response_service.delete_response(db, response_id)
    return {"message": "Response deleted successfully"}
