import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from config import config
from config.config import ensure_indexes
from routes import init_routes
from utils.errors import QuizAppError
from utils.logger import set_logger

logger, console_handler = set_logger(log_file=config.LOG_FILE)

app = FastAPI(title="Quiz API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
init_routes(app)


def format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "; ".join(messages)


@app.on_event("startup")
async def on_startup():
    try:
        await config.client.admin.command('ping')
        await ensure_indexes(config.db)
        logger.info("Connected to MongoDB")
    except Exception as e:
        logger.error(f"MongoDB connection error: {e}")


@app.exception_handler(QuizAppError)
async def quiz_app_error_handler(request: Request, exc: QuizAppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": format_validation_errors(exc)})


@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} failed")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def start_fastapi():
    uvicorn.run(
        "quiz_app:app",
        host="0.0.0.0",
        port=config.PORT,
        log_level="info",
    )


if __name__ == "__main__":
    start_fastapi()
