# app/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from app.routes import staff_router, vehicle_router
from app.database import connect_to_mongo, close_mongo_connection, init_db
from app.errors import RecordNotFound, ValidationFailure, create_error_response
from app.config import get_settings
from app.utils.logger import get_logger

settings = get_settings()
logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_mongo()
    await init_db()
    yield
    # Shutdown
    await close_mongo_connection()

app = FastAPI(title="HR Management", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(staff_router, prefix=settings.API_PREFIX, tags=["staff"])
app.include_router(vehicle_router, prefix=settings.API_PREFIX, tags=["vehicles"])

@app.exception_handler(ValidationFailure)
async def validation_failure_handler(request: Request, exc: ValidationFailure):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.details or exc.message)
    return JSONResponse(status_code=400, content=create_error_response(exc.message, exc.details))

@app.exception_handler(RecordNotFound)
async def record_not_found_handler(request: Request, exc: RecordNotFound):
    return JSONResponse(status_code=404, content=create_error_response(exc.message, exc.details))

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.warning("%s %s rejected: %s", request.method, request.url.path, details)
    return JSONResponse(status_code=400, content=create_error_response("Validation failed", details))

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Route errors already carry {message, details}; plain ones are wrapped
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = create_error_response(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))

@app.get("/")
async def root():
    return {"message": "Welcome to the HR Management API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
