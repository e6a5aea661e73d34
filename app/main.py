import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings
from app.api.todo.routes import router as todo_router
from app.api.todo.label.routes import router as label_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

VALIDATION_ERROR_TYPES = {"string_too_short", "string_too_long"}

app = FastAPI()

# Routers
app.include_router(todo_router, prefix="/todos", tags=["Todos"])
app.include_router(label_router, prefix="/labels", tags=["Labels"])


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed or invalid request bodies with 400 and a one-line message."""
    errors = exc.errors()
    details = ", ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in errors
    ).replace("\n", ", ")
    if any(error["loc"][0] != "body" for error in errors):
        message = f"Path parse error: [{details}]"
    elif all(error["type"] in VALIDATION_ERROR_TYPES for error in errors):
        # body deserialized fine, only field rules failed
        message = f"Validation error: [{details}]"
    else:
        message = f"Json parse error: [{details}]"
    logging.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"detail": message})


@app.get("/ping")
def ping():
    return {"message": "pong"}
