import logging
import os
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_exception_handlers
from backend_fastapi.api.routes.posts import router as posts_router
from backend_fastapi.api.routes.tasks import router as tasks_router

# Load environment variables from .env file
load_dotenv()

# uvicorn only configures its own loggers; application modules log through root.
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "info").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="Tasks & Posts API")

# Configure CORS for frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "*")
if cors_origins == "*":
    origins = ["*"]
else:
    origins = [origin.strip() for origin in cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
    allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
)

register_exception_handlers(app)

api_prefix = os.getenv("API_PREFIX", "").rstrip("/")
app.include_router(tasks_router, prefix=api_prefix)
app.include_router(posts_router, prefix=api_prefix)
