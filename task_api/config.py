from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from repo root and package .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")
load_dotenv(Path(__file__).resolve().parent / ".env")

SERVER_TYPE = os.getenv("SERVER_TYPE", "development")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MONGO_HOST = os.getenv("MONGO_HOST", "mongodb://127.0.0.1:27017")
MONGO_DBNAME = os.getenv("MONGO_DBNAME", "task_manager")
MONGO_USERNAME = os.getenv("MONGO_USERNAME", "")
MONGO_PASSWORD = os.getenv("MONGO_PASSWORD", "")
MONGO_APP_NAME = os.getenv("MONGO_APP_NAME", "task-manager-api")
# Seconds
MONGO_CONNECT_TIMEOUT = float(os.getenv("MONGO_CONNECT_TIMEOUT", "10"))
MONGO_DEFAULT_TIMEOUT = float(os.getenv("MONGO_DEFAULT_TIMEOUT", "5"))

TASKS_COLLECTION = os.getenv("TASKS_COLLECTION", "tasks")
COMMENTS_COLLECTION = os.getenv("COMMENTS_COLLECTION", "comments")
PROFILES_COLLECTION = os.getenv("PROFILES_COLLECTION", "profiles")

PAGINATION_MAX_LIMIT = int(os.getenv("PAGINATION_MAX_LIMIT", "100"))
MAX_GET_PROFILE_LIMIT = int(os.getenv("MAX_GET_PROFILE_LIMIT", "100"))

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]
