"""Environment configuration for the Todo API."""
import os
from dotenv import load_dotenv

# Load variables from a local .env file when present
load_dotenv()

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./todo_app.db")

DEFAULT_JWT_SECRET = "dev-jwt-secret-change-me"
JWT_SECRET = os.environ.get("JWT_SECRET", DEFAULT_JWT_SECRET)
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_IN = int(os.environ.get("JWT_EXPIRES_IN", "3600"))  # seconds

BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", "10"))

FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
