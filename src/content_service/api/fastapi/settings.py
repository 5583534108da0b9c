from pydantic import BaseModel

ALLOWED_METHODS = ["GET", "HEAD", "POST", "PUT", "OPTIONS", "DELETE"]
ALLOWED_HEADERS = ["X-Requested-With", "Access-Control-Allow-Origin", "Content-Type", "Authorization"]


class ApiConfig(BaseModel):
    cors_origins: list[str] | None = None
    cors_methods: list[str] = ALLOWED_METHODS
    cors_headers: list[str] = ALLOWED_HEADERS
