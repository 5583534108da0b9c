from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class UploadResponse(MessageResponse):
    id: str


class ErrorResponse(BaseModel):
    error: str
