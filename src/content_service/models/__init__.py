from .file import BLOB_FIELD, FileRecord, FileResponse, FileUpdate
from .responses import ErrorResponse, MessageResponse, UploadResponse

__all__ = [
    "BLOB_FIELD",
    "ErrorResponse",
    "FileRecord",
    "FileResponse",
    "FileUpdate",
    "MessageResponse",
    "UploadResponse",
]
