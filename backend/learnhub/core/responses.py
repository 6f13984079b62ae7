from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from fastapi.responses import JSONResponse

from learnhub.config import settings


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Make a stored document JSON friendly (ObjectId -> str, datetime -> ISO)."""
    serialized = {}
    for key, value in document.items():
        if isinstance(value, ObjectId):
            serialized[key] = str(value)
        elif isinstance(value, datetime):
            # Stored timestamps are UTC
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            serialized[key] = value.isoformat()
        elif isinstance(value, dict):
            serialized[key] = serialize_document(value)
        else:
            serialized[key] = value
    return serialized


def error_response(
    status_code: int,
    message: str,
    error: Optional[str] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "message": message}
    if error and settings.EXPOSE_ERROR_DETAILS:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)
