"""
Response envelope shared by every API route.
"""
from typing import Any, Dict, List, Optional

from worklog.utils.datetime_handler import DateTimeHandler


def success_response(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    """
    Build a success envelope.

    Args:
        data: Response payload
        message: Additional information about the response

    Returns:
        Envelope dict
    """
    return {"status": "success", "data": data, "message": message}


def error_response(message: str, code: Optional[str] = None, details: Optional[List[Any]] = None) -> Dict[str, Any]:
    """
    Build an error envelope.

    Args:
        message: Error message
        code: Machine-readable error code
        details: Per-field validation problems

    Returns:
        Envelope dict
    """
    error: Dict[str, Any] = {"message": message, "code": code}
    if details:
        error["details"] = details
    return {
        "status": "error",
        "error": error,
        "timestamp": DateTimeHandler.format_iso(DateTimeHandler.get_current_datetime()),
    }
