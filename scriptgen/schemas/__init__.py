from .generate import (
    ErrorResponse,
    GenerateScriptRequest,
    GenerateScriptResponse,
    LeadInsights,
)
from .profile import EmploymentRecord, ProfileRecord

__all__ = [
    "ErrorResponse",
    "GenerateScriptRequest",
    "GenerateScriptResponse",
    "LeadInsights",
    "EmploymentRecord",
    "ProfileRecord",
]
