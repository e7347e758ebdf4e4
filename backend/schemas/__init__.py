from schemas.shared import SuccessResponse, MessageResponse, InsertResult, DeleteResult
from schemas.auth import IdentityClaim
from schemas.event import EventDocument
from schemas.user import UserProfile, RoleResponse

__all__ = [
    "SuccessResponse", "MessageResponse", "InsertResult", "DeleteResult",
    "IdentityClaim",
    "EventDocument",
    "UserProfile", "RoleResponse",
]
