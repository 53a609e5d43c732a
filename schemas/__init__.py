"""
Pydantic schemas for type-safe data transfer.
"""

from schemas.conversation import (
    ChatMessage,
    ConversationSettings,
    RespondRequest,
    RespondResponse,
    ErrorResponse,
    PersonaSummarySchema,
)

__all__ = [
    "ChatMessage",
    "ConversationSettings",
    "RespondRequest",
    "RespondResponse",
    "ErrorResponse",
    "PersonaSummarySchema",
]
