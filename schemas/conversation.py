"""Conversation schemas."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ChatMessage(BaseModel):
    """A single chat bubble. History is ordered oldest first."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"] = Field(..., description="Message role")
    content: str = Field(..., min_length=1, description="Message content")
    timestamp: Optional[int] = Field(
        default=None, ge=0, description="Creation time in epoch milliseconds"
    )


class ConversationSettings(BaseModel):
    """Persona configuration chosen by the user."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_name: str = Field(default="", alias="userName", description="How the companion addresses the user")
    ai_name: str = Field(default="", alias="aiName", description="The companion's name")
    # Free text so unknown keys reach the composer and fall back to the default persona
    persona: str = Field(default="romantic", description="Persona key")
    energy: int = Field(default=68, ge=10, le=100, description="Phrasing intensity")
    scenario: str = Field(default="", description="Shared setting for the conversation")
    custom_flair: str = Field(default="", alias="customFlair", description="Signature phrase")


class RespondRequest(BaseModel):
    """Body of POST /api/respond."""

    messages: List[ChatMessage] = Field(..., min_length=1)
    settings: ConversationSettings

    @field_validator("messages")
    @classmethod
    def validate_timestamps(cls, v: List[ChatMessage]) -> List[ChatMessage]:
        """Timestamps, where present, must not go backwards."""
        last = None
        for message in v:
            if message.timestamp is None:
                continue
            if last is not None and message.timestamp < last:
                raise ValueError("message timestamps must be non-decreasing")
            last = message.timestamp
        return v

    @model_validator(mode="after")
    def validate_last_turn(self) -> "RespondRequest":
        """The newest message must be a non-blank user turn."""
        last = self.messages[-1]
        if last.role != "user" or not last.content.strip():
            raise ValueError("last message must be a non-empty user message")
        return self


class RespondResponse(BaseModel):
    """Successful reply."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned by the API."""

    error: str


class PersonaSummarySchema(BaseModel):
    """Persona fields shown in the settings form."""

    key: str
    label: str
    tone: str
    description: str
