"""Agent modules for the AI companion."""

from .composer import ResponseComposer, response_composer, compose, classify_intent
from .conversation_state import ConversationState, initial_state

__all__ = [
    "ResponseComposer",
    "response_composer",
    "compose",
    "classify_intent",
    "ConversationState",
    "initial_state",
]
