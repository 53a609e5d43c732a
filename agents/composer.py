"""
Response Composer - picks, fills and shapes the companion's next reply.

No model call happens here. A reply is a pure function of the conversation
history and the active settings:

1. classify the latest user message into an intent
2. pick a template from the (persona, intent) bucket, skipping recent replies
3. fill in names, scenario and tone
4. scale punctuation and intensifiers to the energy level
5. append the signature phrase on every Nth assistant turn
"""

import hashlib
import random
import re
from string import Formatter
from typing import Dict, List, Optional, Pattern, Sequence, Tuple

from core import get_logger
from prompts.intents import INTENT_RULES
from prompts.personas import Intent, Persona, get_persona
from schemas import ChatMessage, ConversationSettings

logger = get_logger(__name__)

DEFAULT_REPETITION_WINDOW = 3
DEFAULT_FLAIR_INTERVAL = 4

# Energy bands (inclusive bounds, after clamping to [10, 100])
MIN_ENERGY = 10
MAX_ENERGY = 100
LOW_ENERGY_MAX = 33
HIGH_ENERGY_MIN = 67
DOUBLE_EXCLAIM_MIN = 90

LOW_SOFTENERS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"\breally\s+"), ""),
    (re.compile(r"\bso (?=glad|happy|fond)"), ""),
    (re.compile(r"\bdangerously\b"), "quietly"),
    (re.compile(r"\bOoh\b"), "Oh"),
)

HIGH_INTENSIFIERS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"\breally\b"), "truly"),
    (re.compile(r"(?<!so )(?<!truly )\b(glad|happy)\b"), r"so \1"),
    (re.compile(r"\bI love\b"), "I absolutely love"),
)

# A single "." closing a sentence; leaves ellipses and decimals alone
SENTENCE_STOP = re.compile(r"(?<![.\d])\.(?=\s|$)")

# Used when the latest turn carries nothing to respond to
FOLLOW_UP_TEMPLATES: Tuple[str, ...] = (
    "I am right here, {userName}, {tone} as always. Tell me a little more about what is on your mind.",
    "Take your time, {userName}. I am listening, {tone} as always. What would you like to share?",
    "I want to understand you, {tone} and patient. Could you tell me a bit more, {userName}?",
)

NAME_FALLBACK = "love"
AI_NAME_FALLBACK = "your companion"
SCENARIO_FALLBACK = "this moment"
OPENING_SCENE_FALLBACK = "soft moment just for us"

Segment = Tuple[str, bool]  # (text, is_user_supplied)


def classify_intent(text: str) -> Intent:
    """
    Classify a user message with the ordered intent rules.

    Args:
        text: Raw message content

    Returns:
        First matching intent, or Intent.GENERAL
    """
    normalized = text.strip().lower()
    for intent, patterns in INTENT_RULES:
        if any(pattern.search(normalized) for pattern in patterns):
            return intent
    return Intent.GENERAL


def clamp_energy(energy: int) -> int:
    return max(MIN_ENERGY, min(MAX_ENERGY, int(energy)))


def energy_band(energy: int) -> str:
    """Return "low", "mid" or "high" for an energy level."""
    level = clamp_energy(energy)
    if level <= LOW_ENERGY_MAX:
        return "low"
    if level >= HIGH_ENERGY_MIN:
        return "high"
    return "mid"


def _scale_literal(text: str, band: str) -> str:
    if band == "low":
        text = re.sub(r"\?!+", "?", text)
        text = re.sub(r"!+", ".", text)
        for pattern, replacement in LOW_SOFTENERS:
            text = pattern.sub(replacement, text)
    elif band == "high":
        for pattern, replacement in HIGH_INTENSIFIERS:
            text = pattern.sub(replacement, text)
        text = SENTENCE_STOP.sub("!", text)
    return text


def _scale_segments(segments: Sequence[Segment], energy: int) -> str:
    """
    Apply energy scaling to template text only.

    Segments filled in from user settings pass through untouched so a name or
    scenario is never rewritten.
    """
    band = energy_band(energy)
    scaled = [text if protected else _scale_literal(text, band) for text, protected in segments]

    if (
        clamp_energy(energy) >= DOUBLE_EXCLAIM_MIN
        and segments
        and not segments[-1][1]
        and scaled[-1].endswith("!")
        and not scaled[-1].endswith("!!")
    ):
        scaled[-1] += "!"
    return "".join(scaled)


def apply_energy(text: str, energy: int) -> str:
    """
    Scale punctuation and intensifiers of plain text to an energy level.

    Low energy (<= 33) calms exclamations into periods and drops intensifiers,
    mid energy leaves text as is, high energy (>= 67) turns sentence stops into
    exclamations and strengthens wording. At 90 and above the closing
    exclamation is doubled.
    """
    return _scale_segments([(text, False)], energy)


def _interpolation_values(settings: ConversationSettings, persona: Persona) -> Dict[str, str]:
    return {
        "userName": settings.user_name.strip() or NAME_FALLBACK,
        "aiName": settings.ai_name.strip() or AI_NAME_FALLBACK,
        "scenario": settings.scenario.strip().rstrip(".!? ") or SCENARIO_FALLBACK,
        "tone": persona.tone,
    }


def _interpolate(template: str, values: Dict[str, str]) -> List[Segment]:
    segments: List[Segment] = []
    for literal, name, _, _ in Formatter().parse(template):
        if literal:
            segments.append((literal, False))
        if name is not None:
            segments.append((values[name], True))
    return segments


def flair_sentence(flair: str) -> str:
    """Trimmed signature phrase with closing punctuation, or "" when blank."""
    text = flair.strip()
    if text and text[-1] not in ".!?…":
        text += "."
    return text


def _seeded_rng(history: Sequence[ChatMessage]) -> random.Random:
    digest = hashlib.sha256()
    for message in history:
        digest.update(message.role.encode("utf-8"))
        digest.update(b"\x1f")
        digest.update(message.content.encode("utf-8"))
        digest.update(b"\x1e")
    return random.Random(int.from_bytes(digest.digest()[:8], "big"))


def build_opening_message(settings: ConversationSettings) -> str:
    """Greeting shown before the user has said anything."""
    persona = get_persona(settings.persona)
    user_name = settings.user_name.strip() or NAME_FALLBACK
    ai_name = settings.ai_name.strip() or AI_NAME_FALLBACK
    scene = settings.scenario.strip() or OPENING_SCENE_FALLBACK
    return (
        f"Hi {user_name}! I am {ai_name}, your {persona.label.lower()}. "
        f"I saved this {scene} so we could sink into it together. "
        f"What is your heart whispering right now?"
    )


class ResponseComposer:
    """
    Stateless reply composer.

    Holds only configuration. Everything a reply depends on, including which
    templates were used recently and when flair is due, is read back from the
    history passed to compose().
    """

    def __init__(
        self,
        repetition_window: int = DEFAULT_REPETITION_WINDOW,
        flair_interval: int = DEFAULT_FLAIR_INTERVAL,
    ):
        self.repetition_window = max(0, repetition_window)
        self.flair_interval = max(1, flair_interval)

    def compose(
        self,
        history: Sequence[ChatMessage],
        settings: ConversationSettings,
        rng: Optional[random.Random] = None,
    ) -> str:
        """
        Compose the next assistant reply.

        Args:
            history: Conversation so far, oldest first, ending with a user turn
            settings: Active persona configuration (read only)
            rng: Optional seeded random source; by default one is derived from history

        Returns:
            Non-empty reply text
        """
        persona = get_persona(settings.persona)
        if rng is None:
            rng = _seeded_rng(history)

        latest = history[-1] if history else None
        if latest is None or latest.role != "user" or not latest.content.strip():
            intent = None
            bucket = FOLLOW_UP_TEMPLATES
        else:
            intent = classify_intent(latest.content)
            bucket = persona.bucket(intent)

        values = _interpolation_values(settings, persona)
        rendered = [
            _scale_segments(_interpolate(template, values), settings.energy)
            for template in bucket
        ]

        flair = flair_sentence(settings.custom_flair)
        recent = self._recent_replies(history, flair)
        candidates = [text for text in rendered if text not in recent] or rendered
        reply = rng.choice(candidates)

        append_flair = bool(flair) and self.flair_due(history)
        if append_flair:
            reply = f"{reply} {flair}"

        logger.debug(
            "Composed reply",
            persona=persona.key.value,
            intent=intent.value if intent else "follow_up",
            energy_band=energy_band(settings.energy),
            candidates=len(candidates),
            flair=append_flair,
        )
        return reply

    def flair_due(self, history: Sequence[ChatMessage]) -> bool:
        """True when the reply being composed lands on a flair turn."""
        turn = sum(1 for message in history if message.role == "assistant") + 1
        return turn % self.flair_interval == 0

    def _recent_replies(self, history: Sequence[ChatMessage], flair: str) -> List[str]:
        if self.repetition_window == 0:
            return []
        replies = [message.content for message in history if message.role == "assistant"]
        recent = replies[-self.repetition_window:]
        if flair:
            suffix = f" {flair}"
            recent = [text[: -len(suffix)] if text.endswith(suffix) else text for text in recent]
        return recent


# Module-level composer with default cadence
response_composer = ResponseComposer()


def compose(
    history: Sequence[ChatMessage],
    settings: ConversationSettings,
    rng: Optional[random.Random] = None,
) -> str:
    """Compose a reply with the default composer."""
    return response_composer.compose(history, settings, rng=rng)
