"""
Persona record and the closed sets of keys and intents it is built from.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class PersonaKey(str, Enum):
    """Persona styles the user can pick. Order is registry order."""

    ROMANTIC = "romantic"
    SUPPORTIVE = "supportive"
    PLAYFUL = "playful"
    DREAMY = "dreamy"


class Intent(str, Enum):
    """Coarse reading of what the latest user message is asking for."""

    COMFORT = "comfort"
    AFFECTION = "affection"
    PLANNING = "planning"
    GRATITUDE = "gratitude"
    GENERAL = "general"


# Placeholders a template may use
TEMPLATE_FIELDS = ("userName", "aiName", "scenario", "tone")


@dataclass(frozen=True)
class Persona:
    """A phrasing style bundle: display text plus reply templates per intent."""

    key: PersonaKey
    label: str
    tone: str
    description: str
    templates: Dict[Intent, Tuple[str, ...]] = field(default_factory=dict)

    def bucket(self, intent: Intent) -> Tuple[str, ...]:
        """Templates for an intent, falling back to the general bucket."""
        return self.templates.get(intent) or self.templates[Intent.GENERAL]
