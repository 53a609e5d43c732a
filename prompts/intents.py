"""
Intent rules for reading the latest user message.

Rules are checked top to bottom against lower-cased, trimmed text and the
first rule with a matching pattern wins. Anything unmatched is GENERAL.

Order:
    1. COMFORT    - distress comes first so "thanks, I'm exhausted" is met with care
    2. AFFECTION  - love, longing, admiration
    3. PLANNING   - dates, trips, schedules
    4. GRATITUDE  - thanks and appreciation
"""

import re
from typing import Pattern, Tuple

from prompts.personas.base import Intent

INTENT_RULES: Tuple[Tuple[Intent, Tuple[Pattern[str], ...]], ...] = (
    (
        Intent.COMFORT,
        (
            re.compile(r"\b(sad|upset|lonely|alone|anxious|anxiety|worried|scared|afraid|hurt|cry(ing)?|cried)\b"),
            re.compile(r"\b(stress(ed|ful)?|overwhelm(ed|ing)?|exhausted|tired|burn(ed|t)? out)\b"),
            re.compile(r"\b(terrible|awful|horrible|rough|bad|hard|worst) (day|week|night|time)\b"),
            re.compile(r"\b(calm (me )?down|can'?t sleep|feel(ing)? (down|low|lost|empty))\b"),
        ),
    ),
    (
        Intent.AFFECTION,
        (
            re.compile(r"\b(love|adore|miss) (you|u)\b"),
            re.compile(r"\b(admire|adore|crush|sweetheart|darling|babe|kiss|hug)\b"),
            re.compile(r"\b(why (did )?you (choose|chose|pick(ed)?) me|do you (love|like|miss) me)\b"),
            re.compile(r"\b(thinking (about|of) you|you('re| are) (cute|beautiful|amazing|perfect))\b"),
        ),
    ),
    (
        Intent.PLANNING,
        (
            re.compile(r"\b(plan|plans|planning|schedule|itinerary)\b"),
            re.compile(r"\b(weekend|tomorrow|tonight|next week|vacation|holiday|getaway|trip)\b"),
            re.compile(r"\b(let'?s|let us|should we|we could) (go|do|try|visit|make|plan)\b"),
            re.compile(r"\b(date night|go out|road trip)\b"),
        ),
    ),
    (
        Intent.GRATITUDE,
        (
            re.compile(r"\b(thank(s| you)?|thx|ty)\b"),
            re.compile(r"\b(grateful|appreciate(d)?|appreciation)\b"),
            re.compile(r"\b(you('re| are) the best|means a lot)\b"),
        ),
    ),
)
