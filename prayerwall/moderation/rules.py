"""Static rule tables for the prayer-request content filter.

Everything here is immutable and compiled once at import. The filter walks
these tables in order, so the order of each sequence is significant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Profanity
# ---------------------------------------------------------------------------

# Tokens are lowercased and stripped of non-word characters before lookup,
# so punctuated variants such as "f*ck" are matched through their stripped
# form ("fck").
PROFANITY_TERMS: frozenset[str] = frozenset({
    # Strong profanity
    "fuck", "fucking", "shit", "bitch", "damn", "hell", "ass", "crap",
    "bastard", "whore", "slut", "piss", "cock", "dick", "pussy",
    # Variants and common misspellings
    "f*ck", "f**k", "sh*t", "sh**", "b*tch", "d*mn", "a**", "cr*p",
    "fck", "fuk", "sht", "btch", "dmn", "ars", "azz",
    # Character substitutions
    "f4ck", "sh1t", "b1tch", "d4mn", "@ss", "$hit", "fu©k",
})

# ASCII \w so that "fu©k" strips to "fuk".
NON_WORD_CHARS = re.compile(r"[^\w]", re.ASCII)


def normalize_token(token: str) -> str:
    """Strip everything but ASCII word characters from a lowercased token."""
    return NON_WORD_CHARS.sub("", token)


# ---------------------------------------------------------------------------
# Disallowed content
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RulePattern:
    """A single compiled matcher tagged with its rule category."""

    category: str
    pattern: re.Pattern[str]

    def search(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rules(category: str, *patterns: str) -> list[RulePattern]:
    return [RulePattern(category, re.compile(p, re.IGNORECASE)) for p in patterns]


# The quick check only evaluates the first three entries, so the sexual
# content group must stay at the front.
DISALLOWED_PATTERNS: tuple[RulePattern, ...] = tuple(
    _rules(
        "sexual",
        r"\b(porn|pornography|sex tape|nude|naked|horny|sexy time)\b",
        r"\b(masturbat|orgasm|climax|cum|cumming)\b",
        r"\b(hooker|prostitute|escort|stripper)\b",
    )
    + _rules(
        "hate",
        r"\b(faggot|fag|dyke|tranny|retard|retarded|spic|chink|nigger|nigga)\b",
        r"\b(kike|wetback|towelhead|sandnigger|raghead)\b",
    )
    + _rules(
        "violence",
        r"\b(kill myself|suicide|end it all|not worth living)\b",
        r"\b(murder|kill you|death threat|bomb|terrorist)\b",
    )
    + _rules(
        "promotional",
        r"\b(buy now|click here|visit my|check out my|follow me)\b",
        r"\b(make money|get rich|free money|bitcoin|crypto)\b",
    )
    + _rules(
        "solicitation",
        r"\b(send nudes|hook up|looking for sex|one night stand)\b",
        r"\b(drug dealer|selling drugs|buy weed|cocaine|heroin)\b",
    )
)

QUICK_PATTERN_COUNT = 3

# Requests legitimately talk about these. Any of them appearing in the text
# suppresses every disallowed-pattern match.
ALLOWED_SENSITIVE_TOPICS: frozenset[str] = frozenset({
    "abuse", "addiction", "depression", "anxiety", "suicide thoughts",
    "self harm", "eating disorder", "alcoholism", "divorce", "death",
    "cancer", "illness", "miscarriage", "infertility", "unemployment",
    "homeless", "poverty", "domestic violence", "sexual assault",
    "trauma", "ptsd", "mental health", "therapy", "counseling",
})

# ---------------------------------------------------------------------------
# Spam
# ---------------------------------------------------------------------------

SPAM_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(.)\1{10,}"),  # same character 10+ more times
    re.compile(r"\b(\w+)\s+\1\s+\1", re.IGNORECASE),  # same word three times running
    re.compile(r"[A-Z]{20,}"),
    re.compile(r"[!?]{5,}"),
    re.compile(r"\.{10,}"),
)

URL_PATTERN = re.compile(r"(http|www\.|\.com|\.org|\.net)", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Quality
# ---------------------------------------------------------------------------

MIN_MEANINGFUL_LENGTH = 5
GIBBERISH_MIN_LENGTH = 10
MIN_LETTER_RATIO = 0.5
LETTER = re.compile(r"[a-zA-Z]")

# ---------------------------------------------------------------------------
# User-facing text
# ---------------------------------------------------------------------------

EMPTY_REASON = "Please enter your prayer request"
EMPTY_SUGGESTIONS = ("Share what you need prayer for in a respectful way",)

PROFANITY_REASON = "Please keep your prayer request respectful"
PROFANITY_SUGGESTIONS = (
    "Share your feelings without using inappropriate language",
    "Our community values respectful communication",
    "Express your concerns in a way that honors others",
)

INAPPROPRIATE_REASON = "Please keep your prayer request appropriate for our community"
INAPPROPRIATE_SUGGESTIONS = (
    "Focus on how we can pray for your situation",
    "Share your needs in a way that respects all community members",
    "Remember this is a safe space for spiritual support",
)

SPAM_REASON = "Please write your prayer request naturally"
SPAM_SUGGESTIONS = (
    "Avoid excessive repetition or special characters",
    "Write in a conversational, sincere manner",
    "Share your genuine prayer needs",
)

LINK_REASON = "Please don't include links or promotional content"
LINK_SUGGESTIONS = (
    "Focus on your prayer request without external links",
    "Share your personal situation instead",
    "Keep the focus on spiritual support",
)

TOO_SHORT_REASON = "Please share more details about your prayer request"
TOO_SHORT_SUGGESTIONS = (
    "Help us understand how to pray for you",
    "Share what specific support you need",
    "Give us enough context to pray effectively",
)

UNCLEAR_REASON = "Please write your prayer request clearly"
UNCLEAR_SUGGESTIONS = (
    "Use regular words to describe your situation",
    "Help us understand your prayer needs",
    "Write in a way others can relate to and pray for",
)

QUICK_PROFANITY_MESSAGE = "Please keep your language respectful"
QUICK_INAPPROPRIATE_MESSAGE = "Please keep your content appropriate"
