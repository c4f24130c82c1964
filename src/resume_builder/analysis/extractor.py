"""Rule-based job description analysis.

Turns a pasted job posting into a ``JobAnalysis``: required and preferred
skills, responsibilities, qualifications, frequent keywords and a seniority
guess. Everything here is a pure function of its input text; the keyword
tables live in ``resume_builder.analysis.patterns``.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import NamedTuple

from resume_builder.analysis import patterns
from resume_builder.models.job import DEFAULT_COMPANY_TYPE, JobAnalysis

logger = logging.getLogger(__name__)


class JobInputError(ValueError):
    """Raised when a job title or description is missing."""


class SkillSplit(NamedTuple):
    required: list[str]
    preferred: list[str]


def _alternation(fragments: tuple[str, ...]) -> str:
    return "(?:" + "|".join(fragments) + ")"


def _section_pattern(starts: tuple[str, ...], ends: tuple[str, ...]) -> re.Pattern[str]:
    """Shortest span from the first start marker to the next end marker."""
    return re.compile(
        _alternation(starts) + r"[\s\S]*?" + _alternation(ends),
        re.IGNORECASE,
    )


_NON_WORD_RE = re.compile(r"[^\w\s]")

_SKILL_PATTERNS = [
    re.compile(r"\b" + _alternation(family) + r"\b", re.IGNORECASE)
    for family in patterns.SKILL_FAMILIES
]

_REQUIRED_WINDOW_RE = _section_pattern(patterns.REQUIRED_MARKERS, patterns.PREFERRED_MARKERS)
_PREFERRED_WINDOW_RE = re.compile(
    _alternation(patterns.PREFERRED_MARKERS) + r"[\s\S]*",
    re.IGNORECASE,
)

_RESPONSIBILITY_SECTION_RE = _section_pattern(
    patterns.RESPONSIBILITY_MARKERS,
    patterns.BLANK_LINE_TERMINATORS + patterns.RESPONSIBILITY_TERMINATORS,
)
_QUALIFICATION_SECTION_RE = _section_pattern(
    patterns.QUALIFICATION_MARKERS,
    patterns.BLANK_LINE_TERMINATORS + patterns.QUALIFICATION_TERMINATORS,
)

_BULLET_CLASS = "[" + re.escape(patterns.BULLET_MARKERS) + "]"
_BULLET_LINE_RE = re.compile(r"^[ \t]*" + _BULLET_CLASS + r"[ \t]*([^\n\r]+)", re.MULTILINE)
_BULLET_SPLIT_RE = re.compile(_BULLET_CLASS)
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def extract_keywords(text: str) -> list[str]:
    """Return up to 20 of the most frequent significant words in ``text``.

    Ties keep the order in which words first appear.
    """
    words = _NON_WORD_RE.sub(" ", text.lower()).split()
    counts = Counter(
        word
        for word in words
        if len(word) >= patterns.MIN_KEYWORD_LENGTH and word not in patterns.STOP_WORDS
    )
    return [word for word, _ in counts.most_common(patterns.KEYWORD_LIMIT)]


def _match_skills(section: str) -> list[str]:
    found: list[str] = []
    for pattern in _SKILL_PATTERNS:
        found.extend(match.lower() for match in pattern.findall(section))
    return list(dict.fromkeys(found))


def extract_skills(text: str) -> SkillSplit:
    """Split skill mentions into required and preferred by marker windows.

    The required window runs from the first "required"-type marker to the
    next "preferred"-type marker. Without such a window the whole text is
    scanned, so a posting that only has a preferred section reports its
    preferred skills as required too.
    """
    required_match = _REQUIRED_WINDOW_RE.search(text)
    preferred_match = _PREFERRED_WINDOW_RE.search(text)

    required_window = required_match.group(0) if required_match else text
    preferred_window = preferred_match.group(0) if preferred_match else ""

    return SkillSplit(
        required=_match_skills(required_window),
        preferred=_match_skills(preferred_window),
    )


def extract_responsibilities(text: str) -> list[str]:
    """Return up to 8 responsibility lines from a job description.

    Prefers bullet lines of the responsibilities section; falls back to the
    first sentences that contain an action verb.
    """
    responsibilities: list[str] = []

    section_match = _RESPONSIBILITY_SECTION_RE.search(text)
    if section_match:
        for bullet in _BULLET_LINE_RE.findall(section_match.group(0)):
            bullet = bullet.strip()
            if bullet:
                responsibilities.append(bullet)

    if not responsibilities:
        sentences = _SENTENCE_SPLIT_RE.split(text)
        responsibilities = [
            sentence.strip()
            for sentence in sentences
            if any(verb in sentence.lower() for verb in patterns.ACTION_VERBS)
        ][: patterns.MAX_FALLBACK_RESPONSIBILITIES]

    return responsibilities[: patterns.MAX_RESPONSIBILITIES]


def extract_qualifications(text: str) -> list[str]:
    """Return up to 5 bullet fragments of the qualifications section."""
    section_match = _QUALIFICATION_SECTION_RE.search(text)
    if not section_match:
        return []
    fragments = _BULLET_SPLIT_RE.split(section_match.group(0))
    # fragments[0] is the heading text before the first bullet
    return [fragment.strip() for fragment in fragments[1 : patterns.MAX_QUALIFICATIONS + 1]]


def determine_experience_level(text: str) -> str:
    """Guess seniority from keyword mentions, most senior level first."""
    lower_text = text.lower()
    for level, keywords in patterns.EXPERIENCE_LEVEL_KEYWORDS:
        if any(keyword in lower_text for keyword in keywords):
            return level
    return patterns.DEFAULT_EXPERIENCE_LEVEL


def analyze_job(
    job_title: str,
    job_description: str,
    company_industry: str | None = None,
) -> JobAnalysis:
    """Analyze a job posting into a ``JobAnalysis``.

    Raises:
        JobInputError: If the title or the description is blank.
    """
    if not job_title.strip() or not job_description.strip():
        raise JobInputError("Please provide both job title and job description")

    skills = extract_skills(job_description)
    analysis = JobAnalysis(
        required_skills=tuple(skills.required),
        preferred_skills=tuple(skills.preferred),
        key_responsibilities=tuple(extract_responsibilities(job_description)),
        qualifications=tuple(extract_qualifications(job_description)),
        industry_keywords=tuple(extract_keywords(job_description)),
        experience_level=determine_experience_level(job_description),
        company_type=(company_industry or "").strip() or DEFAULT_COMPANY_TYPE,
    )
    logger.debug(
        "Analyzed %r: %d required, %d preferred skills, level=%s",
        job_title,
        len(analysis.required_skills),
        len(analysis.preferred_skills),
        analysis.experience_level,
    )
    return analysis
