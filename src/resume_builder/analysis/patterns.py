"""Keyword tables for job description analysis.

Every table here is plain data. Entries in the skill families and window
markers are regex fragments; everything else is matched as a literal
substring or token.
"""

from __future__ import annotations

STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might",
    "can", "must", "shall",
})

KEYWORD_LIMIT = 20
MIN_KEYWORD_LENGTH = 3

# Skill pattern families, matched case-insensitively on word boundaries
TECHNICAL_SKILLS: tuple[str, ...] = (
    "javascript", "python", "java", "react", r"node\.?js", "angular", "vue",
    "typescript", "html", "css", "sql", "mongodb", "postgresql", "aws",
    "docker", "kubernetes", "git", "linux", "windows", "macos",
)

SOFT_SKILLS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", r"problem[\s-]solving",
    "analytical", "creative", "organizational", r"time[\s-]management",
    r"project[\s-]management", "agile", "scrum",
)

TOOL_SKILLS: tuple[str, ...] = (
    "photoshop", "illustrator", "figma", "sketch", "jira", "confluence",
    "slack", r"microsoft[\s-]office", "excel", "powerpoint", "word",
    "salesforce", "hubspot",
)

SKILL_FAMILIES: tuple[tuple[str, ...], ...] = (TECHNICAL_SKILLS, SOFT_SKILLS, TOOL_SKILLS)

# Window markers
REQUIRED_MARKERS: tuple[str, ...] = ("required", r"must[\s-]have", "essential")
PREFERRED_MARKERS: tuple[str, ...] = (
    "preferred", r"nice[\s-]to[\s-]have", "desired", "optional", "plus", "bonus",
)

RESPONSIBILITY_MARKERS: tuple[str, ...] = (
    "responsibilities", "duties", "role", "you will", "candidate will",
)
RESPONSIBILITY_TERMINATORS: tuple[str, ...] = ("requirements", "qualifications", "skills")

QUALIFICATION_MARKERS: tuple[str, ...] = ("qualifications", "requirements", "education")
QUALIFICATION_TERMINATORS: tuple[str, ...] = ("responsibilities", "duties", "benefits")

# Both sections also end at the first blank line
BLANK_LINE_TERMINATORS: tuple[str, ...] = (r"\n\n", r"\r\n\r\n")

BULLET_MARKERS = "•-*"

ACTION_VERBS: tuple[str, ...] = (
    "develop", "create", "manage", "lead", "implement", "design", "analyze",
    "coordinate", "collaborate", "maintain", "optimize", "support",
)

MAX_RESPONSIBILITIES = 8
MAX_FALLBACK_RESPONSIBILITIES = 5
MAX_QUALIFICATIONS = 5

# Checked in order; the first level with any matching keyword wins
EXPERIENCE_LEVEL_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Executive", ("director", "manager", "vp", "executive", "10+ years")),
    ("Senior", ("senior", "lead", "5+ years", "7+ years", "experienced")),
    ("Mid-level", ("mid", "intermediate", "2-5 years", "3-7 years")),
    ("Entry-level", ("entry", "junior", "graduate", "new grad", "0-2 years", "recent graduate")),
)
DEFAULT_EXPERIENCE_LEVEL = "Mid-level"
