import re
from pathlib import Path


def parse_jd(text: str) -> str:
    """Normalize pasted job description text.

    Blank lines are kept (collapsed to one) because section detection
    treats them as boundaries.
    """
    text = text.replace("\r\n", "\n")
    text = re.sub(r"[ \t]+", " ", text)
    lines = [line.strip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def load_jd_file(file_path: str | Path) -> str:
    """Load a job description from a text file."""
    return parse_jd(Path(file_path).read_text(encoding="utf-8"))
