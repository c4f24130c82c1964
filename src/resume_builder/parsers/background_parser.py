import re
from pathlib import Path

# Contact icons that word processors and LLM exports put in front of fields
ICON_PATTERN = (
    r"[\U0001f4e7\U0001f4de\U0001f4cd\U0001f4bc\U0001f4c5\U0001f393"
    r"\U0001f3e2\U0001f4dd\U0001f4c4\U0001f517\U0001f310\U0001f4f1"
    r"\u260e\u2709\u2706]\s*"
)


def parse_background(file_path: str | Path) -> str:
    """Read a background or old resume file (PDF, DOCX, TXT, MD) as plain text."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        text = _parse_pdf(path)
    elif suffix == ".docx":
        text = _parse_docx(path)
    elif suffix in (".txt", ".md"):
        text = path.read_text(encoding="utf-8")
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")
    return clean_text(text)


def clean_text(text: str) -> str:
    """Strip export artifacts from background text.

    Removes zero-width characters and contact icons, normalizes bullet
    glyphs to "- " and collapses runs of spaces and blank lines.
    """
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(ICON_PATTERN, "", text)

    # ●, •, ◦, ◆, ■, ▪, ★, ○ → -
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = [re.sub(r"[ \t]{2,}", " ", line).rstrip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    with fitz.open(str(path)) as doc:
        return "\n".join(page.get_text() for page in doc)


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
