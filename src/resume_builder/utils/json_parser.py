"""Utility to extract a JSON object from LLM responses."""

from __future__ import annotations

import json

_decoder = json.JSONDecoder()


def extract_first_object(text: str) -> dict:
    """Parse the first balanced ``{...}`` span in ``text``.

    Leading prose and code fences before the object, and anything after it,
    are ignored.

    Raises:
        ValueError: If there is no ``{`` in the text or the span starting at
            the first ``{`` is not valid JSON.
    """
    start = text.find("{")
    if start == -1:
        raise ValueError(f"No JSON object found in text: {text[:200]}...")
    try:
        obj, _ = _decoder.raw_decode(text, start)
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON object in text: {e}") from e
    return obj
