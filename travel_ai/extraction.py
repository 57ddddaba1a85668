"""Recover a JSON payload from free-text model output.

Best effort only: the first fenced block labelled ``json`` (or unlabelled)
wins, otherwise the widest brace/bracket span is taken. Nested fences and
responses carrying several JSON documents are not handled.
"""
import re
from dataclasses import dataclass
from typing import Literal, Optional, Union

Expected = Literal["object", "array"]

_FENCE = re.compile(r"```([^\n`]*)\r?\n([\s\S]*?)```")
_JSON_LABELS = ("", "json")
_OBJECT = re.compile(r"\{[\s\S]*\}")
_ARRAY = re.compile(r"\[[\s\S]*\]")


@dataclass(frozen=True)
class Found:
    text: str


@dataclass(frozen=True)
class NotFound:
    raw: str


Extraction = Union[Found, NotFound]


def _fenced_json(text: str) -> Optional[str]:
    # fences are consumed in pairs, so a closing fence never opens the next block
    for block in _FENCE.finditer(text):
        if block.group(1).strip().lower() in _JSON_LABELS:
            return block.group(2).strip()
    return None


def extract_json(raw_text: str, expect: Expected = "object") -> Extraction:
    text = raw_text or ""
    fenced = _fenced_json(text)
    if fenced is not None:
        return Found(fenced)
    pattern = _ARRAY if expect == "array" else _OBJECT
    match = pattern.search(text)
    if match:
        return Found(match.group(0))
    return NotFound(text)
