from __future__ import annotations

"""
Host Event Field Extraction.

Host versions disagree on where a tool event keeps its command and its
captured output. Each location is modelled as one extraction attempt; the
attempts run in a fixed priority order and the first one that yields a
string wins.
"""

from typing import Any, Callable, List, Mapping, Optional, Sequence

# -----------------------------------------------------------------------------
# LOW-LEVEL ACCESS
# -----------------------------------------------------------------------------

def _field(obj: Any, key: str) -> Any:
    """Read a key from a mapping, or an attribute from any other object."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _path(obj: Any, *keys: str) -> Any:
    for key in keys:
        obj = _field(obj, key)
        if obj is None:
            return None
    return obj


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _join_text_fragments(content: Any) -> Optional[str]:
    """
    Join the text-typed fragments of a content list with newlines.

    Non-text fragments and empty texts are ignored; None if nothing is left.
    """
    if not isinstance(content, Sequence) or isinstance(content, (str, bytes)):
        return None

    texts: List[str] = []
    for fragment in content:
        if _field(fragment, "type") != "text":
            continue
        text = _field(fragment, "text")
        text = "" if text is None else str(text)
        if text:
            texts.append(text)
    return "\n".join(texts) if texts else None


def _content_of_result(event: Any) -> Optional[str]:
    # result.content takes precedence whenever it is present at all
    content = _path(event, "result", "content")
    if content is None:
        content = _path(event, "fullResult", "content")
    return _join_text_fragments(content)


# -----------------------------------------------------------------------------
# EXTRACTION ATTEMPTS (priority order)
# -----------------------------------------------------------------------------

OutputAttempt = Callable[[Any], Optional[str]]

OUTPUT_ATTEMPTS: List[OutputAttempt] = [
    lambda e: _as_text(_field(e, "fullResult")),
    lambda e: _as_text(_field(e, "result")),
    lambda e: _as_text(_path(e, "fullResult", "stdout")),
    lambda e: _as_text(_path(e, "result", "stdout")),
    _content_of_result,
    lambda e: _as_text(_field(e, "tool_response")),
    lambda e: _as_text(_path(e, "tool_response", "stdout")),
    lambda e: _join_text_fragments(_path(e, "tool_response", "content")),
]

COMMAND_PATHS: List[Sequence[str]] = [
    ("request", "parameters", "command"),
    ("input", "command"),
    ("parameters", "command"),
    ("tool_input", "command"),
]

TOOL_NAME_KEYS: List[str] = ["toolName", "tool_name"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_output(event: Any) -> Optional[str]:
    """
    Extract the captured textual output of a tool event.

    Args:
        event: Host event (mapping or object).

    Returns:
        Optional[str]: The first string found, or None if no shape matches.
    """
    for attempt in OUTPUT_ATTEMPTS:
        value = attempt(event)
        if value is not None:
            return value
    return None


def extract_command(event: Any) -> str:
    """Return the shell command carried by the event, or '' if absent."""
    for keys in COMMAND_PATHS:
        value = _path(event, *keys)
        if isinstance(value, str):
            return value
    return ""


def extract_tool_name(event: Any) -> Optional[str]:
    """Return the name of the tool that produced the event."""
    for key in TOOL_NAME_KEYS:
        value = _field(event, key)
        if isinstance(value, str):
            return value
    return None
