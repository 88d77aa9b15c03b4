# app/agents/extraction.py
import json
import re

_GREEDY_OBJECT = re.compile(r"\{[\s\S]*\}")


def _is_json(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def _greedy_match(text: str) -> str | None:
    m = _GREEDY_OBJECT.search(text)
    return m.group(0) if m else None


def _balanced_scan(text: str) -> str | None:
    """
    Return the first balanced { ... } region using brace counting.
    Braces inside JSON string literals are not counted. An object that is
    never closed yields everything from the first "{" to the end of text.
    """
    start = text.find("{")
    if start == -1:
        return None

    brace_count = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            brace_count += 1
        elif ch == "}":
            brace_count -= 1
            if brace_count == 0:
                return text[start:i + 1]

    return text[start:]


def extract_json(text: str) -> str | None:
    """
    Locate a JSON object inside free-form model output.

    The first-"{"-to-last-"}" slice wins when it parses. Otherwise the first
    balanced region is returned, even if it does not parse; the caller is
    expected to parse it. Returns None only when the text has no "{".
    """
    greedy = _greedy_match(text)
    if greedy is not None and _is_json(greedy):
        return greedy
    return _balanced_scan(text)
