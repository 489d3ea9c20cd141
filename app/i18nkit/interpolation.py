"""Minimal template rendering for translation messages.

Supports ``{{.name}}`` field actions (whitespace inside the braces is
allowed), ``{{- ...}}`` / ``{{... -}}`` whitespace trim markers and
``{{/* comment */}}`` (the comment delimiters must touch the braces or trim
markers). A field with no value renders as ``<no value>``; ``{{.}}`` renders
all values as ``map[key:value ...]`` with keys sorted.
"""

import re
from typing import Any, Mapping

from i18nkit.logging import get_module_logger

logger = get_module_logger()

NO_VALUE = "<no value>"

_ACTION_PATTERN = re.compile(r"\{\{(-\s)?(.*?)(\s-)?\}\}", re.DOTALL)
_FIELD_PATTERN = re.compile(r"^\.([A-Za-z_]\w*)$")
_COMMENT_PATTERN = re.compile(r"^/\*.*\*/$", re.DOTALL)


class TemplateError(ValueError):
    """Raised when a template cannot be parsed."""


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _render_action(action: str, values: Mapping[str, Any]) -> str:
    if _COMMENT_PATTERN.match(action):
        return ""

    action = action.strip()
    if action == ".":
        pairs = " ".join(
            f"{key}:{_format_value(values[key])}" for key in sorted(values)
        )
        return f"map[{pairs}]"

    field_match = _FIELD_PATTERN.match(action)
    if not field_match:
        raise TemplateError(f"unsupported template action: {{{{{action}}}}}")

    name = field_match.group(1)
    if name not in values:
        return NO_VALUE
    return _format_value(values[name])


def render(template: str, values: Mapping[str, Any]) -> str:
    """Render a template against values.

    Args:
        template: Message with ``{{.name}}`` placeholders.
        values: Values available to the placeholders.

    Returns:
        Rendered message.

    Raises:
        TemplateError: If an action is unclosed or unsupported.
    """
    chunks = []
    position = 0
    trim_next = False

    for match in _ACTION_PATTERN.finditer(template):
        text = template[position : match.start()]
        if trim_next:
            text = text.lstrip()
        if match.group(1):
            text = text.rstrip()
        if "{{" in text:
            raise TemplateError("unclosed action")
        chunks.append(text)
        chunks.append(_render_action(match.group(2), values))
        trim_next = bool(match.group(3))
        position = match.end()

    text = template[position:]
    if trim_next:
        text = text.lstrip()
    if "{{" in text:
        raise TemplateError("unclosed action")
    chunks.append(text)

    return "".join(chunks)


def interpolate(template: str, values: Mapping[str, Any]) -> str:
    """Render a template, returning an empty string if it cannot be parsed.

    Parse failures are not reported to the caller.

    Args:
        template: Message with ``{{.name}}`` placeholders.
        values: Values available to the placeholders.

    Returns:
        Rendered message, or "" for a malformed template.
    """
    try:
        return render(template, values)
    except TemplateError as e:
        logger.debug("template_render_failed", template=template, error=str(e))
        return ""
