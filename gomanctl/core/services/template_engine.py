"""
Template engine for generated Go sources.

Templates are real Go text with two mechanisms layered on top:
  1. Conditional blocks:  // __IF_KEY__ / // __IF_NOT_KEY__ / // __ENDIF__
  2. Placeholder substitution:  __KEY__

The markers are Go line comments, so a template stays readable (and
mostly syntax-highlightable) as Go.  Blocks are driven by the
truthiness of the bound variable with the same key.
"""

from __future__ import annotations

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_IF_BLOCK = re.compile(
    r"//\s*__IF_(?!NOT_)(\w+?)__[ \t]*\n(.*?)//\s*__ENDIF__[ \t]*\n",
    flags=re.DOTALL,
)
_IF_NOT_BLOCK = re.compile(
    r"//\s*__IF_NOT_(\w+?)__[ \t]*\n(.*?)//\s*__ENDIF__[ \t]*\n",
    flags=re.DOTALL,
)
_PLACEHOLDER = re.compile(r"__([A-Z0-9]+(?:_[A-Z0-9]+)*)__")


class TemplateError(Exception):
    """Raised when a template cannot be rendered."""


def execute_template(template: str, variables: dict[str, Any]) -> str:
    """Render a template against a set of bound variables.

    Conditional blocks are resolved first, repeatedly until none remain,
    then every ``__KEY__`` placeholder is replaced by
    ``str(variables[KEY])`` in a single pass (substituted text is never
    re-scanned).

    Raises:
        TemplateError: If a placeholder has no binding.
    """
    content = template

    changed = True
    while changed:
        changed = False

        def _replace_if(m: re.Match) -> str:
            nonlocal changed
            changed = True
            return m.group(2) if variables.get(m.group(1)) else ""

        def _replace_if_not(m: re.Match) -> str:
            nonlocal changed
            changed = True
            return "" if variables.get(m.group(1)) else m.group(2)

        content = _IF_NOT_BLOCK.sub(_replace_if_not, content)
        content = _IF_BLOCK.sub(_replace_if, content)

    def _substitute(m: re.Match) -> str:
        key = m.group(1)
        if key not in variables:
            raise TemplateError(f"Unresolved placeholder __{key}__")
        return str(variables[key])

    content = _PLACEHOLDER.sub(_substitute, content)

    # Clean up empty lines left by removed blocks (max 2 consecutive)
    content = re.sub(r"\n{3,}", "\n\n", content)

    logger.debug("Rendered template (%d bytes, %d variables)", len(content), len(variables))
    return content


def commentify(text: str) -> str:
    """Turn free text into Go line comments.

    Lines that already start with ``//`` are kept as they are, empty
    lines become a bare ``//``.
    """
    lines = []
    for line in text.split("\n"):
        if line.startswith("//"):
            lines.append(line)
        elif line == "":
            lines.append("//")
        else:
            lines.append(f"// {line}")
    return "\n".join(lines)
