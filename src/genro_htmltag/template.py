# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Token substitution for tag templates.

A template is plain text holding tokens such as ``{prefix}``, ``{tag}`` and
``{suffix}``. Substitution is literal and done in a single pass: text that
comes from a token value is never scanned for tokens again. There are no
loops or conditionals.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

DEFAULT_TEMPLATE = "{prefix}\n{tag}\n{suffix}"

# Two-character escape accepted in templates written on a single line.
_LITERAL_NEWLINE = "\\n"


def render_template(template: str, tokens: Mapping[str, str]) -> str:
    """Substitute tokens in a template.

    Lines that contain tokens which all resolve to empty text are dropped,
    so a tag without prefix renders without a leading blank line. Newlines
    inside substituted values are kept.

    Args:
        template: The template; '' means DEFAULT_TEMPLATE.
        tokens: Mapping of token (e.g. '{prefix}') to replacement text.

    Returns:
        The composed string.

    Example:
        >>> render_template('', {'{prefix}': '', '{tag}': '<hr>', '{suffix}': ''})
        '<hr>'
        >>> render_template('{tag}\\\\n{custom}', {'{tag}': '<hr>', '{custom}': 'x'})
        '<hr>\\nx'
    """
    if template == "":
        template = DEFAULT_TEMPLATE
    template = template.replace(_LITERAL_NEWLINE, "\n")
    # Longest first, so a token that contains another one wins.
    names = sorted((token for token in tokens if token), key=len, reverse=True)
    if not names:
        return template
    pattern = re.compile("|".join(re.escape(token) for token in names))

    lines: list[str] = []
    for line in template.split("\n"):
        rendered, count = pattern.subn(lambda match: tokens[match.group(0)], line)
        if count and rendered == "":
            continue
        lines.append(rendered)
    return "\n".join(lines)
