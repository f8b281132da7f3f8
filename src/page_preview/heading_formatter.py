"""Heading rewriting for Slack, which has no heading markup."""

import re

_HEADING_PATTERN = re.compile(r'# (.*)')


def format_headings(content: str) -> str:
    """Turn '#'-prefixed lines into bold lines.

    Example:
        >>> format_headings("# Hello\\nBody text")
        '*Hello*\\nBody text'
    """
    formatted = []
    for line in content.split('\n'):
        if line.startswith('#'):
            match = _HEADING_PATTERN.search(line)
            title = match.group(1) if match else line
            line = f"*{title}*"
        formatted.append(line)
    return '\n'.join(formatted)
