"""
Help document — bundled ``help.md`` rendered for the terminal.
"""

from __future__ import annotations

import re
from pathlib import Path

import click

HELP_FILE = Path(__file__).resolve().parents[2] / "help.md"

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
_CODE_RE = re.compile(r"`([^`]+)`")


def render_help(markdown: str) -> str:
    """Style headings and inline code; everything else passes through."""
    lines = []
    for line in markdown.splitlines():
        m = _HEADING_RE.match(line)
        if m:
            lines.append(click.style(m.group(2), bold=True, underline=len(m.group(1)) == 1))
            continue
        lines.append(_CODE_RE.sub(lambda c: click.style(c.group(1), fg="cyan"), line))
    return "\n".join(lines)


def show_help() -> None:
    """Print the rendered help document."""
    click.echo(render_help(HELP_FILE.read_text(encoding="utf-8")))
