"""
Man page command.

Render a roff manual page (section 1) for the toki command.
"""

from __future__ import annotations

from datetime import date

import click
import typer

from toki import __version__
from toki.tui.keys import INTERRUPT_KEYS, QUIT_KEYS

DESCRIPTION = (
    "toki runs one or more timed stages one after another, showing the "
    "stage's start and end clock time, a live countdown and a progress bar. "
    "Stages are given as a single argument of durations separated by "
    "whitespace, commas or hyphens. A bare number is read as seconds; "
    "units ms, s, m and h may be combined, e.g. 1h30m."
)


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("-", "\\-")


def _is_option(param: click.Parameter) -> bool:
    # Typer may build on its own vendored copy of click
    return getattr(param, "param_type_name", "") == "option"


def _option_line(param: click.Parameter) -> str:
    names = ", ".join(f"\\fB{_escape(opt)}\\fR" for opt in param.opts + param.secondary_opts)
    if not getattr(param, "is_flag", False):
        names += f" \\fI{param.type.name.upper()}\\fR"
    return names


def build_man_page(
    command: click.Command,
    name: str = "toki",
    summary: str = "",
    section: int = 1,
) -> str:
    """Build a roff man page for ``command``.

    Args:
        command: Command whose options are documented
        name: Program name
        summary: One-line description for the NAME section
        section: Manual section number

    Returns:
        The man page source
    """
    lines = [
        f'.TH {name.upper()} {section} "{date.today():%Y-%m-%d}" '
        f'"{name} {_escape(__version__)}" "User Commands"',
        ".SH NAME",
        f"{name} \\- {_escape(summary)}",
        ".SH SYNOPSIS",
        f".B {name}",
        "[\\fIOPTIONS\\fR] \\fITIMER\\fR",
        ".SH DESCRIPTION",
        _escape(DESCRIPTION),
        ".SH OPTIONS",
    ]

    for param in command.params:
        if not _is_option(param) or getattr(param, "hidden", False):
            continue
        lines.append(".TP")
        lines.append(_option_line(param))
        lines.append(_escape(param.help or ""))

    lines.append(".SH KEYS")
    for key in QUIT_KEYS + INTERRUPT_KEYS:
        lines.append(".TP")
        lines.append(f"\\fB{_escape(key.key)}\\fR")
        lines.append(_escape(key.description))

    lines.extend(
        [
            ".SH EXIT STATUS",
            "0 when the last stage elapses or the timer is quit; "
            "1 on an invalid timer specification; 130 when interrupted.",
        ]
    )
    return "\n".join(lines) + "\n"


def man_command(ctx: typer.Context) -> None:
    """Generates man pages."""
    root_ctx = ctx.find_root()
    root = root_ctx.command
    commands = getattr(root, "commands", None)
    command = commands["start"] if commands else root
    summary = (root.help or "").strip().splitlines()[:1]
    page = build_man_page(
        command,
        name=root_ctx.info_name or "toki",
        summary=summary[0] if summary else "",
    )
    typer.echo(page, nl=False)
