"""
depsync — CLI entrypoint.

Usage:
    depsync                 # pin dependencies of the project in cwd
    depsync --path          # ask for the project path first
    depsync --dry-run       # show the pinned manifest, write nothing
    python -m depsync.main --help
"""

from __future__ import annotations

import json
import sys

import click

from depsync import __version__
from depsync.adapters.base import NullReporter, Prompter, Reporter
from depsync.core.errors import DepsyncError
from depsync.core.observability.logging_config import resolve_level, setup_from_env
from depsync.ui.cli.help import show_help

# Bare words accepted in place of the matching flags.
_COMMAND_WORDS = ("help", "path", "version")


def _help_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    show_help()
    ctx.exit(0)


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)
@click.option(
    "--help", "-h",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_help_callback,
    help="Show the help document and exit.",
)
@click.version_option(version=__version__, prog_name="depsync", message="%(version)s")
@click.option("--path", "ask_path", is_flag=True, help="Prompt for the project path.")
@click.option("--dry-run", is_flag=True, help="Print the pinned manifest, don't write it.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(
    ctx: click.Context,
    ask_path: bool,
    dry_run: bool,
    as_json: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Pin package.json dependencies to their installed versions."""
    ctx.ensure_object(dict)

    if ctx.args:
        token = ctx.args[0]
        if token not in _COMMAND_WORDS or token == "help":
            show_help()
            ctx.exit(0)
        if token == "version":
            click.echo(__version__)
            ctx.exit(0)
        ask_path = True

    setup_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    from depsync.core.config.loader import build_run_config
    from depsync.core.use_cases.pin import run_pin

    project_path = None
    if ask_path:
        prompter: Prompter = ctx.obj.get("prompter") or _click_prompter()
        project_path = prompter.ask_project_path()

    try:
        config = build_run_config(project_path, dry_run=dry_run)
    except DepsyncError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    reporter: Reporter = ctx.obj.get("reporter") or (
        NullReporter() if (as_json or dry_run or quiet) else _click_reporter()
    )
    result = run_pin(config, reporter=reporter)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if dry_run:
        click.echo(result.content)
        return

    if quiet:
        return

    click.secho(
        f"📌 Pinned {result.total} dependencies in {result.manifest_path}",
        fg="green",
        bold=True,
    )
    for change in result.changes:
        click.echo(f"   {change['name']:<30} {change['declared']:<12} → {change['installed']}")


def _click_prompter() -> Prompter:
    from depsync.ui.cli.terminal import ClickPrompter

    return ClickPrompter()


def _click_reporter() -> Reporter:
    from depsync.ui.cli.terminal import ClickProgressReporter

    return ClickProgressReporter(file=sys.stderr)


if __name__ == "__main__":
    cli()
