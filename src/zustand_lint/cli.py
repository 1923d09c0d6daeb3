"""CLI entry point for zustand-lint."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from zustand_lint import __version__
from zustand_lint.config import ConfigError, load_config
from zustand_lint.rules import RULES
from zustand_lint.scanner import lint_paths


def _print_rules(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print rule ids, descriptions, option schemas and defaults as JSON, then exit."""
    if not value or ctx.resilient_parsing:
        return
    data = {
        rule_id: {
            "type": rule.meta.type,
            "description": rule.meta.description,
            "messages": rule.meta.messages,
            "schema": rule.meta.schema,
            "defaults": rule.meta.default_options().model_dump(by_alias=True, mode="json"),
        }
        for rule_id, rule in RULES.items()
    }
    click.echo(json.dumps(data, indent=2))
    ctx.exit()


@click.command()
@click.argument(
    "paths", nargs=-1, required=True,
    type=click.Path(exists=True, resolve_path=True, path_type=Path),
)
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file. Defaults to .zustand-lint.yaml in the working directory.",
)
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(["stylish", "md", "json"], case_sensitive=False),
    default="stylish",
    help="Output format (default: stylish).",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Write the report to a file instead of stdout.",
)
@click.option(
    "--max-warnings", type=int, default=-1, show_default=True,
    help="Exit non-zero when warnings exceed this number (-1 disables).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging.")
@click.option(
    "--list-rules", is_flag=True, is_eager=True, expose_value=False, callback=_print_rules,
    help="Print the available rules and their option schemas, then exit.",
)
@click.version_option(version=__version__)
def main(
    paths: tuple[Path, ...],
    config_path: Path | None,
    fmt: str,
    output: Path | None,
    max_warnings: int,
    verbose: bool,
) -> None:
    """Check Zustand store hook selectors in JS/TS files and directories."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    report = lint_paths(paths, config)

    if fmt == "json":
        text = json.dumps(report.model_dump(), indent=2)
    elif fmt == "md":
        from zustand_lint.render.markdown import render_markdown
        text = render_markdown(report)
    else:
        from zustand_lint.render.stylish import render_stylish
        text = render_stylish(report)

    if output:
        output.write_text(text)
        click.echo(f"Report written to {output}")
    else:
        click.echo(text)

    if report.error_count or report.failed_files:
        sys.exit(1)
    if 0 <= max_warnings < report.warning_count:
        sys.exit(1)


if __name__ == "__main__":
    main()
