#!/usr/bin/env python3
"""CLI interface for llm-log-viewer."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .converter import convert_to
from .html.utils import THEMES
from .models import LoadError


@click.command()
@click.argument("input_path", type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output file path (default: input path with the format's extension)",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["html", "md", "markdown", "preview"]),
    default="html",
    show_default=True,
    help="Output format; 'preview' renders each message as Markdown",
)
@click.option(
    "--theme",
    type=click.Choice(sorted(THEMES)),
    default="dark",
    show_default=True,
    envvar="LLM_LOG_VIEWER_THEME",
    help="Colour theme for HTML output",
)
@click.option("--title", help="Page title for HTML output")
@click.option(
    "--open-browser",
    is_flag=True,
    help="Open the generated file in the default application",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Show debug logging and full tracebacks on errors",
)
def main(
    input_path: Path,
    output: Optional[Path],
    output_format: str,
    theme: str,
    title: Optional[str],
    open_browser: bool,
    debug: bool,
) -> None:
    """Convert a chat transcript (JSON array or JSONL) to HTML or Markdown.

    INPUT_PATH is a file holding either a JSON array of
    {"role": ..., "content": ...} objects or one such object per line.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        output_path, conversation = convert_to(
            output_format, input_path, output, theme=theme, title=title
        )
        for warning in conversation.warnings:
            logging.warning(warning)

        click.echo(
            f"Successfully converted {input_path} to {output_path} "
            f"({len(conversation.turns)} messages)"
        )

        if open_browser:
            click.launch(str(output_path))

    except (FileNotFoundError, LoadError) as e:
        click.echo(f"Error: {e}", err=True)
        if debug:
            import traceback

            traceback.print_exc()
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error converting file: {e}", err=True)
        if debug:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
