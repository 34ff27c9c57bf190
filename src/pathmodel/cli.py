"""Command-line interface for pathmodel."""
import json
import logging
import sys
from typing import Callable, List, Optional, Tuple

import click

from . import __version__
from .config import Config
from .core.models import StructuredPath
from .utils.console_base import ConsoleBase, THEMES


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def path_rows(path: StructuredPath) -> List[Tuple[str, str]]:
    """Flatten a path into (field, value) rows for display."""
    return [
        ("device", path.device),
        ("folder", json.dumps(list(path.folder))),
        ("file", path.file),
        ("is_absolute", str(path.is_absolute)),
        ("separator", path.separator),
        ("file_name", path.file_name),
        ("file_extension", path.file_extension),
        ("directory", path.directory),
        ("complete", path.complete),
    ]


def run_command(config: Config, action: Callable[[ConsoleBase], None]) -> None:
    """Run a command body with the shared console and error handling."""
    console = ConsoleBase(theme=config.theme)

    # Warnings never go into JSON output
    if config.separator == "" and not config.export_json:
        console.print_warning("Empty separator: path text is not split into segments")

    try:
        action(console)

    except KeyboardInterrupt:
        console.print_error("PROCESS TERMINATED BY USER")
        sys.exit(1)

    except Exception as e:
        console.print_error(f"CRITICAL ERROR: {str(e)}")
        if config.debug:
            console.print_exception()
        sys.exit(1)


def emit(console: ConsoleBase, config: Config, title: str, path: StructuredPath) -> None:
    """Write a path as JSON or as a table, depending on the config."""
    if config.export_json:
        click.echo(json.dumps(path.to_dict(), indent=2))
    else:
        console.print_table(title, path_rows(path))


@click.group()
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default=None,
              help='Terminal color theme (default: $PATHMODEL_THEME or manhattan)')
@click.option('--debug', is_flag=True, help='Enable debug logging and tracebacks')
@click.version_option(version=__version__, prog_name='pathmodel')
@click.pass_context
def main(ctx: click.Context, theme: Optional[str], debug: bool) -> None:
    """
    Parse, normalize and resolve path strings.

    No filesystem access is performed; paths are treated as text.

    Examples:

        pathmodel parse /usr/lib/libc.so.6

        pathmodel parse 'C:\\temp\\x.txt' -s '\\'

        pathmodel normalize a/./b/../c

        pathmodel resolve /a/b/ ../x --normalize
    """
    config = Config(debug=debug)
    if theme:
        config.theme = theme

    setup_logging(debug)
    ctx.obj = config


@main.command(name='parse')
@click.argument('path')
@click.option('--separator', '-s', default=None,
              help='Path separator (default: $PATHMODEL_SEPARATOR or "/")')
@click.option('--normalize', '-n', 'normalize_results', is_flag=True, help='Normalize before printing')
@click.option('--json', 'export_json', is_flag=True, help='Print the result as JSON')
@click.pass_obj
def parse_command(config: Config, path: str, separator: Optional[str],
                  normalize_results: bool, export_json: bool) -> None:
    """Show the structure of PATH."""
    config.normalize_results = normalize_results
    config.export_json = export_json
    if separator is not None:
        config.separator = separator

    def action(console: ConsoleBase) -> None:
        result = StructuredPath.parse(path, config.separator)
        if config.normalize_results:
            result = result.normalized
        emit(console, config, "PARSED PATH", result)

    run_command(config, action)


@main.command(name='normalize')
@click.argument('path')
@click.option('--separator', '-s', default=None,
              help='Path separator (default: $PATHMODEL_SEPARATOR or "/")')
@click.pass_obj
def normalize_command(config: Config, path: str, separator: Optional[str]) -> None:
    """Print the normalized form of PATH."""
    if separator is not None:
        config.separator = separator

    def action(console: ConsoleBase) -> None:
        result = StructuredPath.parse(path, config.separator).normalized
        console.print_path("NORMALIZED", result.complete)

    run_command(config, action)


@main.command(name='resolve')
@click.argument('base')
@click.argument('other')
@click.option('--separator', '-s', default=None,
              help='Path separator (default: $PATHMODEL_SEPARATOR or "/")')
@click.option('--normalize', '-n', 'normalize_results', is_flag=True, help='Normalize the resolved path')
@click.option('--json', 'export_json', is_flag=True, help='Print the result as JSON')
@click.pass_obj
def resolve_command(config: Config, base: str, other: str, separator: Optional[str],
                    normalize_results: bool, export_json: bool) -> None:
    """Resolve OTHER within BASE."""
    config.normalize_results = normalize_results
    config.export_json = export_json
    if separator is not None:
        config.separator = separator

    def action(console: ConsoleBase) -> None:
        base_path = StructuredPath.parse(base, config.separator)
        if config.normalize_results:
            result = base_path.resolve_normalized(other)
        else:
            result = base_path.resolve(other)

        if config.export_json:
            emit(console, config, "RESOLVED PATH", result)
        else:
            console.print_path("RESOLVED", result.complete)

    run_command(config, action)


if __name__ == '__main__':
    main()
