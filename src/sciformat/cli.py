#!/usr/bin/env python3

import rich_click as click

# Configure rich-click to enable markup - MUST be first!
click.rich_click.USE_RICH_MARKUP = True

# 🧛‍♂️ Apply Dracula theme colors
click.rich_click.STYLE_OPTION = "#ff79c6"      # Dracula Pink - for option flags
click.rich_click.STYLE_ARGUMENT = "#8be9fd"    # Dracula Cyan - for argument types
click.rich_click.STYLE_COMMAND = "#50fa7b"     # Dracula Green - for subcommands
click.rich_click.STYLE_USAGE = "#bd93f9"       # Dracula Purple - for "Usage:" line
click.rich_click.STYLE_HELPTEXT = "#b3b8c0"    # Light gray - for help descriptions

"""
sciformat - Typeset molecules and physical units for LaTeX
"""

import json as jsonlib
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from . import app_hooks
from .core.config import ConfigError, ConfigLoader, get_config
from .core.logging import set_log_level

console = Console()
err_console = Console(stderr=True)

_mode_options = [
    click.option("--molecule", "mode", flag_value="molecule", help=" 🧪 Force molecule formatting"),
    click.option("--unit", "mode", flag_value="unit", help=" 📏 Force unit formatting"),
    click.option("--math", is_flag=True, help=" ∑  Output goes inside an existing math region"),
]


def mode_options(func):
    for option in reversed(_mode_options):
        func = option(func)
    return func


def _run_hook(hook, **kwargs):
    try:
        return hook(**kwargs)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="sciformat")
@click.option("--config", type=click.Path(dir_okay=False), help=" ⚙️  Configuration file path")
@click.option("--debug", is_flag=True, help=" 🐛 Enable detailed debug logging")
@click.pass_context
def main(ctx, config, debug):
    """🧪 [bold cyan]sciformat[/bold cyan] - Turn [green]H2O[/green] into [green]H$_2$O[/green] and [green]m2s-2[/green] into [green]m$^2$ s$^{-2}$[/green]

    \b
    [bold yellow]🎯 Quick Start:[/bold yellow]
    \b
      [green]sciformat convert H2O C18O[/green]           [italic]# Molecules[/italic]
      [green]sciformat convert 2.74e-13erg.cm-2s-1[/green] [italic]# Units with a magnitude[/italic]
      [green]sciformat convert --math Fe2+[/green]        [italic]# Output for inside $...$[/italic]
      [green]sciformat buffer notes.tex --position 120[/green]

    \b
    [bold yellow]🔧 System Commands:[/bold yellow]
    \b
      [green]sciformat units[/green]                      [italic]# List recognized unit symbols[/italic]
      [green]sciformat serve --port 3214[/green]          [italic]# WebSocket service for editors[/italic]
    """
    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    loader = _run_hook(lambda: ConfigLoader(config) if config else get_config())
    set_log_level(loader.log_level)

    if debug:
        handler = RichHandler(console=err_console, show_path=False)
        handler.setLevel(logging.DEBUG)
        logging.getLogger("sciformat").addHandler(handler)
        logging.getLogger("sciformat").setLevel(logging.DEBUG)
        set_log_level("DEBUG")


@main.command()
@click.argument("expressions", nargs=-1, required=True)
@mode_options
@click.option("--json", "as_json", is_flag=True, help=" 📄 Output JSON format")
@click.pass_context
def convert(ctx, expressions, mode, math, as_json):
    """Convert one or more expressions."""
    result = _run_hook(
        app_hooks.on_convert, expressions=expressions, mode=mode or "auto", math=math, config=ctx.obj["config"]
    )

    if as_json:
        click.echo(jsonlib.dumps(result["results"], indent=2))
        return

    for item in result["results"]:
        console.print(item["output"], markup=False, highlight=False, end="")
        console.print(f"  [dim]({item['kind']})[/dim]", highlight=False)


@main.command()
@click.argument("file", type=click.File("r"), default="-")
@click.option("--position", type=int, help=" 📍 Caret offset (default: end of text)")
@mode_options
@click.pass_context
def buffer(ctx, file, position, mode, math):
    """Convert the expression before the caret in FILE (or stdin) and print the text."""
    text = file.read()
    result = _run_hook(
        app_hooks.on_buffer, text=text, position=position, mode=mode or "auto", math=math, config=ctx.obj["config"]
    )

    if result["status"] == "success":
        err_console.print(f"[dim]{result['input']!r} converted as {result['kind']}[/dim]", highlight=False)
    else:
        err_console.print(f"[yellow]{result['message']}[/yellow]")
    click.echo(result["text"], nl=False)


@main.command()
@click.option("--json", "as_json", is_flag=True, help=" 📄 Output JSON format")
@click.pass_context
def units(ctx, as_json):
    """List the unit symbols that mark an expression as a unit."""
    result = _run_hook(app_hooks.on_units, config=ctx.obj["config"])

    if as_json:
        click.echo(jsonlib.dumps(result["units"], indent=2))
        return

    table = Table(title="Unit vocabulary")
    table.add_column("Symbol", style="cyan")
    table.add_column("Replacement", style="green")
    for unit in result["units"]:
        table.add_row(unit["symbol"], unit["replacement"] or "")
    console.print(table)


@main.command()
@click.option("--host", help=" 🏠 Server host (default: from config)")
@click.option("--port", type=int, help=" 🔌 Server port (default: from config)")
@click.pass_context
def serve(ctx, host, port):
    """Run the WebSocket conversion service."""
    _run_hook(app_hooks.on_serve, host=host, port=port, config=ctx.obj["config"])


if __name__ == "__main__":
    main()
