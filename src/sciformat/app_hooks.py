"""Hook implementations for sciformat - Typeset molecules and physical units.

This file contains the business logic for the CLI commands. The click layer
in ``cli.py`` only parses arguments and renders what these hooks return.

Hook names use snake_case with an 'on_' prefix:
- Command 'convert' -> Hook function 'on_convert'
- Command 'buffer' -> Hook function 'on_buffer'
"""

from typing import Any, Dict, Iterable, Optional

from .core.config import ConfigLoader, FormatterConfig, get_config, setup_logging
from .text_formatting.common import MathOverride, ModeOverride
from .text_formatting.context import convert_at
from .text_formatting.pipeline import ScientificFormatter

logger = setup_logging(__name__, log_filename="cli.txt")


def _load_formatter_config(config: Optional[str]) -> FormatterConfig:
    loader = ConfigLoader(config) if config else get_config()
    return loader.formatter_config


def on_convert(
    expressions: Iterable[str],
    mode: str = "auto",
    math: bool = False,
    config: Optional[str] = None,
    **kwargs,
) -> Dict[str, Any]:
    """Handle convert command.

    Args:
        expressions: Expressions to convert
        mode: "auto", "molecule" or "unit"
        math: Treat the output as going inside math
        config: Optional config file path

    Returns:
        Dictionary with status and one result per expression

    """
    formatter = ScientificFormatter(_load_formatter_config(config))
    math_override = MathOverride.MATH if math else MathOverride.AUTO

    results = []
    for expression in expressions:
        result = formatter.convert(expression, mode=ModeOverride(mode), math=math_override)
        results.append(
            {"input": expression, "output": result.text, "kind": result.kind.value, "in_math": result.in_math}
        )

    return {"status": "success", "results": results}


def on_buffer(
    text: str,
    position: Optional[int] = None,
    mode: str = "auto",
    math: bool = False,
    config: Optional[str] = None,
    **kwargs,
) -> Dict[str, Any]:
    """Handle buffer command: convert the expression ending at ``position``.

    Without a position the expression at the end of the text is converted,
    ignoring a trailing newline.
    """
    if position is None:
        position = len(text.rstrip("\n"))

    new_text, result, span = convert_at(
        text,
        position,
        config=_load_formatter_config(config),
        mode=ModeOverride(mode),
        math=MathOverride.MATH if math else MathOverride.AUTO,
    )
    if span.is_empty:
        return {"status": "empty", "message": f"No expression found before position {position}", "text": text}

    return {
        "status": "success",
        "text": new_text,
        "input": result.raw,
        "output": result.text,
        "kind": result.kind.value,
        "in_math": result.in_math,
        "span": [span.start, span.end],
    }


def on_units(config: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    """Handle units command: list the effective unit vocabulary."""
    formatter_config = _load_formatter_config(config)
    units = [{"symbol": unit.symbol, "replacement": unit.replacement} for unit in formatter_config.vocabulary]
    return {"status": "success", "builtin": formatter_config.use_builtin_units, "units": units}


def on_serve(host: Optional[str] = None, port: Optional[int] = None, config: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    """Handle serve command: run the WebSocket service until interrupted."""
    from .service.server import main as serve_main

    logger.info("Starting sciformat WebSocket service")
    serve_main(host=host, port=port, config_path=config)
    return {"status": "success", "message": "Server stopped"}
