"""CLI entry point for seqlayout."""

import logging
import sys

import click

from seqlayout.config import LayoutConfig
from seqlayout.layout.engine import SequenceLayout
from seqlayout.loaders import loads
from seqlayout.renderers.json import JsonRenderer

_DEFAULTS = LayoutConfig()


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--width", "-w", "width", type=float, default=_DEFAULTS.page_width, help="Page width in points")
@click.option("--height", "-h", "height", type=float, default=_DEFAULTS.page_height, help="Page height in points")
@click.option("--margin", "-m", "margin", type=float, default=_DEFAULTS.margin, help="Page margin in points")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log debug output to stderr")
def main(input: str | None, width: float, height: float, margin: float, output: str | None, verbose: bool) -> None:
    """Sequence diagram layout: JSON description in, JSON geometry out."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    config = LayoutConfig(page_width=width, page_height=height, margin=margin)

    try:
        loaded = loads(text)
        layout = SequenceLayout(config, style=loaded.style).layout(loaded.model)
    except ValueError as e:
        click.echo(f"layout error:\n{e}", err=True)
        sys.exit(1)

    rendered = JsonRenderer().render(layout)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
