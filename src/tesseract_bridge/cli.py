"""CLI for tesseract-bridge - inspect and drive the tesseract executable."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from tesseract_bridge import __version__
from tesseract_bridge.api import Tesseract
from tesseract_bridge.core.config import TesseractConfig
from tesseract_bridge.core.errors import TesseractError
from tesseract_bridge.core.options import RecognitionOptions
from tesseract_bridge.ui.theme import BRIDGE_THEME, STATUS_ICONS


console = Console(theme=BRIDGE_THEME)
err_console = Console(theme=BRIDGE_THEME, stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


def _parse_config_variable(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> list[tuple[str, str]]:
    pairs = []
    for value in values:
        key, sep, val = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {value!r}", ctx=ctx, param=param)
        pairs.append((key, val))
    return pairs


def _run(ctx: click.Context, operation):
    try:
        return operation(ctx.obj)
    except KeyboardInterrupt:
        err_console.print("\n[warning]\\[!] cancelled[/warning]")
        raise click.Abort()
    except TesseractError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="tesseract-bridge")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Log discovery steps and the full tesseract command line",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """tesseract-bridge - locate and run the tesseract OCR executable.

    Usage:
        tesseract-bridge locate
        tesseract-bridge recognize scan.png -l eng --psm 6
    """
    _setup_logging(verbose)

    try:
        config = TesseractConfig.from_file(config_path) if config_path else TesseractConfig()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config")
    if verbose:
        config.show_command = True

    ctx.obj = Tesseract(config)


@cli.command()
@click.pass_context
def locate(ctx: click.Context) -> None:
    """Show where tesseract was found."""
    path = ctx.obj.find_executable()

    if path is None:
        console.print(f"  [error]\\[{STATUS_ICONS['error']}][/error] [tesseract]tesseract[/tesseract] [dim]not found[/dim]")
        ctx.exit(1)

    console.print(f"  [success]\\[{STATUS_ICONS['success']}][/success] [tesseract]tesseract[/tesseract] [dim]{path}[/dim]")


@cli.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Print the output of tesseract --version."""
    output = _run(ctx, lambda tess: tess.version())
    click.echo(output, nl=False)


@cli.command()
@click.pass_context
def langs(ctx: click.Context) -> None:
    """List installed recognition languages."""
    languages = _run(ctx, lambda tess: tess.languages())

    console.print(f"\n[header]languages[/header] [dim]({len(languages)})[/dim]\n")
    for code in languages:
        console.print(f"  {code}")


@cli.command()
@click.argument("image_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-l", "--lang", help="Language code(s), e.g. eng or eng+fra")
@click.option("--dpi", type=click.IntRange(min=1), help="Input resolution")
@click.option("--psm", type=click.IntRange(min=0), help="Page segmentation mode")
@click.option("--oem", type=click.IntRange(min=0), help="OCR engine mode")
@click.option(
    "-c", "config_variables",
    multiple=True,
    callback=_parse_config_variable,
    help="Config variable as key=value (repeatable)",
)
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), help="Timeout in seconds")
@click.pass_context
def recognize(
    ctx: click.Context,
    image_path: Path,
    lang: str | None,
    dpi: int | None,
    psm: int | None,
    oem: int | None,
    config_variables: list[tuple[str, str]],
    timeout: float | None,
) -> None:
    """Recognize text in an image and print it.

    Example:
        tesseract-bridge recognize receipt.png -l eng -c tessedit_char_whitelist=0123456789
    """
    tess: Tesseract = ctx.obj
    defaults = tess.config.options

    options = RecognitionOptions(
        language=lang or defaults.language,
        dpi=dpi if dpi is not None else defaults.dpi,
        psm=psm if psm is not None else defaults.psm,
        oem=oem if oem is not None else defaults.oem,
        config_variables=defaults.config_variables,
    ).with_config(config_variables)

    if timeout is not None:
        tess.config.timeout = timeout

    text = _run(ctx, lambda t: t.image_to_string(image_path, options))
    click.echo(text, nl=False)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
