"""sigproto command line interface."""

from __future__ import annotations

from pathlib import Path

import click

from sigproto import __version__
from sigproto.config import SigprotoConfig, find_config, load_config
from sigproto.errors import DiagnosticRenderer, SignatureError
from sigproto.formatter import SignatureFormatter
from sigproto.go_emitter import GoEmitter
from sigproto.lexer import tokenize
from sigproto.parser import parse
from sigproto.signature import FunctionSignature


def _parse_or_exit(source: str) -> FunctionSignature:
    """Parse a signature, rendering the diagnostic and exiting on failure."""
    try:
        return parse(source)
    except SignatureError as e:
        renderer = DiagnosticRenderer(color=True)
        click.echo(renderer.render(e.diagnostic, e.tokens), err=True)
        raise SystemExit(1)


def _load_config_or_default(config_path: str | None) -> SigprotoConfig:
    if config_path is not None:
        return load_config(Path(config_path))
    try:
        return load_config(find_config())
    except FileNotFoundError:
        return SigprotoConfig()


@click.group()
@click.version_option(__version__, prog_name="sigproto")
def main() -> None:
    """Parse Haskell-style function signatures."""


@main.command()
@click.argument("signature")
def tokens(signature: str) -> None:
    """Print the tokens of a signature, one per line."""
    for tok in tokenize(signature):
        click.echo(repr(tok))


@main.command(name="parse")
@click.argument("signature")
def parse_cmd(signature: str) -> None:
    """Parse a signature and print its structure."""
    sig = _parse_or_exit(signature)
    _dump_signature(sig)


@main.command(name="format")
@click.argument("signature")
@click.option("--no-elide", is_flag=True, help="Write every parameter type explicitly.")
@click.option("--config", "config_path", type=click.Path(exists=True), default=None,
              help="Path to sigproto.toml.")
def format_cmd(signature: str, no_elide: bool, config_path: str | None) -> None:
    """Print a signature in canonical form."""
    config = _load_config_or_default(config_path)
    sig = _parse_or_exit(signature)
    elide = config.format.elide_types and not no_elide
    click.echo(SignatureFormatter(elide_types=elide).format(sig))


@main.command()
@click.argument("signature")
@click.option("--package", "package", default=None, help="Go package name for the stub.")
@click.option("--config", "config_path", type=click.Path(exists=True), default=None,
              help="Path to sigproto.toml.")
def emit(signature: str, package: str | None, config_path: str | None) -> None:
    """Emit a Go function stub for a signature."""
    config = _load_config_or_default(config_path)
    if package is not None:
        config.emit.package = package
    sig = _parse_or_exit(signature)
    click.echo(GoEmitter(config).emit(sig), nl=False)


def _dump_signature(sig: FunctionSignature) -> None:
    """Print a readable signature dump."""
    click.echo("FunctionSignature")
    click.echo(f"  name: {sig.name!r}")
    if sig.instance_context:
        click.echo(f"  instance_context: {' '.join(sig.instance_context)}")
    for label, params in (("inputs", sig.inputs), ("outputs", sig.outputs)):
        if not params:
            click.echo(f"  {label}: []")
            continue
        click.echo(f"  {label}:")
        for p in params:
            click.echo(f"    {p.name}: {p.type_name}")
