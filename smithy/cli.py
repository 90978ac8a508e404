"""CLI entry point for Smithy."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.syntax import Syntax
from rich.markup import escape
from rich.table import Table

from smithy.builder import Smithy
from smithy.config import DEFAULT_CONFIG_TEMPLATE, PluginSpec, SmithyConfig, load_config
from smithy.errors import SmithyError
from smithy.log import configure_logging
from smithy.plugins import PluginLoader

app = typer.Typer(
    name="smithy",
    help="Build an output tree from a directory of documents through a plugin chain.",
)

config_app = typer.Typer(help="Manage Smithy configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: SmithyConfig | None = None


def _get_config() -> SmithyConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to smithy.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


@app.command()
def build(
    input_dir: Annotated[
        str | None, typer.Argument(help="Input directory (default: config input_dir)")
    ] = None,
    output_dir: Annotated[
        str | None, typer.Argument(help="Output directory, replaced on every build")
    ] = None,
    plugin: Annotated[
        list[str] | None,
        typer.Option("--plugin", "-p", help="Plugin name or module:Class, repeatable"),
    ] = None,
    sort: Annotated[bool, typer.Option("--sort", help="Order documents by path")] = False,
    staged: Annotated[
        bool, typer.Option("--staged", help="Write to a temp dir, then swap into place")
    ] = False,
) -> None:
    """Run a build: load documents, apply plugins, write the output tree."""
    cfg = _get_config().model_copy(deep=True)
    if input_dir:
        cfg.input_dir = input_dir
    if output_dir:
        cfg.output_dir = output_dir
    if plugin:
        cfg.plugins = [PluginSpec(name=name) for name in plugin]
    cfg.loader.sort = cfg.loader.sort or sort
    cfg.output.staged = cfg.output.staged or staged

    try:
        smithy = Smithy.from_config(cfg)
        report = smithy.build()
    except SmithyError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title="Smithy Build")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Input", cfg.input_dir)
    table.add_row("Output", cfg.output_dir)
    table.add_row("Plugins", ", ".join(report.plugins) or "-")
    table.add_row("Loaded", str(report.loaded))
    table.add_row("Written", str(report.written))
    table.add_row("Duration", f"{report.duration:.2f}s")
    rprint(table)


@app.command()
def plugins() -> None:
    """List plugins registered under the smithy.plugins entry point group."""
    found = PluginLoader().discover()
    if not found:
        rprint("[yellow]No plugins registered.[/yellow]")
        return

    table = Table(title=f"Plugins ({len(found)})")
    table.add_column("Name", style="cyan")
    table.add_column("Target", style="green")
    for name, target in sorted(found.items()):
        table.add_row(name, target)
    rprint(table)


@config_app.command("init")
def config_init(
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Write a default smithy.yaml to the current directory."""
    dest = Path("smithy.yaml")
    if dest.exists() and not force:
        rprint(f"[yellow]{dest} already exists[/yellow] (use --force to overwrite)")
        raise typer.Exit(1)
    dest.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {dest}")


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration."""
    cfg = _get_config()
    dumped = yaml.safe_dump(cfg.model_dump(), default_flow_style=False, sort_keys=False)
    rprint(Syntax(dumped, "yaml"))


if __name__ == "__main__":
    app()
