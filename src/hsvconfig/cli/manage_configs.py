"""CLI for listing and selecting HitScoreVisualizer configs.

This script provides command-line access to the configs folder: list the
documents found there with their compatibility state, and select or unselect
the active configuration.
"""

import asyncio
import json
import sys

import click

from hsvconfig.config.models import ConfigFileInfo
from hsvconfig.config.versioning import format_version
from hsvconfig.container import Container
from hsvconfig.utils.structlog_configurator import configure_structlog


def _version_text(entry: ConfigFileInfo) -> str:
    if entry.configuration is None or entry.configuration.version is None:
        return "-"
    return format_version(entry.configuration.version)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """HitScoreVisualizer Config Manager.

    List, select and unselect HitScoreVisualizer configuration documents.
    """
    ctx.ensure_object(dict)
    container = Container()
    configure_structlog(container.settings_manager().settings.logging)

    store = container.config_store()
    asyncio.run(store.initialize())

    ctx.obj["container"] = container
    ctx.obj["store"] = store


@cli.command("list")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_configs(ctx: click.Context, output_json: bool) -> None:
    """List configs in the configs folder with their state."""
    store = ctx.obj["store"]
    entries = asyncio.run(store.list_available())

    if output_json:
        click.echo(
            json.dumps(
                [
                    {
                        "name": entry.name,
                        "path": entry.path,
                        "state": entry.state.value,
                        "version": _version_text(entry),
                        "selectable": store.is_selectable(entry.state),
                        "active": entry.path == store.current_config_path,
                    }
                    for entry in entries
                ],
                indent=2,
            )
        )
        return

    if not entries:
        click.echo(f"No configs found in {store.configs_dir}")
        return

    for entry in entries:
        marker = "*" if entry.path == store.current_config_path else " "
        state = entry.state.value
        if store.is_selectable(entry.state):
            state = click.style(state, fg="green")
        else:
            state = click.style(state, fg="red")
        click.echo(f"{marker} {entry.name:<40} {_version_text(entry):<10} {state}")


@cli.command()
@click.argument("name")
@click.pass_context
def select(ctx: click.Context, name: str) -> None:
    """Select the config named NAME (file name without extension)."""
    store = ctx.obj["store"]
    entry = asyncio.run(store.select_by_name(name))

    if entry is None:
        click.echo(click.style(f"✗ Error: No config named '{name}'", fg="red"), err=True)
        sys.exit(1)

    if not store.is_selectable(entry.state):
        click.echo(
            click.style(
                f"✗ Error: Config '{name}' cannot be selected (state: {entry.state.value})",
                fg="red",
            ),
            err=True,
        )
        sys.exit(1)

    click.echo(click.style(f"✓ Selected {entry.name}", fg="green"))


@cli.command()
@click.pass_context
def unselect(ctx: click.Context) -> None:
    """Clear the active config."""
    store = ctx.obj["store"]
    store.unselect()
    click.echo("Active config cleared")


@cli.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show the active config."""
    store = ctx.obj["store"]
    if store.current_config is None:
        click.echo("No active config")
        return

    click.echo(f"Path: {store.current_config_path}")
    click.echo(store.current_config.model_dump_json(by_alias=True, indent=2))


def main() -> None:
    """Entry point for the manage-configs command."""
    cli(obj={})


if __name__ == "__main__":
    main()
