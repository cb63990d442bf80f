"""
scexplorer CLI

Command-line interface for the smart contract endpoints of the explorer API.

Commands:
  contract show    - Show contract metadata
  contract abi     - Show contract ABI
  contract verify  - Submit source code for verification
  config set       - Persist a configuration value
  info             - Show version and effective configuration
"""

from __future__ import annotations

import logging
import sys

import click

from .config import API_URL_VAR, SCEXPLORER_ENV, TIMEOUT_VAR, ConfigError, load_config, save_config_value


# ============ Constants ============

VERSION = "0.1.0"

CONFIG_KEYS = {
    "api-url": API_URL_VAR,
    "timeout": TIMEOUT_VAR,
}


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="scexplorer")
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP requests")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """scexplorer: smart contract explorer client."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .commands.contract import contract

cli.add_command(contract)


# ============ Config ============


@cli.group()
def config() -> None:
    """Manage configuration."""
    pass


@config.command("set")
@click.argument("key", type=click.Choice(sorted(CONFIG_KEYS)))
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Persist a configuration value to ~/.scexplorer/.env."""
    env_path = save_config_value(CONFIG_KEYS[key], value, SCEXPLORER_ENV)
    click.echo(f"Saved {CONFIG_KEYS[key]} to {env_path}")


# ============ Info ============


@cli.command()
def info() -> None:
    """Show version and effective configuration."""
    click.echo(f"scexplorer v{VERSION}")
    try:
        cfg = load_config(SCEXPLORER_ENV)
    except ConfigError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    click.echo(f"  API URL:  {cfg.api_url}")
    click.echo(f"  Timeout:  {cfg.timeout:g}s")
    click.echo(f"  Env file: {SCEXPLORER_ENV}")


# ============ Entry Points ============


def main() -> None:
    """scexplorer CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
