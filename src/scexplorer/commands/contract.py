"""
Contract commands - Query and verify smart contracts on the explorer.

Subcommands:
- show:   contract metadata by address
- abi:    contract ABI by address
- verify: submit source code for verification
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Optional

import click

from ..config import load_config
from ..errors import ScExplorerError
from ..services.smartcontract import SmartContractService
from ..transport.api import ApiService
from ..utils import dump_json, parse_libraries, read_text_file


api_url_option = click.option(
    "--api-url",
    envvar="SCEXPLORER_API_URL",
    default=None,
    help="Explorer API base URL",
)


def _build_api(api_url: Optional[str]) -> ApiService:
    config = load_config()
    base_url = api_url.rstrip("/") if api_url else config.api_url
    return ApiService(base_url=base_url, timeout=config.timeout)


def _read_option_file(path: Path, param_hint: str) -> str:
    try:
        return read_text_file(path)
    except UnicodeDecodeError as exc:
        raise click.BadParameter(f"{path} is not valid UTF-8: {exc}", param_hint=param_hint) from exc


def _run(action: Callable[[SmartContractService], Any], api_url: Optional[str]) -> None:
    try:
        with _build_api(api_url) as api:
            result = action(SmartContractService(api))
    except ScExplorerError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    click.echo(dump_json(result))


@click.group()
def contract() -> None:
    """Query and verify smart contracts."""
    pass


@contract.command()
@click.argument("address")
@api_url_option
def show(address: str, api_url: Optional[str]) -> None:
    """Show contract metadata."""
    _run(lambda svc: svc.get_one_by_address(address), api_url)


@contract.command()
@click.argument("address")
@api_url_option
def abi(address: str, api_url: Optional[str]) -> None:
    """Show contract ABI."""
    _run(lambda svc: svc.get_abi_by_address(address), api_url)


@contract.command()
@click.argument("address")
@click.option(
    "--source",
    "source_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Solidity source file (or standard JSON input for multi-file)",
)
@click.option(
    "--abi",
    "abi_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="ABI JSON file",
)
@click.option("--compiler-version", required=True, help="Compiler version, e.g. 0.8.0")
@click.option(
    "--version-full-name",
    required=True,
    help="Full compiler version, e.g. v0.8.0+commit.c7dfd78e",
)
@click.option("--optimizer/--no-optimizer", default=False, help="Optimizer enabled")
@click.option("--optimizer-runs", default=200, type=int, help="Optimizer runs")
@click.option(
    "--single-file/--multi-file",
    default=True,
    help="Source is a single flattened file",
)
@click.option("--lib", "libs", multiple=True, help="Linked library as NAME=ADDRESS")
@click.option("--evm", default="default", help="Target EVM version")
@click.option("--via-ir/--no-via-ir", default=False, help="Compile via IR")
@api_url_option
def verify(
    address: str,
    source_path: Path,
    abi_path: Optional[Path],
    compiler_version: str,
    version_full_name: str,
    optimizer: bool,
    optimizer_runs: int,
    single_file: bool,
    libs: tuple[str, ...],
    evm: str,
    via_ir: bool,
    api_url: Optional[str],
) -> None:
    """
    Submit contract source code for verification.

    Compilation and bytecode matching run on the explorer backend.
    """
    try:
        libraries = parse_libraries(libs)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--lib") from exc

    source_code = _read_option_file(source_path, "--source")
    abi_text = _read_option_file(abi_path, "--abi") if abi_path else None

    _run(
        lambda svc: svc.verify_source_code(
            address,
            source_code,
            abi_text,
            compiler_version,
            version_full_name,
            optimizer,
            optimizer_runs,
            single_file,
            libraries,
            evm,
            via_ir,
        ),
        api_url,
    )
