"""
DATEVconnect CLI - run and inspect the DATEVconnect nodes outside a workflow host.

Provides commands for:
- Listing and describing registered nodes
- Checking credentials
- Running a node once against DATEVconnect
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from node_registry import NodeRegistry
from node_sdk.basenode import NodeExecutionContext, NodeOperationError
from node_sdk.items import NodeItem

from .config import get_settings
from .credentials import CREDENTIAL_NAME, DatevConnectApiCredential
from .logging import setup_logging


logger = logging.getLogger("datev_connect")


def build_registry() -> NodeRegistry:
    """Registry holding the bundled pack plus any installed packs."""
    from nodepacks.datev_connect import register_nodes

    registry = NodeRegistry()
    manifest, node_classes = register_nodes()
    registry.register_pack(manifest, node_classes)
    registry.discover_entry_points()
    return registry


def _read_json(path: str) -> Any:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"{path} is not valid JSON: {e.msg}") from e


def _load_items(path: Optional[str]) -> tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """
    Read input items; each entry is ``{"json": {...}, "parameters": {...}}``
    or a bare JSON object. Without a file a single empty item is used.
    """
    if path is None:
        return [{"json": {}}], []

    raw = _read_json(path)
    if not isinstance(raw, list):
        raise click.BadParameter("items file must contain a JSON array")

    input_data = []
    item_parameters = []
    for entry in raw:
        entry = entry if isinstance(entry, dict) else {"value": entry}
        item_parameters.append(entry.get("parameters") or {})
        payload = {key: value for key, value in entry.items() if key != "parameters"}
        input_data.append({"json": NodeItem.from_dict(payload).json_data})
    return input_data, item_parameters


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("-q", "--quiet", is_flag=True, help="Suppress output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool):
    """DATEVconnect nodes - master data and accounting."""
    ctx.ensure_object(dict)
    setup_logging()

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger().setLevel(logging.ERROR)

    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


@cli.command("nodes")
def nodes_list():
    """List registered nodes."""
    registry = build_registry()
    click.echo("Registered nodes:")
    for node_def in registry.list_nodes():
        click.echo(f"  {node_def.node_type}: {node_def.display_name}")


@cli.command("describe")
@click.argument("node_type")
def describe(node_type: str):
    """Print the descriptor of NODE_TYPE as JSON."""
    registry = build_registry()
    node_def = registry.get_node(node_type)
    if node_def is None:
        click.echo(f"Error: Unknown node type: {node_type}", err=True)
        sys.exit(1)
    click.echo(node_def.model_dump_json(indent=2))


@cli.command("check-credentials")
def check_credentials():
    """Log in with the DATEV_CONNECT_* credentials."""
    result = DatevConnectApiCredential(get_settings().credentials()).test()
    click.echo(result["message"], err=not result["success"])
    sys.exit(0 if result["success"] else 1)


@cli.command("run")
@click.argument("node_type")
@click.option(
    "--parameters", "-p",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with node parameters (resource, operation, ...)"
)
@click.option(
    "--items", "-i",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with input items"
)
@click.option(
    "--continue-on-fail", is_flag=True,
    help="Record failed items instead of aborting"
)
def run(node_type: str, parameters: str, items: Optional[str], continue_on_fail: bool):
    """
    Run NODE_TYPE once and print the output records.

    Examples:

        datev-connect run datevConnect.masterData -p params.json

        datev-connect run datevConnect.accounting -p params.json -i items.json --continue-on-fail
    """
    registry = build_registry()
    if node_type not in registry:
        click.echo(f"Error: Unknown node type: {node_type}", err=True)
        sys.exit(1)

    node_parameters = _read_json(parameters)
    if not isinstance(node_parameters, dict):
        raise click.BadParameter("parameters file must contain a JSON object")
    input_data, item_parameters = _load_items(items)

    context = NodeExecutionContext(
        parameters=node_parameters,
        credentials={CREDENTIAL_NAME: get_settings().credentials()},
        input_data=input_data,
        item_parameters=item_parameters,
        continue_on_fail=continue_on_fail,
        node_name=node_type,
    )
    node = registry.create_node(node_type, context)

    try:
        output = node.execute()
    except NodeOperationError as e:
        suffix = f" (item {e.item_index})" if e.item_index is not None else ""
        click.echo(f"Error: {e.message}{suffix}", err=True)
        sys.exit(1)

    click.echo(json.dumps(output[0], indent=2, default=str))


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
