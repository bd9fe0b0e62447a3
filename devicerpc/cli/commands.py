"""CLI commands for devicerpc.

Decodes captured response envelopes offline, which is handy when checking what
a device host actually sent for a request.
"""

import sys
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic_core import to_jsonable_python
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from devicerpc import __logo__, __version__
from devicerpc.config import DecoderConfig, load_config
from devicerpc.rpc import ApiCall, Invoke, ListDevices, ListMethods, decode_response, into_outcome
from devicerpc.utils.exceptions import DecodeError
from devicerpc.utils.logging import configure_logging

app = typer.Typer(
    name="devicerpc",
    help=f"{__logo__} devicerpc - device RPC response decoder",
    no_args_is_help=True,
)

console = Console()

RETURN_TYPES: dict[str, Any] = {
    "void": None,
    "any": Any,
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "list": list[Any],
    "dict": dict[str, Any],
}

EXIT_REMOTE_ERROR = 1
EXIT_DECODE_ERROR = 2


def _build_op(op: str, address: str, method: str, returns: str) -> ApiCall:
    if op == "list":
        return ListDevices()
    if op == "methods":
        return ListMethods(address)
    if op == "invoke":
        if returns not in RETURN_TYPES:
            raise typer.BadParameter(
                f"unknown return type {returns!r}; choose from {', '.join(RETURN_TYPES)}",
                param_hint="--returns",
            )
        return Invoke.of(address, method, RETURN_TYPES[returns])
    raise typer.BadParameter(f"unknown operation {op!r}; choose from list, methods, invoke", param_hint="--op")


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source).expanduser()
    if not path.exists():
        console.print(f"[red]File not found: {escape(str(path))}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _print_payload(op: ApiCall, payload: Any) -> None:
    if isinstance(op, ListDevices):
        table = Table(title="Devices")
        table.add_column("Address", style="cyan")
        table.add_column("Type")
        table.add_column("Label", style="dim")
        for device in payload:
            table.add_row(device.address, device.type, device.label or "")
        console.print(table)
        return
    if isinstance(op, ListMethods):
        table = Table(title=f"Methods of {op.address}")
        table.add_column("Name", style="cyan")
        table.add_column("Params")
        table.add_column("Returns")
        for m in payload:
            params = ", ".join(f"{p.name}{'?' if p.optional else ''}: {p.type}" for p in m.params)
            table.add_row(m.name, params, m.returns or "void")
        console.print(table)
        return
    if payload is None:
        console.print("[green]✓[/green] ok (no return value)")
        return
    console.print_json(data=to_jsonable_python(payload))


@app.command()
def decode(
    source: str = typer.Argument(..., help="Envelope JSON file, or - for stdin"),
    op: str = typer.Option("invoke", "--op", "-o", help="Operation kind: list, methods or invoke"),
    address: str = typer.Option("", "--address", "-a", help="Device address (methods/invoke)"),
    method: str = typer.Option("", "--method", "-m", help="Method name (invoke)"),
    returns: str = typer.Option("void", "--returns", "-r", help="Return type for invoke: void, any, int, float, str, bool, list, dict"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level for decoder diagnostics (default: config log_level)"),
) -> None:
    """Decode a response envelope for the given operation."""
    try:
        cfg: DecoderConfig = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    configure_logging(log_level or cfg.log_level)

    call = _build_op(op, address, method, returns)
    raw = _read_input(source)
    try:
        response = decode_response(raw, call, config=cfg)
    except DecodeError as e:
        console.print(f"[red]Decode error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_DECODE_ERROR) from e

    outcome = into_outcome(response)
    if not outcome.ok:
        console.print(f"[red]Remote error:[/red] {escape(outcome.error or '')}")
        raise typer.Exit(EXIT_REMOTE_ERROR)
    _print_payload(call, outcome.payload)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"{__logo__} devicerpc v{__version__}")


if __name__ == "__main__":
    app()
