import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ladder._bits import format_bits, parse_bits
from ladder._circuit import Circuit, build_circuit
from ladder._errors import ReducerError
from ladder._io import export_circuit, load_circuit

from .config import ConfigError, get_config
from .query import TooManyLeavesError, get_circuit_summary, get_circuit_tree, truth_table
from .render import render_circuit_tree, render_summary, render_truth_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

CircuitArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to circuit TOML file (defaults to [tool.ladder].circuit)"),
]
InputOption = Annotated[
    str | None,
    typer.Option("-i", "--input", help="Leaf inputs as a bit string, e.g. 0110"),
]
ProgramOption = Annotated[
    str | None,
    typer.Option("-p", "--program", help="Program bits for every contact, root first"),
]
StateOption = Annotated[
    str | None,
    typer.Option("-s", "--state", help="State bits for every contact, root first"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Ladder CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    return typer.Exit(code=1)


def _resolve_circuit_path(path: Path | None) -> Path:
    if path is not None:
        return path
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(str(e)) from e
    if config.circuit is None:
        msg = "No circuit given and no [tool.ladder].circuit configured in pyproject.toml"
        raise _fail(msg)
    logger.debug("Using circuit from config: %s", config.circuit)
    return config.circuit


def _load(
    path: Path | None,
    *,
    input: str | None = None,  # noqa: A002
    program: str | None = None,
    state: str | None = None,
) -> Circuit:
    """Load a circuit and apply bit overrides given on the command line."""
    circuit_path = _resolve_circuit_path(path)
    err_console.print(f"[cyan]Loading circuit from:[/cyan] {circuit_path}")
    try:
        circuit = build_circuit(load_circuit(circuit_path))
        reducer = circuit.reducer
        if program is not None:
            reducer.reprogram(parse_bits(program))
        if state is not None:
            reducer.reconfigure(parse_bits(state))
        if input is not None:
            reducer.reinput(parse_bits(input))
    except (OSError, ReducerError) as e:
        raise _fail(str(e)) from e
    return circuit


@app.command()
def check(path: CircuitArgument = None) -> None:
    """Validate a circuit and print a summary."""
    circuit = _load(path)
    render_summary(get_circuit_summary(circuit), err_console)
    err_console.print("[green]✓ Circuit is valid[/green]")


@app.command()
def show(
    path: CircuitArgument = None,
    *,
    input: InputOption = None,  # noqa: A002
    program: ProgramOption = None,
    state: StateOption = None,
) -> None:
    """Render the circuit as a tree with every contact's output."""
    circuit = _load(path, input=input, program=program, state=state)
    render_circuit_tree(get_circuit_tree(circuit), out_console)


@app.command("eval")
def eval_(
    path: CircuitArgument = None,
    *,
    input: InputOption = None,  # noqa: A002
    program: ProgramOption = None,
    state: StateOption = None,
) -> None:
    """Print the output bit of the circuit."""
    circuit = _load(path, input=input, program=program, state=state)
    reducer = circuit.reducer
    logger.debug("input=%s output computed from %d contacts", format_bits(reducer.input()), reducer.node_count)
    out_console.print(format_bits([reducer.output()]))


@app.command()
def table(
    path: CircuitArgument = None,
    *,
    program: ProgramOption = None,
    state: StateOption = None,
) -> None:
    """Print the truth table over every combination of leaf inputs."""
    circuit = _load(path, program=program, state=state)
    try:
        rows = truth_table(circuit)
    except TooManyLeavesError as e:
        raise _fail(str(e)) from e
    render_truth_table(circuit.leaf_names(), rows, out_console)


@app.command()
def export(
    path: CircuitArgument = None,
    *,
    output: Annotated[
        Path,
        typer.Option("-o", "--output", help="Path to output TOML file"),
    ],
    input: InputOption = None,  # noqa: A002
    program: ProgramOption = None,
    state: StateOption = None,
) -> None:
    """Write the circuit, with any bit overrides applied, to a TOML file."""
    circuit = _load(path, input=input, program=program, state=state)
    export_circuit(circuit.to_spec(), output)
    err_console.print(f"[green]✓ Exported circuit to:[/green] {output}")


def main() -> None:
    app()
