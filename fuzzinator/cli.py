"""
Fuzzinator - CLI Interface.

A command-line interface for the Fuzzinator fuzzy string-similarity engine.
Ranks candidate strings against a root string, prints encoded vectors and
computes distances under a preset or custom configuration.

Usage Examples:
    # Rank candidates against a root string
    fuzzinator rank cat bat dog "cat food"

    # Rank candidates read from a file, one per line
    fuzzinator rank "new york" --candidates-file cities.txt --threshold 500

    # Use a preset and the L1 formula
    fuzzinator rank "new york" -f cities.txt --preset focus_drop_near --formula l1

    # Override configuration from a JSON file and log the run
    fuzzinator rank cat bat dog --config tuning.json --log-file rank.log --verbose

    # Inspect a single string or pair
    fuzzinator vector "Cat"
    fuzzinator distance cat Cat
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console

from fuzzinator import __version__
from fuzzinator.errors import FuzzinatorError
from fuzzinator.orchestration import RankOrchestrator
from fuzzinator.presets import DEFAULT_PRESET, TUNINGS, get_preset
from fuzzinator.ranking import Fuzzinator
from fuzzinator.ui import RankTUI

# Initialize Typer app
app = typer.Typer(
    name="fuzzinator",
    help="Fuzzinator - Configurable fuzzy string ranking.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console and display for consistent output formatting
console = Console()
tui = RankTUI(console=console)


def print_error(message: str) -> None:
    """Print an error in the CLI error format, escaping any markup."""
    tui.display_error(message)


class FormulaChoice(str, Enum):
    l1 = "l1"
    l2 = "l2"


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"Fuzzinator v{__version__}")
        raise typer.Exit()


def load_config_file(config_path: Path) -> Dict[str, Any]:
    """
    Load a partial configuration override from a JSON file.

    Args:
        config_path: Path to a JSON object shaped like the engine's overrides.

    Returns:
        The parsed override mapping.

    Raises:
        typer.Exit: If the file is missing, unreadable or not a JSON object.
    """
    if not config_path.is_file():
        print_error(f"Config file does not exist: {config_path}")
        raise typer.Exit(1)

    try:
        overrides = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON in {config_path}: {e}")
        raise typer.Exit(1)
    except OSError as e:
        print_error(f"Cannot read config file: {e}")
        raise typer.Exit(1)

    if not isinstance(overrides, dict):
        print_error(f"Config file must contain a JSON object: {config_path}")
        raise typer.Exit(1)
    return overrides


def build_engine(
    preset: str,
    config_path: Optional[Path],
    formula: Optional[FormulaChoice],
) -> Fuzzinator:
    """
    Build an engine from a preset, an optional JSON override and flags.

    Layers, lowest precedence first: preset, config file, --formula.

    Raises:
        typer.Exit: If the preset is unknown or the configuration is invalid.
    """
    try:
        engine = Fuzzinator(get_preset(preset))
        if config_path is not None:
            engine.reconfigure(load_config_file(config_path))
        if formula is not None:
            engine.reconfigure({"scoring": {"formula": formula.value}})
    except (FuzzinatorError, TypeError) as e:
        print_error(str(e))
        raise typer.Exit(1)
    return engine


def read_candidates(candidates: List[str], candidates_file: Optional[Path]) -> List[str]:
    """
    Collect candidates from arguments and an optional file.

    File candidates follow argument candidates; blank lines are skipped.

    Raises:
        typer.Exit: If the file cannot be read.
    """
    space = list(candidates)
    if candidates_file is not None:
        try:
            lines = candidates_file.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            print_error(f"Cannot read candidates file: {e}")
            raise typer.Exit(1)
        space.extend(line for line in lines if line.strip())
    return space


PRESET_OPTION = typer.Option(
    DEFAULT_PRESET,
    "--preset",
    "-p",
    help="Named preset configuration.",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-C",
    help="JSON file with configuration overrides.",
)
FORMULA_OPTION = typer.Option(
    None,
    "--formula",
    help="Distance formula (overrides preset and config file).",
    case_sensitive=False,
)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Fuzzinator - Configurable fuzzy string ranking."""
    pass


@app.command()
def rank(
    root: str = typer.Argument(..., help="String to rank candidates against."),
    candidates: Optional[List[str]] = typer.Argument(None, help="Candidate strings."),
    candidates_file: Optional[Path] = typer.Option(
        None,
        "--candidates-file",
        "-f",
        help="File with one candidate per line.",
    ),
    threshold: Optional[float] = typer.Option(
        None,
        "--threshold",
        "-t",
        help="Keep only candidates with distance <= threshold (0 disables).",
        min=0.0,
    ),
    no_sort: bool = typer.Option(
        False,
        "--no-sort",
        help="Keep candidates in input order.",
    ),
    preset: str = PRESET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    formula: Optional[FormulaChoice] = FORMULA_OPTION,
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        "-l",
        help="Path for log file output.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output.",
    ),
) -> None:
    """
    Rank candidate strings by similarity to ROOT.

    Candidates come from the arguments and/or --candidates-file. Results
    are shown with their distance and a score in (0, 100%].
    """
    space = read_candidates(candidates or [], candidates_file)
    if not space:
        console.print("[yellow]No candidates given.[/yellow]")
        raise typer.Exit(1)

    engine = build_engine(preset, config, formula)
    orchestrator = RankOrchestrator(
        engine=engine,
        log_file_path=log_file,
        preset=preset,
        verbose=verbose,
        tui=tui,
    )

    try:
        orchestrator.run_rank_workflow(
            root=root,
            space=space,
            threshold=threshold,
            sort=not no_sort,
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Ranking interrupted by user.[/yellow]")
        raise typer.Exit(130)
    except FuzzinatorError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def distance(
    first: str = typer.Argument(..., help="First string."),
    second: str = typer.Argument(..., help="Second string."),
    preset: str = PRESET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    formula: Optional[FormulaChoice] = FORMULA_OPTION,
) -> None:
    """Show the distance and score between two strings."""
    engine = build_engine(preset, config, formula)
    try:
        dist = engine.compute_distance(first, second)
    except FuzzinatorError as e:
        print_error(str(e))
        raise typer.Exit(1)
    tui.display_distance(first, second, dist, Fuzzinator.bound(dist))


@app.command()
def vector(
    text: str = typer.Argument(..., help="String to encode."),
    preset: str = PRESET_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show full-precision values.",
    ),
) -> None:
    """Show the encoded vector of a string."""
    engine = build_engine(preset, config, None)
    tui.display_vector(text, engine.compute_vector(text), verbose=verbose)


@app.command()
def presets() -> None:
    """List the named preset configurations."""
    tui.display_presets(TUNINGS)


if __name__ == "__main__":
    app()
