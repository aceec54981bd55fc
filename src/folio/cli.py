"""Folio command line interface."""

import importlib.util
from pathlib import Path
from typing import Callable, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from folio import __version__
from folio.core.config import LoggingConfig, load_config
from folio.core.errors import ConfigurationError, FolioError
from folio.core.logging import configure_logging
from folio.pipeline.engine import Engine

app = typer.Typer(help="Folio - composable content-processing pipelines")
console = Console()


def load_recipe(recipe_path: Path) -> Callable[[Engine], None]:
    """Load the ``configure(engine)`` function from a recipe file.

    Args:
        recipe_path: Path to a Python file defining ``configure``

    Returns:
        The recipe's configure function

    Raises:
        ConfigurationError: If the file cannot be loaded or has no
            ``configure`` function
    """
    spec = importlib.util.spec_from_file_location(f"folio_recipe_{recipe_path.stem}", recipe_path)
    if spec is None or spec.loader is None:
        raise ConfigurationError(
            f"Cannot load recipe: {recipe_path}",
            details={'recipe': str(recipe_path)}
        )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    configure = getattr(module, 'configure', None)
    if not callable(configure):
        raise ConfigurationError(
            f"Recipe has no configure(engine) function: {recipe_path}",
            details={'recipe': str(recipe_path)}
        )
    return configure


def display_results(engine: Engine) -> None:
    """Print the document count of every pipeline."""
    table = Table(title="Folio Pipelines")
    table.add_column("Pipeline", style="cyan")
    table.add_column("Modules", style="yellow")
    table.add_column("Documents", style="green")
    for name, pipeline in engine.pipelines.items():
        table.add_row(
            name,
            str(len(pipeline.modules)),
            str(len(engine.documents.get(name, [])))
        )
    console.print(table)


@app.command()
def run(
    recipe: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Python file defining configure(engine)"
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML configuration file"
    ),
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Input directory, overrides the configuration"
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level, overrides the configuration"
    )
) -> None:
    """Run the pipelines defined by a recipe."""
    try:
        config = load_config(config_path)
        if log_level:
            try:
                config.logging = LoggingConfig(level=log_level, format=config.logging.format)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid log level: {log_level}") from e
        if input_path:
            config.engine.input_path = input_path
        configure_logging(config.logging)

        engine = Engine(config)
        load_recipe(recipe)(engine)
        engine.execute()
    except FolioError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(code=1)
    except Exception as e:
        console.print(f"[red]{type(e).__name__}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    display_results(engine)


@app.command()
def version() -> None:
    """Show the Folio version."""
    console.print(f"folio {__version__}")


if __name__ == "__main__":
    app()
