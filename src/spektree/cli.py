from typing import Optional
import typer
from pydantic import ValidationError
from .config import load_config, build_notifier, AppConfig
from .errors import SpecLoadError
from .logging import setup_logging
from .runners.runner import TreeWalker, load_spec
from .tree.node import SpecNode

app = typer.Typer(add_completion=False, help="spektree - console reporting for nested test specs")

def _load(target: str) -> SpecNode:
    try:
        return load_spec(target)
    except SpecLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

@app.command()
def run(
    target: str = typer.Argument(..., help="Spec to run, e.g. mypkg.specs:spec"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    silent: bool = typer.Option(False, "--silent", help="Only print the final counts"),
):
    try:
        cfg: AppConfig = load_config(config)
    except (OSError, ValidationError) as e:
        typer.echo(f"Error: invalid config {config!r}: {e}", err=True)
        raise typer.Exit(code=2)
    if silent:
        cfg.notifier.kind = "silent"
    log = setup_logging(cfg.log_level)
    root = _load(target)
    log.debug("running %s", target)
    summary = TreeWalker(build_notifier(cfg)).run(root)
    if silent:
        typer.echo(f"Done. {summary.passed} passed, {summary.failed} failed, {summary.ignored} ignored.")
    raise typer.Exit(code=0 if summary.ok else 1)

@app.command("list")
def list_tests(target: str = typer.Argument(..., help="Spec to list, e.g. mypkg.specs:spec")):
    def show(node: SpecNode, depth: int):
        typer.echo("  " * depth + node.name + (" (pending)" if node.pending else ""))
        for child in node.children:
            show(child, depth + 1)
    show(_load(target), 0)
    raise typer.Exit(code=0)
