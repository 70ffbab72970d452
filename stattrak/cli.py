#!filepath: stattrak/cli.py
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from stattrak import __version__
from stattrak.allocation.damage_allocator import DamageAllocator
from stattrak.config.app_config import AppConfig
from stattrak.ledger.stat_ledger import StatLedger
from stattrak.utils.errors import UserInputError
from stattrak.utils.logger import logs, init_logging

app = typer.Typer(help="StatTrak lore ledger CLI")

_state = {"config": None}


@app.callback()
def main(
        config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
):
    def _load():
        try:
            return AppConfig.load(str(config) if config else None)
        except FileNotFoundError as e:
            raise UserInputError(str(e))

    cfg = _run(_load)
    init_logging(cfg.log)
    _state["config"] = cfg


def _ledger() -> StatLedger:
    cfg = _state["config"] or AppConfig.load()
    return StatLedger(marker=cfg.ledger.marker)


def _read_lore(path: Path) -> list[str]:
    if not path.exists():
        raise UserInputError(f"lore file not found: {path}")
    return path.read_text(encoding="utf-8").splitlines()


def _write_lore(path: Path, lines: list[str]) -> None:
    path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")


def _run(fn):
    try:
        return fn()
    except UserInputError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def show(lore: Path):
    """
    List every statistic stored in a lore file
    """

    def _show():
        records = _ledger().records(_read_lore(lore))
        table = Table(title=str(lore))
        table.add_column("Statistic")
        table.add_column("Value", justify="right")
        for r in records:
            table.add_row(r.name, StatLedger.format_value(r.value))
        Console().print(table)

    _run(_show)


@app.command()
def get(lore: Path, name: str):
    """
    Print one statistic (0 when absent or unreadable)
    """
    _run(lambda: print(StatLedger.format_value(_ledger().decode(_read_lore(lore), name))))


@app.command("set")
def set_(
        lore: Path,
        name: str,
        value: float,
        write: bool = typer.Option(False, "--write", "-w", help="write back to the file"),
):
    """
    Set a statistic; prints the updated lore
    """

    def _set():
        ledger = _ledger()
        lines = ledger.encode(_read_lore(lore), {name: value})
        _emit(lore, lines, write)

    _run(_set)


@app.command()
def bump(
        lore: Path,
        name: str,
        by: int = typer.Option(1, "--by", help="increment"),
        write: bool = typer.Option(False, "--write", "-w", help="write back to the file"),
):
    """
    Increment a counter statistic
    """

    def _bump():
        ledger = _ledger()
        lines = _read_lore(lore)
        current = int(ledger.decode(lines, name))
        _emit(lore, ledger.encode(lines, {name: current + by}), write)

    _run(_bump)


@app.command()
def split(total: float, current: List[float]):
    """
    Split TOTAL across targets with the given CURRENT values
    """
    result = DamageAllocator.allocate(total, list(enumerate(current)))
    for idx, new in result:
        print(f"{idx}: {StatLedger.format_value(current[idx])} -> {StatLedger.format_value(new)}")


def _emit(path: Path, lines: list[str], write: bool) -> None:
    if write:
        _write_lore(path, lines)
        logs.info(f"[cli] wrote {len(lines)} lines to {path}")
    for line in lines:
        typer.echo(line)


if __name__ == "__main__":
    app()

# python -m stattrak.cli show lore.txt
