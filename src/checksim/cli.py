"""Typer CLI for checksim."""
from __future__ import annotations
import json
import logging
import typer
from pathlib import Path
from rich import print, print_json
from rich.logging import RichHandler
from rich.table import Table

from pydantic import ValidationError

from checksim.art import generate_svg, map_check_attributes, save_svg, simulate_composite
from checksim.art.attributes import Attribute
from checksim.config import DEFAULT_CONFIG_PATH, load_config
from checksim.engine import CompositeTree, load_records, parse_ids, run_permutations, validate_ids
from checksim.errors import ChecksimError

app = typer.Typer(help="Off-chain Checks composite simulator")


def _setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format="%(message)s", handlers=[RichHandler(show_path=False)], force=True)


def _attributes_table(title: str, attrs: list[Attribute]) -> Table:
    table = Table(title=title)
    table.add_column("trait")
    table.add_column("value")
    for attr in attrs:
        table.add_row(attr.trait_type, attr.value)
    return table


def _lookup(batch, token_id: int):
    try:
        return batch.get(token_id)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0])) from exc


def _load(records: Path, *, include_burned: bool = False):
    try:
        return load_records(records, include_burned=include_burned)
    except ChecksimError as exc:
        raise typer.BadParameter(str(exc), param_hint="RECORDS") from exc


@app.callback()
def main(log_level: str = typer.Option("INFO", help="Logging level")):
    _setup_logging(log_level.upper())


@app.command()
def attributes(
    records: Path = typer.Argument(..., help="JSON/JSONL check records"),
    token_id: int = typer.Option(..., "--id", help="Token id"),
):
    batch = _load(records)
    check = _lookup(batch, token_id)
    print(_attributes_table(f"#{token_id}", map_check_attributes(check)))


@app.command()
def render(
    records: Path = typer.Argument(..., help="JSON/JSONL check records"),
    token_id: int = typer.Option(..., "--id", help="Token id"),
    out: Path = typer.Option(Path("check.svg"), help="Output SVG path"),
):
    batch = _load(records, include_burned=True)
    check = _lookup(batch, token_id)
    try:
        svg = generate_svg(check, batch.checks)
    except ChecksimError as exc:
        raise typer.BadParameter(str(exc)) from exc
    print(f"wrote {save_svg(svg, out)}")


@app.command()
def composite(
    records: Path = typer.Argument(..., help="JSON/JSONL check records"),
    keeper: int = typer.Option(..., help="Keeper token id"),
    burner: int = typer.Option(..., help="Burner token id"),
    svg: Path = typer.Option(None, help="Write the composite SVG here"),
):
    batch = _load(records)
    keeper_check, burner_check = _lookup(batch, keeper), _lookup(batch, burner)
    try:
        result = simulate_composite(keeper_check, burner_check, burner)
        if svg is not None:
            save_svg(generate_svg(result, {burner: burner_check}), svg)
    except ChecksimError as exc:
        raise typer.BadParameter(str(exc)) from exc
    print(_attributes_table(f"#{keeper} + #{burner}", map_check_attributes(result)))
    print_json(data=result.to_record())


@app.command()
def l2(
    records: Path = typer.Argument(..., help="JSON/JSONL check records"),
    ids: str = typer.Option(..., help="keeper1,burner1,keeper2,burner2"),
    out: Path = typer.Option(None, help="Directory for node SVGs and tree.json"),
):
    token_ids = parse_ids(ids)
    problem = validate_ids(token_ids)
    if problem or len(token_ids) != 4:
        raise typer.BadParameter(problem or "Enter exactly 4 token IDs.")
    batch = _load(records)
    key = [int(t) for t in token_ids]
    checks = [_lookup(batch, t) for t in key]
    try:
        tree = CompositeTree.build(key, checks)
        if out is not None:
            tree.write_svgs(out)
            (Path(out) / "tree.json").write_text(json.dumps(tree.to_dict(), indent=2))
    except ChecksimError as exc:
        raise typer.BadParameter(str(exc)) from exc
    for label in ("L1a", "L1b", "ABCD"):
        print(_attributes_table(label, tree.attributes(label)))


@app.command()
def permutations(
    records: Path = typer.Argument(..., help="JSON/JSONL check records"),
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, help="YAML config path"),
    seed: int = typer.Option(None, help="Override seed"),
    workers: int = typer.Option(None, help="Worker processes"),
    incremental: bool = typer.Option(False, help="Skip permutations already in the run directory"),
    eligible_only: bool = typer.Option(False, help="Only low-band or gradient checks"),
    run_dir: Path = typer.Option(None, help="Override output directory"),
    render: bool = typer.Option(True, help="Render top-ranked composites"),
):
    try:
        cfg = load_config(config)
        if seed is not None:
            cfg.seed = seed
        if workers is not None:
            cfg.permutations.workers = workers
        cfg.permutations.incremental = cfg.permutations.incremental or incremental
        cfg.permutations.eligible_only = cfg.permutations.eligible_only or eligible_only
        if run_dir is not None:
            cfg.outputs.run_dir = run_dir
        cfg.render.enabled = cfg.render.enabled and render
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _setup_logging(cfg.logging.level)
    batch = _load(records)
    for rejection in batch.rejected:
        print(f"[yellow]rejected[/yellow] {rejection.token_id}: {rejection.reason}")
    run_permutations(cfg, batch)


@app.command()
def analyze(run: Path = typer.Option(..., help="Run directory")):
    from checksim.analysis import plot_traits, write_report

    plot_traits(run)
    write_report(run)
    print(f"Analysis complete for {run}")


@app.command()
def doctor():
    import importlib.util

    from checksim.core.rng import keccak256

    keccak_ok = keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    tabulate_ok = importlib.util.find_spec("tabulate") is not None
    print({"keccak256": keccak_ok, "markdown_tables": tabulate_ok})


if __name__ == "__main__":
    app()
