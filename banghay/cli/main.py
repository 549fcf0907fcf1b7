"""
Command-line interface: conjugate, paradigm, batch.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from tqdm import tqdm

from banghay.core.exceptions import BanghayError
from banghay.core.models import Aspect, ConjugatorConfig, Focus, Paradigm
from banghay.core.utils import get_file_contents, write_file_contents
from banghay.morphology.conjugator import Conjugator

app = typer.Typer(add_completion=False, no_args_is_help=True)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logging(level: int = logging.INFO) -> None:
    """Initialize basic logging configuration to stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S", stream=sys.stderr)


def read_roots(text: str) -> List[str]:
    """Roots listed one per line; blank lines and # comments are skipped."""
    roots = []
    for line in text.splitlines():
        root = line.strip()
        if root and not root.startswith("#"):
            roots.append(root)
    return roots


def format_paradigm(paradigm: Paradigm) -> str:
    width = max(len(aspect.value) for aspect in Aspect)
    rows = [f"[{paradigm.focus.value}] {paradigm.root}"]
    for aspect in Aspect:
        rows.append(f"  {aspect.value:<{width}}  {paradigm.form(aspect)}")
    return "\n".join(rows)


def _conjugator(ctx: typer.Context) -> Conjugator:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    lexicon: Optional[Path] = typer.Option(
        None,
        "--lexicon",
        exists=True,
        readable=True,
        dir_okay=False,
        help="JSON file of extra lexicon overrides",
    ),
    no_lexicon: bool = typer.Option(False, "--no-lexicon", help="Apply the regular rules only"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lexicon hits to stderr"),
) -> None:
    if lexicon and no_lexicon:
        raise typer.BadParameter("--lexicon cannot be combined with --no-lexicon", param_hint="--lexicon")
    if verbose:
        init_logging(logging.DEBUG)
    config = ConjugatorConfig(
        use_lexicon=not no_lexicon,
        extra_lexicon_path=str(lexicon) if lexicon else None,
    )
    try:
        ctx.obj = Conjugator(config)
    except BanghayError as exc:
        raise typer.BadParameter(str(exc), param_hint="--lexicon") from exc


@app.command()
def conjugate(
    ctx: typer.Context,
    root: str = typer.Argument(..., help="Verb root, e.g. luto"),
    focus: Focus = typer.Option(..., "--focus", "-f"),
    aspect: Aspect = typer.Option(..., "--aspect", "-a"),
) -> None:
    typer.echo(_conjugator(ctx).conjugate(root, focus, aspect))


@app.command()
def paradigm(
    ctx: typer.Context,
    root: str = typer.Argument(..., help="Verb root, e.g. luto"),
    focus: Optional[Focus] = typer.Option(None, "--focus", "-f", help="Only this focus"),
) -> None:
    conjugator = _conjugator(ctx)
    focuses = [focus] if focus else list(Focus)
    tables = [format_paradigm(conjugator.paradigm(root, f)) for f in focuses]
    typer.echo("\n\n".join(tables))


@app.command()
def batch(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    output_path: Path = typer.Option(Path("output/conjugations.tsv"), "--output", "-o"),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
) -> None:
    conjugator = _conjugator(ctx)
    roots = read_roots(get_file_contents(input_path))

    rows = ["root\tfocus\taspect\tform"]
    for root in tqdm(roots, desc="Conjugating", unit="root", disable=not progress):
        for focus, table in conjugator.paradigms(root).items():
            for aspect in Aspect:
                rows.append(f"{root}\t{focus.value}\t{aspect.value}\t{table.form(aspect)}")

    write_file_contents(output_path, "\n".join(rows) + "\n")
    typer.echo(f"Wrote {len(rows) - 1} forms for {len(roots)} roots to {output_path}")


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
