"""CLI implementation for editorfile."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from . import read, read_sync, locate_file, create_path, save, get_ext, is_url
from .core.config import load_settings
from .core.model import Result
from .core.util import result_asdict
from .io.http_async import close_global_client
from .io.http_sync import close_global_session

app = typer.Typer(add_completion=False, help="Read, locate and save files for editor integrations.")
logger = logging.getLogger(__name__)


def iter_sources(files: list[str]) -> list[str]:
    """Get list of sources from files argument or stdin."""
    if "-" in files:
        # stdin mode
        stdin_lines = [ln.strip() for ln in sys.stdin if ln.strip()]
        if not stdin_lines:
            return []
        return stdin_lines
    elif files:
        return list(files)
    return []


def _as_source(src: str) -> str:
    return src if is_url(src) else str(Path(src).resolve())


def _to_result(src: str, content) -> Result:
    return Result(success=True, content=content, error=None, bytes_fetched=len(content), source=src)


def _to_failure(src: str, exc: BaseException) -> Result:
    return Result(success=False, content=None, error=str(exc), bytes_fetched=0, source=src)


async def _batch_read(sources: list[str], size: int) -> list[Result]:
    """Asynchronously read a list of sources."""
    try:
        tasks = [read(_as_source(src), size) for src in sources]
        results = await asyncio.gather(*tasks, return_exceptions=True)
    finally:
        await close_global_client()
    processed_results = []
    for src, res in zip(sources, results):
        if isinstance(res, Exception):
            processed_results.append(_to_failure(src, res))
        else:
            processed_results.append(_to_result(src, res))
    return processed_results


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Read, locate and save files for editor integrations."""
    try:
        settings = load_settings()
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=2)

    level = getattr(logging, "DEBUG" if verbose else settings.log_level, logging.WARNING)
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("editorfile").setLevel(level)


@app.command("read")
def read_cmd(
    files: list[str] = typer.Argument(None, help="Files or URLs to read, or '-' for stdin"),
    size: int = typer.Option(0, "--size", "-n", min=0, help="Stop after N bytes (0 reads everything)"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Force JSON-lines output"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
    sync: bool = typer.Option(False, "--sync", help="Force synchronous I/O"),
):
    """Read one or many local paths or URLs and emit their content as JSON."""
    sources = iter_sources(files or [])

    if not sources:
        typer.echo("No input files given.", err=True)
        raise typer.Exit(code=1)

    results: list[Result] = []
    if sync:
        try:
            for src in sources:
                try:
                    res = _to_result(src, read_sync(_as_source(src), size))
                except (OSError, ValueError) as e:
                    logger.debug("Reading %s failed: %s", src, e)
                    res = _to_failure(src, e)
                results.append(res)
        finally:
            close_global_session()
    else:
        results = asyncio.run(_batch_read(sources, size))

    # open output sink
    sink = open(output, "w", encoding="utf-8") if output else sys.stdout
    try:
        # choose output style
        if len(sources) == 1 and not jsonl:
            json.dump(result_asdict(results[0]), sink, indent=2)
            sink.write("\n")
        else:
            for res in results:
                sink.write(json.dumps(result_asdict(res)))
                sink.write("\n")
    finally:
        if output:
            sink.close()

    # exit code
    if any(not r.success for r in results):
        raise typer.Exit(code=1)


@app.command("locate")
def locate_cmd(
    editor_file: str = typer.Argument(..., help="File open in the editor"),
    name: str = typer.Argument(..., help="File name to look for in its ancestor directories"),
):
    """Print the nearest ancestor match of NAME for EDITOR_FILE."""
    found = locate_file(editor_file, name)
    if not found:
        typer.echo(f"{name} not found above {editor_file}", err=True)
        raise typer.Exit(code=1)
    typer.echo(found)


@app.command("resolve")
def resolve_cmd(
    parent: str = typer.Argument(..., help="Directory, or file whose directory is used"),
    name: str = typer.Argument(..., help="Relative or absolute file name"),
):
    """Print NAME resolved against PARENT as an absolute path."""
    try:
        typer.echo(create_path(parent, name))
    except OSError as e:
        typer.echo(f"Cannot resolve against {parent}: {e}", err=True)
        raise typer.Exit(code=1)


@app.command("save")
def save_cmd(
    file: Path = typer.Argument(..., help="Destination file"),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Content to write (stdin when omitted)"),
):
    """Save content to FILE, one byte per character."""
    content = text if text is not None else sys.stdin.read()
    try:
        save(file, content)
    except (OSError, ValueError) as e:
        typer.echo(f"Cannot save {file}: {e}", err=True)
        raise typer.Exit(code=1)


@app.command("ext")
def ext_cmd(paths: list[str] = typer.Argument(..., help="Paths to inspect")):
    """Print the lowercase extension of each path, one per line."""
    for p in paths:
        typer.echo(get_ext(p))


def main():
    app()


if __name__ == "__main__":
    main()
