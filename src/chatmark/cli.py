"""Command-line interface for chatmark."""

import logging
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text

from chatmark import __version__
from chatmark.config import RESERVED_CHARACTERS, ConfigurationError, get_settings
from chatmark.core.sse import read_sse_transcript, replay
from chatmark.core.stream import StreamSession
from chatmark.formats import SUPPORTED_FORMATS, Renderer, RichRenderer, get_renderer
from chatmark.formatting.ir import FormattedDocument
from chatmark.formatting.parser import MarkdownParser

SUPPORTED_EXTENSIONS = (".txt", ".md", ".sse")
SSE_EXTENSION = ".sse"
RENDERED_SUFFIX = "-rendered"

app = typer.Typer(
    name="chatmark",
    help="Render chat-assistant markdown responses, whole or as a replayed stream.",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"chatmark v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records through rich; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def generate_output_path(
    input_path: Path,
    suffix: str = ".txt",
    output_dir: Optional[Path] = None,
) -> Path:
    """Generate output path with -rendered suffix.

    The input extension is kept when it differs from the output one, so
    `answer.txt` and `answer.md` in one folder never share a target.
    """
    output_name = f"{input_path.stem}{RENDERED_SUFFIX}"
    if input_path.suffix.lower() != suffix.lower():
        output_name += input_path.suffix
    output_name += suffix

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def is_rendered_output(path: Path) -> bool:
    """Check whether a file was written by an earlier run."""
    stem = path.stem
    return stem.endswith(RENDERED_SUFFIX) or Path(stem).stem.endswith(RENDERED_SUFFIX)


def split_chunks(text: str, size: int) -> list[str]:
    """Cut text into fixed-size pieces to simulate a stream."""
    return [text[i : i + size] for i in range(0, len(text), size)]


def load_chunks(path: Path, sse: bool, chunk_size: int) -> list[str]:
    """Load a response as the chunks it would have streamed in."""
    if sse or path.suffix.lower() == SSE_EXTENSION:
        return read_sse_transcript(path)
    return split_chunks(path.read_text(encoding="utf-8"), chunk_size)


def read_response(path: Path, sse: bool) -> str:
    """Read the complete response text held in a file."""
    if sse or path.suffix.lower() == SSE_EXTENSION:
        return "".join(read_sse_transcript(path))
    return path.read_text(encoding="utf-8")


def is_supported(path: Path, sse: bool) -> bool:
    """Check whether a file can be rendered."""
    return sse or path.suffix.lower() in SUPPORTED_EXTENSIONS


def _display(renderer: Renderer, document: FormattedDocument):
    if isinstance(renderer, RichRenderer):
        return renderer.renderable(document)
    return Text(renderer.render(document))


def _report_unsupported(path: Path) -> None:
    console.print(
        f"[yellow]Skipping:[/yellow] {path.name} "
        f"(unsupported format: {path.suffix.lower()})"
    )


def render_file(
    input_path: Path,
    output_path: Optional[Path],
    renderer: Renderer,
    parser: MarkdownParser,
    sse: bool = False,
    verbose: bool = False,
) -> bool:
    """Render a single file. Returns True on success."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    if not is_supported(input_path, sse):
        _report_unsupported(input_path)
        return False

    if verbose:
        console.print(f"[blue]Rendering:[/blue] {input_path}")
        console.print(f"[blue]Format:[/blue] {renderer.name}")

    try:
        text = read_response(input_path, sse)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading {input_path.name}:[/red] {escape(str(e))}")
        return False

    document = parser.parse(text)
    logger.debug("%s: %d blocks", input_path.name, len(document))

    if output_path is None:
        console.print(_display(renderer, document), soft_wrap=True)
        return True

    try:
        renderer.write(document, output_path)
    except OSError as e:
        console.print(f"[red]Error writing {output_path}:[/red] {escape(str(e))}")
        return False

    console.print(f"[green]Success:[/green] {output_path}")
    return True


def stream_file(
    input_path: Path,
    renderer: Renderer,
    parser: MarkdownParser,
    sse: bool,
    chunk_size: int,
    delay: float,
) -> bool:
    """Replay a file chunk by chunk, re-rendering the whole buffer each time."""
    if not is_supported(input_path, sse):
        _report_unsupported(input_path)
        return False

    try:
        chunks = load_chunks(input_path, sse, chunk_size)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading {input_path.name}:[/red] {escape(str(e))}")
        return False

    session = StreamSession(parser)
    with Live(console=console, auto_refresh=False) as live:
        for document in replay(chunks, session):
            live.update(_display(renderer, document), refresh=True)
            if delay:
                time.sleep(delay)

    logger.debug("replayed %d chunks", session.chunk_count)
    return True


def process_folder(
    folder_path: Path,
    renderer: Renderer,
    parser: MarkdownParser,
    sse: bool = False,
    verbose: bool = False,
    recursive: bool = True,
) -> tuple[int, int]:
    """Render all supported files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files: list[Path] = []
    for ext in SUPPORTED_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))

    # Skip output from earlier runs
    files = sorted(f for f in files if not is_rendered_output(f))

    if not files:
        console.print(
            f"[yellow]No supported files found in {folder_path}[/yellow]\n"
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to render[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Rendering files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Rendering {file_path.name}...")
            output_path = generate_output_path(file_path, renderer.file_suffix)
            if render_file(file_path, output_path, renderer, parser, sse, verbose):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Response file, SSE transcript, or folder of them",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the rendering to this file (single file only)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format: {', '.join(SUPPORTED_FORMATS)} (default: rich)",
    ),
    sse: bool = typer.Option(
        False,
        "--sse",
        help="Treat input as a server-sent event transcript regardless of extension",
    ),
    stream: bool = typer.Option(
        False,
        "--stream",
        "-s",
        help="Replay the response chunk by chunk in a live display",
    ),
    chunk_size: Optional[int] = typer.Option(
        None,
        "--chunk-size",
        min=1,
        help="Characters per chunk when replaying a plain file (default: 16)",
    ),
    delay: Optional[float] = typer.Option(
        None,
        "--delay",
        min=0.0,
        help="Seconds between replayed chunks (default: 0.05)",
    ),
    sentinel: Optional[str] = typer.Option(
        None,
        "--sentinel",
        help="Line-break placeholder character used by the stream (default: ★)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render chat-assistant markdown.

    Examples:

        chatmark answer.txt

        chatmark answer.txt --format plain -o answer-plain.txt

        chatmark recording.sse --stream

        chatmark answer.md --stream --chunk-size 4 --delay 0.02

        chatmark /path/to/folder --format markdown
    """
    configure_logging(verbose)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    if sentinel is not None and (
        len(sentinel) != 1 or sentinel in RESERVED_CHARACTERS
    ):
        raise typer.BadParameter(
            "must be a single character other than newline, '*', '-' or '•'",
            param_hint="--sentinel",
        )

    try:
        renderer = get_renderer(
            output_format or settings.default_format,
            bullet_glyph=settings.bullet_glyph,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    parser = MarkdownParser(
        sentinel=sentinel or settings.sentinel,
        empty_heading=settings.empty_heading,
    )

    if path.is_file():
        if stream:
            if output is not None:
                console.print(
                    "[yellow]Warning:[/yellow] --output is ignored with --stream."
                )
            success = stream_file(
                path,
                renderer,
                parser,
                sse,
                chunk_size or settings.chunk_size,
                settings.replay_delay if delay is None else delay,
            )
        else:
            success = render_file(path, output, renderer, parser, sse, verbose)
        raise typer.Exit(0 if success else 1)

    if output is not None:
        console.print(
            "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
            "Files will be saved alongside originals with -rendered suffix."
        )
    if stream:
        console.print("[yellow]Warning:[/yellow] --stream is ignored in folder mode.")

    success, fail = process_folder(path, renderer, parser, sse, verbose)
    console.print(f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed")
    raise typer.Exit(0 if fail == 0 else 1)


if __name__ == "__main__":
    app()
