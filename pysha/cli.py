import logging
import sys
from typing import Optional

import typer

from .main import Algorithm, hash_message, hash_stream
from .utils import HashError

app = typer.Typer(add_completion=False, help="Compute NIST FIPS 180-4 message digests.")


@app.command()
def digest(
    text: Optional[str] = typer.Argument(None, help="Text to hash, encoded as UTF-8"),
    algorithm: str = typer.Option("sha256", "--algorithm", "-a", help="sha1 or sha256"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="File to hash, '-' for stdin"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each hashing step"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if (text is None) == (file is None):
        typer.echo("Error: Give exactly one of TEXT or --file.", err=True)
        raise typer.Exit(1)

    try:
        selected = Algorithm.from_name(algorithm)
        if file is None:
            result = hash_message(text, selected)
        elif file == "-":
            result = hash_stream(sys.stdin.buffer, selected)
        else:
            with open(file, "rb") as f:
                result = hash_stream(f, selected)
    except (HashError, ValueError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(result)
