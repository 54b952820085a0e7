import logging
import random
from typing import Annotated

import srsly
import typer
from pydantic import ValidationError

from ticketgen.core.charsets import CHARSETS
from ticketgen.core.errors import TicketGenError
from ticketgen.core.models import GenerationRequest, Strategy
from ticketgen.registry import generate_traced_ticket

app = typer.Typer(help="Generate random ticket strings for barcodes.")


def _parse_range(value: str | None) -> tuple[int, int] | None:
    """Parse 'lo,hi' into tuple. Raises typer.BadParameter on invalid input."""
    if value is None:
        return None
    try:
        parts = value.split(",")
        if len(parts) != 2:
            raise typer.BadParameter(
                f"Invalid range '{value}': expected 'LO,HI' (e.g., '8,32')"
            )
        lo_s, hi_s = parts[0].strip(), parts[1].strip()
        if not lo_s or not hi_s:
            raise typer.BadParameter(
                f"Invalid range '{value}': expected 'LO,HI' (e.g., '8,32')"
            )
        lo = int(lo_s)
        hi = int(hi_s)
        if lo < 0:
            raise typer.BadParameter(
                f"Invalid range '{value}': lengths must be >= 0"
            )
        if lo > hi:
            raise typer.BadParameter(
                f"Invalid range '{value}': low must be <= high"
            )
        return (lo, hi)
    except ValueError as err:
        raise typer.BadParameter(
            f"Invalid range '{value}': expected 'LO,HI' (e.g., '8,32')"
        ) from err


def _format_validation_error(err: ValidationError) -> str:
    return "; ".join(
        str(detail["msg"]).removeprefix("Value error, ")
        for detail in err.errors()
    )


@app.command()
def generate(
    strategy: Annotated[
        Strategy,
        typer.Option(
            "--strategy", "-S", help="library, secure, charset, or ascii"
        ),
    ] = Strategy.LIBRARY,
    charset: Annotated[
        str | None,
        typer.Option(
            "--charset",
            "-c",
            help="Charset name (see 'charsets') or literal characters",
        ),
    ] = None,
    length: Annotated[
        int | None,
        typer.Option("--length", "-l", help="Exact output length"),
    ] = None,
    length_range: Annotated[
        str | None,
        typer.Option(
            "--length-range", help="Default length range (lo,hi)"
        ),
    ] = None,
    count: Annotated[
        int, typer.Option("--count", "-n", help="Number of strings")
    ] = 1,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed", "-s", help="Seed for the non-secure random source"
        ),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Emit JSON lines")
    ] = False,
    with_trace: Annotated[
        bool,
        typer.Option(
            "--trace", help="Emit JSON lines with the generation trace"
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Generate random strings and print one per line."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        parsed_range = _parse_range(length_range)
    except typer.BadParameter as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    fields: dict[str, object] = {
        "strategy": strategy,
        "charset": charset,
        "length": length,
        "count": count,
    }
    if parsed_range is not None:
        fields["length_range"] = parsed_range
    try:
        request = GenerationRequest.model_validate(fields)
    except ValidationError as err:
        typer.echo(f"Error: {_format_validation_error(err)}", err=True)
        raise typer.Exit(1) from err

    rng = random.Random(seed)
    try:
        for _ in range(request.count):
            ticket, trace = generate_traced_ticket(request, rng)
            if as_json or with_trace:
                row: dict[str, object] = {
                    "ticket": ticket,
                    "strategy": request.strategy.value,
                    "length": len(ticket),
                }
                if with_trace:
                    row["trace"] = trace.model_dump()
                typer.echo(srsly.json_dumps(row))
            else:
                typer.echo(ticket)
    except TicketGenError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err


@app.command()
def charsets() -> None:
    """List the named charsets."""
    for name, chars in CHARSETS.items():
        typer.echo(f"{name} ({len(chars)}): {chars}")


if __name__ == "__main__":
    app()
