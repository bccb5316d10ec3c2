# -*- coding: utf-8 -*-
"""Command line wrapper around the LMS transformer."""
import json
import logging
import typing as t

import click
from pydantic import ValidationError
from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.table import Table

from lms_acl.config import TransformerSettings
from lms_acl.encoder import encode_reminder
from lms_acl.errors import MalformedPayload, UnknownStudent
from lms_acl.identity import derive_idempotency_key
from lms_acl.models import EventCategory
from lms_acl.policy import advance_minutes_for
from lms_acl.transformer import Transformer

console = Console()
err_console = Console(stderr=True)

CATEGORY_NAMES = [category.value for category in EventCategory]


def fail(message: str) -> t.NoReturn:
    """Print an error line to stderr and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def main(ctx: click.Context) -> None:
    """Translate LMS events into reminder commands."""
    try:
        settings = TransformerSettings.from_env()
    except ValidationError as exc:
        fail(f"Invalid LMS_ACL_* environment settings: {exc}")
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@main.command()
@click.argument("category", type=click.Choice(CATEGORY_NAMES))
@click.argument("payload", type=click.File("rb"), default="-")
@click.option("--pretty", is_flag=True, help="Render the reminder as highlighted, indented JSON.")
@click.option("--with-key", is_flag=True, help="Print one JSON envelope holding the key and the reminder.")
@click.pass_obj
def transform(
        settings: TransformerSettings,
        category: str,
        payload: t.BinaryIO,
        pretty: bool,
        with_key: bool,
) -> None:
    """Transform one LMS payload.

    CATEGORY: assignment or calendar.
    PAYLOAD: JSON file to read, stdin by default.

    The reminder goes to stdout and the idempotency key to stderr.
    """
    transformer = Transformer(settings=settings)
    try:
        result = transformer.transform(payload.read(), category)
    except (MalformedPayload, UnknownStudent) as exc:
        fail(str(exc))

    encoded = encode_reminder(result.command)
    if with_key:
        envelope = {"idempotencyKey": result.idempotency_key, "reminder": json.loads(encoded)}
        click.echo(json.dumps(envelope))
        return

    if pretty:
        console.print(JSON(encoded))
    else:
        click.echo(encoded)
    click.echo(f"idempotency-key: {result.idempotency_key}", err=True)


@main.command()
@click.argument("natural_ids", nargs=-1, required=True)
def key(natural_ids: tuple[str, ...]) -> None:
    """Print the idempotency key for each NATURAL_ID."""
    for natural_id in natural_ids:
        click.echo(f"{natural_id}\t{derive_idempotency_key(natural_id)}")


@main.command()
@click.pass_obj
def policy(settings: TransformerSettings) -> None:
    """Show the notification lead time for each event category."""
    table = Table(title="Notification policy", show_header=True, header_style="bold magenta")
    table.add_column("Category", style="cyan")
    table.add_column("Advance (minutes)", justify="right", style="yellow")
    for category in EventCategory:
        table.add_row(category.value, str(advance_minutes_for(category, settings.advance_minutes)))
    console.print(table)


if __name__ == "__main__":
    main()
