"""CLI entrypoint for place-finder."""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from place_finder.clients.geocode_client import GeocodeClient
from place_finder.geo import Coordinate, InvalidCoordinateError
from place_finder.models import PlaceResult
from place_finder.sources import DEFAULT_SERVICE, SERVICES

console = Console()

NO_MATCH_MESSAGE = "no matches for that search string."


def _place_table(number: int, place: PlaceResult) -> Table:
    table = Table(title=f"Place # {number}", show_header=False, title_justify="left")
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")
    table.add_row("name", Text(place.name))
    table.add_row("address", Text(place.address))
    table.add_row("tags", Text(place.tag))
    table.add_row("location", str(place.coordinate))
    return table


@click.group()
@click.option(
    "--service",
    default=DEFAULT_SERVICE,
    type=click.Choice(sorted(SERVICES)),
    help="Geocoding endpoint to query.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log lookup failures.")
@click.pass_context
def cli(ctx: click.Context, service: str, verbose: bool):
    """Place Finder — geocode places and measure the distance between them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.obj = SERVICES[service]


@cli.command()
@click.option("--first", help="First search string (prompted if omitted).")
@click.option("--second", help="Second search string (prompted if omitted).")
@click.pass_obj
def distance(config, first: str | None, second: str | None):
    """Find two places and report the distance between them."""
    console.print("This program finds the distance between two")
    console.print("places using geocoding service data.")
    console.print()

    with GeocodeClient(config) as client:
        if first is None:
            first = click.prompt("first location?", prompt_suffix=" ")
        one = client.resolve(first)
        if not one:
            console.print(NO_MATCH_MESSAGE)
            return
        console.print(f"found at {one}")

        if second is None:
            second = click.prompt("second location?", prompt_suffix=" ")
        two = client.resolve(second)
        if not two:
            console.print(NO_MATCH_MESSAGE)
            return
        console.print(f"found at {two}")

    console.print(f"{one.distance_from(two):.3f} miles apart")
    for number, place in enumerate((one, two), start=1):
        console.print()
        console.print(_place_table(number, place))


@cli.command()
@click.argument("query", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the match as JSON.")
@click.pass_obj
def lookup(config, query: tuple[str, ...], as_json: bool):
    """Show the top match for a single search string."""
    with GeocodeClient(config) as client:
        place = client.resolve(" ".join(query))

    if not place:
        console.print(NO_MATCH_MESSAGE)
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(place.to_dict()))
    else:
        console.print(_place_table(1, place))


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
def between(lat1: float, lon1: float, lat2: float, lon2: float):
    """Distance in miles between two coordinates (no network)."""
    try:
        start = Coordinate(lat1, lon1)
        end = Coordinate(lat2, lon2)
    except InvalidCoordinateError as exc:
        raise click.BadParameter(str(exc)) from exc

    console.print(f"start is at {start}")
    console.print(f"end is at {end}")
    console.print(f"{start.distance_from(end):.3f} miles apart")
