"""Typer CLI over the in-memory reservation engine."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import typer
from pydantic import ValidationError

from hotel_reservations.booking import BookingError
from hotel_reservations.container import ServiceContainer
from hotel_reservations.domain import DomainError, Reservation, Room
from hotel_reservations.persistence import NotFoundError
from hotel_reservations.utils import ensure_utc

from .deps import configure_logging, get_settings, load_container

app = typer.Typer(help="Hotel reservations command-line interface")

SCENARIO_ARG = typer.Argument(
    ...,
    exists=True,
    dir_okay=False,
    readable=True,
    help="JSON file with rooms, customers and reservations",
)
DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""

    configure_logging(get_settings())


def _load(scenario: Path, *, strict: bool | None = None) -> ServiceContainer:
    try:
        return load_container(scenario, strict=strict)
    except ValidationError as exc:
        typer.echo(f"Invalid scenario file {scenario}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except (DomainError, BookingError, NotFoundError) as exc:
        typer.echo(f"Unable to replay scenario {scenario}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _format_room(room: Room) -> str:
    label = "complimentary" if room.is_complimentary else str(room.price)
    return f"{room.room_number}\t{room.room_type.value}\t{label}"


def _format_reservation(reservation: Reservation) -> str:
    return (
        f"{reservation.id}\t{reservation.room_number}\t{reservation.customer_email}\t"
        f"{reservation.check_in.isoformat()}\t{reservation.check_out.isoformat()}"
    )


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log level:\t" + settings.log_level)
    typer.echo("Enforce availability:\t" + str(settings.enforce_availability))


@app.command("list-rooms")
def list_rooms(scenario: Path = SCENARIO_ARG) -> None:
    """List every room in the scenario."""

    container = _load(scenario)
    rooms = container.admin_service.all_rooms()
    if not rooms:
        typer.echo("No rooms found")
        return
    for room in sorted(rooms, key=lambda item: item.room_number):
        typer.echo(_format_room(room))


@app.command("find-rooms")
def find_rooms(
    scenario: Path = SCENARIO_ARG,
    check_in: datetime = typer.Argument(..., formats=DATE_FORMATS),
    check_out: datetime = typer.Argument(..., formats=DATE_FORMATS),
) -> None:
    """List rooms free for the whole stay."""

    container = _load(scenario)
    try:
        rooms = container.hotel_service.find_rooms(ensure_utc(check_in), ensure_utc(check_out))
    except DomainError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not rooms:
        typer.echo("No rooms available")
        return
    for room in sorted(rooms, key=lambda item: item.room_number):
        typer.echo(_format_room(room))


@app.command("customer-reservations")
def customer_reservations(scenario: Path = SCENARIO_ARG, email: str = typer.Argument(...)) -> None:
    """List reservations held by a customer."""

    container = _load(scenario)
    customer = container.hotel_service.get_customer(email)
    reservations = container.hotel_service.get_customer_reservations(email)
    if customer is None or not reservations:
        typer.echo(f"No reservations for {email}")
        return
    typer.echo(f"Reservations for {customer.full_name} <{customer.email}>")
    for reservation in sorted(reservations, key=lambda item: item.check_in):
        typer.echo(_format_reservation(reservation))


@app.command("book")
def book(
    scenario: Path = SCENARIO_ARG,
    email: str = typer.Argument(...),
    room_number: str = typer.Argument(...),
    check_in: datetime = typer.Argument(..., formats=DATE_FORMATS),
    check_out: datetime = typer.Argument(..., formats=DATE_FORMATS),
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Reject overlapping stays (defaults to HOTEL_ENFORCE_AVAILABILITY)",
    ),
) -> None:
    """Book a room on top of the scenario and print the reservation."""

    container = _load(scenario, strict=strict)
    try:
        reservation = container.hotel_service.book_room(
            email,
            room_number,
            ensure_utc(check_in),
            ensure_utc(check_out),
        )
    except DomainError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except (BookingError, NotFoundError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Created reservation {_format_reservation(reservation)}")


__all__ = ["app"]
