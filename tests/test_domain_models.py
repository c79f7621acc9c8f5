from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from hotel_reservations.domain import (
    Customer,
    InvalidEmailError,
    InvalidStayError,
    Reservation,
    Room,
    RoomType,
    StayPeriod,
)


def test_room_rejects_negative_price() -> None:
    with pytest.raises(ValidationError):
        Room(room_number="101", price=Decimal("-1"), room_type=RoomType.SINGLE)


def test_room_number_is_trimmed_and_required() -> None:
    room = Room(room_number=" 101 ", price=Decimal("80"), room_type=RoomType.SINGLE)
    assert room.room_number == "101"

    with pytest.raises(ValidationError):
        Room(room_number="   ", price=Decimal("80"), room_type=RoomType.SINGLE)


def test_complimentary_room_price_is_forced_to_zero() -> None:
    free = Room.complimentary("202", RoomType.DOUBLE)
    assert free.is_complimentary
    assert free.price == Decimal("0")

    overridden = Room(
        room_number="203",
        price=Decimal("150"),
        room_type=RoomType.DOUBLE,
        is_complimentary=True,
    )
    assert overridden.price == Decimal("0")


def _room_payload(number: str, flag: str) -> dict[str, str]:
    return {"room_number": number, "price": "100", "room_type": "double", "is_complimentary": flag}


def test_room_flag_is_coerced_before_pricing() -> None:
    paid = Room.model_validate(_room_payload("204", "false"))
    assert paid.is_complimentary is False
    assert paid.price == Decimal("100")

    free = Room.model_validate(_room_payload("205", "yes"))
    assert free.is_complimentary is True
    assert free.price == Decimal("0")

    with pytest.raises(ValidationError):
        Room.model_validate(_room_payload("206", "maybe"))


def test_room_is_immutable() -> None:
    room = Room(room_number="101", price=Decimal("100"), room_type=RoomType.DOUBLE)
    with pytest.raises(ValidationError):
        room.price = Decimal("5")  # type: ignore[misc]


@pytest.mark.parametrize("email", ["bad-email", "a@b", "@b.com", "a b@c.com", ""])
def test_customer_rejects_malformed_email(email: str) -> None:
    with pytest.raises(InvalidEmailError):
        Customer(email=email, first_name="A", last_name="B")


def test_customer_with_email_validates_and_copies() -> None:
    customer = Customer(email="a@b.com", first_name="Ada", last_name="Lovelace")

    with pytest.raises(InvalidEmailError):
        customer.with_email("nope")
    with pytest.raises(ValidationError):
        customer.first_name = "Augusta"  # type: ignore[misc]

    moved = customer.with_email("ada@example.org")
    assert moved.email == "ada@example.org"
    assert moved.full_name == "Ada Lovelace"
    assert customer.email == "a@b.com"


def test_stay_period_requires_check_in_before_check_out() -> None:
    with pytest.raises(InvalidStayError):
        StayPeriod.between(date(2024, 1, 15), date(2024, 1, 10))
    with pytest.raises(InvalidStayError):
        StayPeriod.between(date(2024, 1, 10), date(2024, 1, 10))


def test_stay_period_normalizes_dates_to_utc_midnight() -> None:
    period = StayPeriod.between(date(2024, 1, 10), datetime(2024, 1, 15, 11, 0))
    assert period.check_in == datetime(2024, 1, 10, tzinfo=UTC)
    assert period.check_out == datetime(2024, 1, 15, 11, 0, tzinfo=UTC)


def test_stay_period_keeps_time_of_day_in_comparisons() -> None:
    plus_two = timezone(timedelta(hours=2))
    morning = StayPeriod.between(
        datetime(2024, 1, 10, 8, tzinfo=plus_two),
        datetime(2024, 1, 10, 12, tzinfo=plus_two),
    )
    evening = StayPeriod.between(datetime(2024, 1, 10, 18), datetime(2024, 1, 10, 20))

    assert morning.check_in == datetime(2024, 1, 10, 6, tzinfo=UTC)
    assert not morning.overlaps(evening)


def test_stay_period_overlap_is_half_open() -> None:
    booked = StayPeriod.between(date(2024, 1, 10), date(2024, 1, 15))

    assert booked.overlaps(StayPeriod.between(date(2024, 1, 12), date(2024, 1, 13)))
    assert booked.overlaps(StayPeriod.between(date(2024, 1, 14), date(2024, 1, 16)))
    assert booked.overlaps(StayPeriod.between(date(2024, 1, 1), date(2024, 1, 31)))
    assert not booked.overlaps(StayPeriod.between(date(2024, 1, 15), date(2024, 1, 20)))
    assert not booked.overlaps(StayPeriod.between(date(2024, 1, 1), date(2024, 1, 10)))


def test_reservation_validates_dates() -> None:
    reservation = Reservation(
        customer_email="a@b.com",
        room_number="101",
        check_in=date(2024, 1, 10),
        check_out=date(2024, 1, 15),
    )
    assert reservation.period == StayPeriod.between(date(2024, 1, 10), date(2024, 1, 15))

    with pytest.raises(InvalidStayError):
        Reservation(
            customer_email="a@b.com",
            room_number="101",
            check_in=date(2024, 1, 15),
            check_out=date(2024, 1, 10),
        )


def test_reservation_setters_replace_one_field() -> None:
    reservation = Reservation(
        customer_email="a@b.com",
        room_number="101",
        check_in=date(2024, 1, 10),
        check_out=date(2024, 1, 15),
    )

    moved = reservation.with_room("102")
    assert moved.id == reservation.id
    assert moved.room_number == "102"
    assert reservation.room_number == "101"

    assert reservation.with_customer("c@d.com").customer_email == "c@d.com"

    extended = reservation.with_stay(date(2024, 1, 10), date(2024, 1, 20))
    assert extended.check_out == datetime(2024, 1, 20, tzinfo=UTC)

    with pytest.raises(InvalidStayError):
        reservation.with_stay(date(2024, 1, 20), date(2024, 1, 10))
