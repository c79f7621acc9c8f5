"""Room inventory models."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import Field, TypeAdapter, ValidationError, field_validator, model_validator

from .base import DomainModel
from .enums import RoomType
from .types import RoomNumber

_FLAG = TypeAdapter(bool)


class Room(DomainModel):
    """A bookable room identified by its room number."""

    room_number: Annotated[str, Field(min_length=1)]
    price: Annotated[Decimal, Field(ge=0)]
    room_type: RoomType
    is_complimentary: bool = False

    # The flag is coerced with the field's own lax rules before the price is decided.
    @model_validator(mode="before")
    @classmethod
    def zero_complimentary_price(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "is_complimentary" not in data:
            return data
        try:
            flag = _FLAG.validate_python(data["is_complimentary"])
        except ValidationError:
            return data
        if flag:
            return {**data, "is_complimentary": True, "price": Decimal("0")}
        return {**data, "is_complimentary": False}

    @field_validator("room_number")
    @classmethod
    def normalize_room_number(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            msg = "Room number must not be blank"
            raise ValueError(msg)
        return normalized

    @classmethod
    def complimentary(cls, room_number: str, room_type: RoomType) -> Room:
        """Build a free room; the price is always zero."""

        return cls(
            room_number=room_number,
            price=Decimal("0"),
            room_type=room_type,
            is_complimentary=True,
        )

    @property
    def key(self) -> RoomNumber:
        return RoomNumber(self.room_number)


__all__ = ["Room"]
