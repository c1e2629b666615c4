from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def coerce_id(v: Any) -> Optional[int]:
    # Anything that is not an integer id is treated as missing
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    if isinstance(v, str) and v.strip().lstrip('-').isdigit():
        return int(v.strip())
    return None


class BookingRoomRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={'example': {'roomId': 1}},
    )

    room_id: Optional[int] = Field(default=None, alias='roomId')

    @field_validator('room_id', mode='before')
    @classmethod
    def coerce_room_id(cls, v: Any) -> Optional[int]:
        return coerce_id(v)

    @classmethod
    def room_id_from_body(cls, body: Any) -> Optional[int]:
        """Room id of a raw JSON body; bodies that are not objects carry none."""
        if not isinstance(body, dict):
            return None
        return cls.model_validate(body).room_id


class RoomResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'Room': {
                    'id': 1,
                    'name': '101',
                    'capacity': 3,
                    'hotelId': 1,
                    'createdAt': '2025-01-10T10:30:00',
                    'updatedAt': '2025-01-10T10:30:00',
                },
            }
        },
    )

    id: int
    room: RoomResponse = Field(alias='Room')


class BookingIdResponse(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={'example': {'bookingId': 1}},
    )

    booking_id: int = Field(alias='bookingId')
