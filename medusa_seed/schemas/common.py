from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer

# Monetary amounts stay Decimal locally and go over the wire as JSON numbers.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class AdminPayload(BaseModel):
    """Base for request bodies sent to the admin API."""

    model_config = ConfigDict(extra="forbid")

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class AdminRecord(BaseModel):
    """Base for records read back from the admin API.

    The backend returns many more fields than the seeder reads; unknown
    fields are kept so nothing is lost when a record is passed along.
    """

    model_config = ConfigDict(extra="allow")

    id: str


class LinkedRecord(BaseModel):
    """Minimal view of a record linked to a stock location or API key."""

    model_config = ConfigDict(extra="allow")

    id: str


class LinkUpdate(AdminPayload):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {"add": ["sc_01HZX4Q2N8S5V7Y9A1B3C5D7E9"], "remove": []},
        }
    )

    add: list[str] = []
    remove: list[str] = []


class AdminErrorBody(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "type": "invalid_data",
                "message": "Product collection with handle: bags, already exists.",
            }
        },
    )

    type: str | None = None
    message: str
