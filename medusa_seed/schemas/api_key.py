"""Pydantic schemas for ApiKey resources."""

from enum import StrEnum

from medusa_seed.schemas.common import AdminPayload, AdminRecord, LinkedRecord


class ApiKeyType(StrEnum):
    publishable = "publishable"
    secret = "secret"


class ApiKeyCreate(AdminPayload):
    title: str
    type: ApiKeyType = ApiKeyType.publishable


class ApiKey(AdminRecord):
    title: str
    type: str
    token: str | None = None
    sales_channels: list[LinkedRecord] = []

    def __repr__(self) -> str:
        return f"<ApiKey id={self.id!r} title={self.title!r}>"
