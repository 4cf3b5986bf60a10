"""Pydantic schemas for user endpoints."""

from pydantic import BaseModel

from remitledger.domain.models import Currency


class UserResponse(BaseModel):
    """Response schema for a single user."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    email: str
    home_currency: Currency
    country: str


class UserListResponse(BaseModel):
    """Response schema for listing users."""

    users: list[UserResponse]
    count: int
