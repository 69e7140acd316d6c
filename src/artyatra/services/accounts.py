"""Account registration against the Swecha auth API."""

import re
from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel, field_validator

from artyatra.adapters.swecha_auth_client import SwechaAuthClient
from artyatra.domain.uploads import UpstreamResponse

DEFAULT_ROLE_IDS = (2,)
GENDERS = ("Male", "Female", "Other")


class SignupRequest(BaseModel):
    """Fields collected by the signup form."""

    phone: str
    name: str
    email: str
    gender: str
    date_of_birth: date
    place: str
    password: str
    consent: bool

    @field_validator("phone", "name", "email", "place", "password")
    @classmethod
    def _required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("gender")
    @classmethod
    def _known_gender(cls, value: str) -> str:
        if value not in GENDERS:
            raise ValueError("must be one of Male, Female, Other")
        return value

    @field_validator("consent")
    @classmethod
    def _consent_given(cls, value: bool) -> bool:
        if not value:
            raise ValueError("You must provide consent")
        return value


@dataclass
class AccountService:
    """Creates Swecha users on behalf of the signup form."""

    auth_client: SwechaAuthClient

    async def sign_up(self, request: SignupRequest) -> UpstreamResponse:
        """Forward a validated signup to the users endpoint."""
        payload: dict[str, object] = {
            "phone": normalize_phone(request.phone),
            "name": request.name.strip(),
            "email": request.email.strip(),
            "gender": request.gender,
            "date_of_birth": request.date_of_birth.isoformat(),
            "place": request.place.strip(),
            "password": request.password,
            "role_ids": list(DEFAULT_ROLE_IDS),
            "has_given_consent": True,
        }
        return await self.auth_client.create_user(payload)


def normalize_phone(raw: str) -> str:
    """Normalize Indian phone numbers to +91XXXXXXXXXX."""
    digits = re.sub(r"\D", "", raw)
    if digits.startswith("91") and len(digits) == 12:
        return f"+{digits}"
    if len(digits) == 10:
        return f"+91{digits}"
    return raw
