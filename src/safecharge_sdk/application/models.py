"""Value objects shared by several requests."""

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field

from .shared.serializers import WireModel


class UserDetails(WireModel):
    """Billing or user address details attached to a request."""

    first_name: Optional[str] = Field(None, max_length=30)
    last_name: Optional[str] = Field(None, max_length=40)
    address: Optional[str] = Field(None, max_length=60)
    phone: Optional[str] = Field(None, max_length=18)
    zip: Optional[str] = Field(None, max_length=10)
    city: Optional[str] = Field(None, max_length=30)
    country: Optional[str] = Field(None, pattern=r"^[A-Z]{2}$")
    state: Optional[str] = Field(None, max_length=5)
    email: Optional[EmailStr] = Field(None, max_length=100)
    locale: Optional[str] = Field(None, pattern=r"^[a-z]{2}_[A-Z]{2}$")
    date_of_birth: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")


class UrlDetails(WireModel):
    """Redirect and notification URLs for asynchronous payment flows."""

    success_url: Optional[str] = Field(None, max_length=1000)
    failure_url: Optional[str] = Field(None, max_length=1000)
    pending_url: Optional[str] = Field(None, max_length=1000)
    notification_url: Optional[str] = Field(None, max_length=1000)


def user_details_from_params(
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    address: Optional[str] = None,
    phone: Optional[str] = None,
    zip: Optional[str] = None,
    city: Optional[str] = None,
    country_code: Optional[str] = None,
    state: Optional[str] = None,
    email: Optional[str] = None,
    locale: Optional[str] = None,
    date_of_birth: Optional[str] = None,
) -> UserDetails:
    """Build a ``UserDetails`` from its individual parts.

    Args:
        first_name: The first name of the recipient
        last_name: The last name of the recipient
        address: The street address of the recipient
        phone: The phone number of the recipient
        zip: The postal code of the recipient
        city: The city of the recipient
        country_code: Two-letter ISO country code
        state: Two-letter ISO state code
        email: The email of the recipient
        locale: The recipient's locale and default language, e.g. en_UK
        date_of_birth: Date of birth as YYYY-MM-DD

    Raises:
        pydantic.ValidationError: If any part violates its constraint.
    """
    return UserDetails(
        first_name=first_name,
        last_name=last_name,
        address=address,
        phone=phone,
        zip=zip,
        city=city,
        country=country_code,
        state=state,
        email=email,
        locale=locale,
        date_of_birth=date_of_birth,
    )
