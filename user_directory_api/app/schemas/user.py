"""
Pydantic models for user data.

``User`` mirrors the record shape served by the upstream directory
(JSONPlaceholder compatible): identity, contact fields and two nested
value objects, ``Address`` (with ``Geo``) and ``Company``.  Records are
immutable; the service derives new instances instead of changing them.

``UserCreate`` and ``UserUpdate`` describe the request bodies accepted
by the API and ``UserQuery`` the filters of the listing endpoint.  They
carry all input validation so the service layer can trust its
arguments.
"""

from typing import Annotated, Optional

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, field_validator

_url_adapter = TypeAdapter(AnyUrl)
_email_adapter = TypeAdapter(EmailStr)


def _check_email(value: str) -> str:
    """Validate ``value`` as an email address but keep the submitted string.

    ``EmailStr`` on its own returns the normalized address (lowercased
    domain).
    """
    try:
        _email_adapter.validate_python(value)
    except ValueError:
        raise ValueError("value is not a valid email address") from None
    return value


Email = Annotated[str, AfterValidator(_check_email)]


def _check_url(value: Optional[str]) -> Optional[str]:
    """Validate ``value`` as a URL but keep the submitted string."""
    if value is None:
        return value
    try:
        _url_adapter.validate_python(value)
    except ValueError:
        raise ValueError("website must be a valid URL") from None
    return value


class Geo(BaseModel):
    """Coordinates, kept as text exactly as the upstream sends them."""

    model_config = ConfigDict(frozen=True)

    lat: str = Field(..., examples=["-37.3159"])
    lng: str = Field(..., examples=["81.1496"])


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str = Field(..., examples=["Kulas Light"])
    suite: str = Field(..., examples=["Apt. 556"])
    city: str = Field(..., examples=["Gwenborough"])
    zipcode: str = Field(..., examples=["92998-3874"])
    geo: Geo

    @classmethod
    def empty(cls) -> "Address":
        """Return an address with every field present but blank."""
        return cls(street="", suite="", city="", zipcode="", geo=Geo(lat="", lng=""))


class Company(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., examples=["Romaguera-Crona"])
    catch_phrase: str = Field(..., alias="catchPhrase", examples=["Multi-layered client-server neural-net"])
    bs: str = Field(..., examples=["harness real-time e-markets"])

    @classmethod
    def empty(cls) -> "Company":
        """Return a company with every field present but blank."""
        return cls(name="", catch_phrase="", bs="")


class User(BaseModel):
    """A user record as exposed by the API."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    name: str = Field(..., examples=["Leanne Graham"])
    username: str = Field(..., examples=["Bret"])
    # Upstream data is trusted as is; only request payloads are checked.
    email: str = Field(..., examples=["Sincere@april.biz"])
    address: Address
    phone: str = Field(..., examples=["1-770-736-8031 x56442"])
    website: str = Field(..., examples=["hildegard.org"])
    company: Company


class UserCreate(BaseModel):
    """Request body for creating a user.

    ``name``, ``username`` and ``email`` are required.  ``phone`` and
    ``website`` default to empty strings on the created record, and a
    missing ``address`` or ``company`` becomes the blank default object.
    """

    name: str = Field(..., min_length=1, examples=["Test User"])
    username: str = Field(..., min_length=1, examples=["testuser"])
    email: Email = Field(..., examples=["test@example.com"])
    phone: Optional[str] = Field(None, examples=["123-456-7890"])
    website: Optional[str] = Field(None, examples=["https://example.com"])
    address: Optional[Address] = None
    company: Optional[Company] = None

    @field_validator("website")
    @classmethod
    def validate_website(cls, value: Optional[str]) -> Optional[str]:
        return _check_url(value)


class UserUpdate(BaseModel):
    """Request body for a partial update.

    Every field is optional; only the fields sent by the client take
    part in the merge.  ``null`` is not accepted as a value, omit the
    field instead.
    """

    name: Optional[str] = Field(None, min_length=1)
    username: Optional[str] = Field(None, min_length=1)
    email: Optional[Email] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[Address] = None
    company: Optional[Company] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Only runs for values the client actually sent.
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value

    @field_validator("website")
    @classmethod
    def validate_website(cls, value: Optional[str]) -> Optional[str]:
        return _check_url(value)


class UserQuery(BaseModel):
    """Optional filters of the listing endpoint."""

    username: Optional[str] = None
    email: Optional[Email] = None
