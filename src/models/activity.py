"""
Activity domain models.

Represents parliamentary activities (meetings, debates, hearings) as
returned by the Tweede Kamer OData service, together with the nested
actor, person and fraction navigations.

Field aliases match the upstream PascalCase property names, so raw
JSON can be validated directly with ``Activity.model_validate(raw)``.

Responsibility: Typed view of nested upstream activity records
"""

import logging
from typing import Any, Optional, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

logger = logging.getLogger(__name__)


class UpstreamModel(BaseModel):
    """
    Base for upstream records.

    A field whose value has an unexpected type falls back to its default
    instead of rejecting the whole record.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_bad_value(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.debug(f"Ignoring unexpected {cls.__name__}.{info.field_name} value: {value!r}")
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class Person(UpstreamModel):
    """A member of parliament or other participant (``Persoon``)."""

    id: Optional[str] = Field(default=None, alias="Id")
    first_names: Optional[str] = Field(default=None, alias="Voornamen")
    infix: Optional[str] = Field(
        default=None,
        alias="Tussenvoegsel",
        description="Middle-name particle (e.g., 'van der')"
    )
    last_name: Optional[str] = Field(default=None, alias="Achternaam")
    initials: Optional[str] = Field(default=None, alias="Initialen")

    def full_name(self) -> str:
        """First name(s), particle and last name, skipping empty parts."""
        return _join_name_parts(self.first_names, self.infix, self.last_name)

    def sort_name(self) -> str:
        """Particle and last name, skipping empty parts."""
        return _join_name_parts(self.infix, self.last_name)


class Fraction(UpstreamModel):
    """A parliamentary group (``Fractie``)."""

    id: Optional[str] = Field(default=None, alias="Id")
    name_nl: Optional[str] = Field(default=None, alias="NaamNL")


class Actor(UpstreamModel):
    """Link between an activity and a person (``ActiviteitActor``)."""

    id: Optional[str] = Field(default=None, alias="Id")
    function: Optional[str] = Field(
        default=None,
        alias="Functie",
        description="Functional role label within the activity"
    )
    relation: Optional[str] = Field(
        default=None,
        alias="Relatie",
        description="Relation to the activity (e.g., 'Deelnemer')"
    )
    person: Optional[Person] = Field(default=None, alias="Persoon")
    fraction: Optional[Fraction] = Field(default=None, alias="Fractie")


class Activity(UpstreamModel):
    """
    A parliamentary activity (``Activiteit``).

    Timestamps are kept as the raw upstream strings; parsing happens
    during flattening so that bad values degrade per record instead of
    failing validation for the whole batch. ``Verwijderd`` may be null.
    """

    id: Optional[str] = Field(default=None, alias="Id")
    subject: Optional[str] = Field(default=None, alias="Onderwerp")
    start_time: Optional[str] = Field(default=None, alias="Aanvangstijd")
    date: Optional[str] = Field(default=None, alias="Datum")
    deleted: Optional[bool] = Field(default=None, alias="Verwijderd")
    actors: Optional[List[Actor]] = Field(default=None, alias="ActiviteitActor")

    @property
    def raw_datetime(self) -> Optional[str]:
        """Precise start time when present, else the date-only field."""
        return self.start_time or self.date


def _join_name_parts(*parts: Optional[str]) -> str:
    return " ".join(part for part in parts if part)
