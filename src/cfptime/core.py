from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError, field_validator

from .errors import DecodeError, HttpError, NotFound

logger = logging.getLogger(__name__)

MAX_ERROR_BODY = 1000

OPTIONAL_TEXT = (
    "cfp_deadline",
    "conf_start_date",
    "city",
    "province",
    "twitter",
    "cfp_details",
    "speaker_benefits",
    "code_of_conduct",
    "created_at",
)


class Conference(BaseModel):
    """Conference record from the CFPTime API."""

    model_config = ConfigDict(frozen=True, extra="ignore")  # ignore unknown fields from API

    id: StrictInt
    name: str
    country: str
    website: str
    cfp_deadline: str = ""  # date text as sent by the server
    conf_start_date: str = ""
    city: str = ""
    province: str = ""
    twitter: str = ""
    cfp_details: str = ""
    speaker_benefits: str = ""
    code_of_conduct: str = ""
    created_at: str = ""
    number_of_days: Optional[StrictInt] = None

    @field_validator(*OPTIONAL_TEXT, mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def from_dict(cls, row: Any) -> "Conference":
        try:
            return cls.model_validate(row)
        except ValidationError as e:
            raise DecodeError(f"invalid conference record: {e}") from e

    def to_dict(self) -> dict:
        return self.model_dump()


@dataclass(frozen=True)
class Endpoint:
    """One GET route and how to read its response."""

    path: str
    many: bool = True
    lookup: bool = False

    def parse(self, response: httpx.Response) -> Any:
        logger.debug("GET %s -> %s", self.path, response.status_code)

        if not response.is_success:
            body = response.text[:MAX_ERROR_BODY] or None
            if self.lookup and response.status_code == 404:
                raise NotFound(self.path, body)
            logger.warning("GET %s failed with %s", self.path, response.status_code)
            raise HttpError(
                response.status_code,
                f"GET {self.path} failed with {response.status_code}",
                body,
            )

        try:
            data = response.json()
        except (ValueError, RecursionError) as e:
            # RecursionError: arrays/objects nested deeper than the decoder allows
            raise DecodeError(f"GET {self.path} returned invalid JSON: {e}") from e

        if self.many:
            return decode_conferences(data)
        return Conference.from_dict(data)


def decode_conferences(data: Any) -> List[Conference]:
    if not isinstance(data, list):
        raise DecodeError(f"expected a list of conferences, got {type(data).__name__}")
    return [Conference.from_dict(row) for row in data]


CFPS = Endpoint("/api/cfps/")
UPCOMING = Endpoint("/api/upcoming/")
CONFS = Endpoint("/api/confs/")


def _resource_id(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"id must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"id must be an integer, got {value!r}")
    return int(value)


def cfp(cfp_id: int) -> Endpoint:
    return Endpoint(f"/api/cfps/{_resource_id(cfp_id)}", many=False, lookup=True)


def conf(conf_id: int) -> Endpoint:
    return Endpoint(f"/api/confs/{_resource_id(conf_id)}", many=False, lookup=True)
