from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class Remark(BaseModel):
    title: str = ""
    description: list[str] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def _title_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("description", mode="before")
    @classmethod
    def _description_lines(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            return []
        return [line for line in value if isinstance(line, str)]


class Event(BaseModel):
    action: str = Field(default="", alias="eventAction")
    date: str = Field(default="", alias="eventDate")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("action", "date", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        return _as_text(value)


class Entity(BaseModel):
    # Untyped vCard payload; walked by extraction.countries.
    vcard_array: list[Any] = Field(default_factory=list, alias="vcardArray")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("vcard_array", mode="before")
    @classmethod
    def _list_or_empty(cls, value: Any) -> list[Any]:
        return value if isinstance(value, list) else []


class RawRegistryDocument(BaseModel):
    """One RDAP record as published in the ARIN bulk dump.

    Remarks, events and entities are embedded data with no fixed schema:
    elements that are not objects decode as empty ones instead of failing the
    document.
    """

    object_class_name: str = Field(default="", alias="objectClassName")
    start_address: str = Field(default="", alias="startAddress")
    end_address: str = Field(default="", alias="endAddress")
    name: str = ""
    remarks: list[Remark] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)
    entities: list[Entity] = Field(default_factory=list)
    status: list[str] = Field(default_factory=list)
    origin_autnums: list[StrictInt] = Field(default_factory=list, alias="arin_originas0_originautnums")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("object_class_name", "start_address", "end_address", "name", mode="before")
    @classmethod
    def _null_string(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("status", "origin_autnums", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("remarks", "events", "entities", mode="before")
    @classmethod
    def _embedded_objects(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        return [item if isinstance(item, (dict, BaseModel)) else {} for item in value]


class NormalizedRecord(BaseModel):
    cidr: str
    netname: str
    asn: int = 0
    remarks: str = ""
    type: str
    countries: list[str] = Field(default_factory=list)
    country: str
    last_modified: str = Field(default="", alias="last-modified")
    source: str

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
