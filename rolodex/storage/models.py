# Person / Note records as stored by the notes app.
# Wire format is camelCase (firstName, rawText, ...); ids arrive as "id" or "_id".

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Person(Record):
    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    first_name: str
    last_name: str
    company: Optional[str] = None
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Connection(Record):
    name: str = ""
    relationship: str = ""


class NetworkMention(Record):
    person_name: Optional[str] = None
    company: Optional[str] = None
    title: Optional[str] = None
    context: Optional[str] = None
    snippet: Optional[str] = None


class ExtractedEntities(Record):
    people: List[str] = Field(default_factory=list)
    companies: List[str] = Field(default_factory=list)
    titles: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)


class Note(Record):
    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    person_id: str
    raw_text: str = ""
    meetings: List[date] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list)
    connections: List[Connection] = Field(default_factory=list)
    network_mentions: List[NetworkMention] = Field(default_factory=list)
    extracted_entities: ExtractedEntities = Field(default_factory=ExtractedEntities)

    @field_validator("meetings", mode="before")
    @classmethod
    def _meeting_days(cls, value):
        """Meetings are compared by calendar day; drop any time component."""
        if value is None:
            return []
        days = []
        for item in value:
            if isinstance(item, datetime):
                days.append(item.date())
            elif isinstance(item, str) and len(item) > 10:
                days.append(datetime.fromisoformat(item.replace("Z", "+00:00")).date())
            else:
                days.append(item)
        return days

    @field_validator("action_items", "connections", "network_mentions", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("extracted_entities", mode="before")
    @classmethod
    def _entities_default(cls, value):
        return {} if value is None else value
