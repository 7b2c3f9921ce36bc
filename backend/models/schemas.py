from __future__ import annotations

from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class CompetitionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str = ""
    prize: str = ""
    organizer: str
    deadline: str  # YYYY-MM-DD
    category: str
    image: str
    type: str = "free"
    added_date: str = Field(alias="addedDate")
    source_url: str = Field(default="", alias="sourceUrl")
    ai_parsed: bool = Field(default=False, alias="aiParsed")

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CompetitionRecord":
        return cls.model_validate(record)

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ManualOverrides(BaseModel):
    """Raw caller overrides; values that are not non-empty strings are ignored downstream."""

    title: Optional[Any] = None
    organizer: Optional[Any] = None
    prize: Optional[Any] = None
    deadline: Optional[Any] = None
    category: Optional[Any] = None
    type: Optional[Any] = None

    def as_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in self.model_dump().items() if v is not None}


class AnalyzeRequest(BaseModel):
    """Action-dispatch request; required fields are checked per action by the route."""

    model_config = ConfigDict(populate_by_name=True)

    action: Optional[str] = None
    url: Optional[str] = None
    text: Optional[str] = None
    manual_overrides: Optional[ManualOverrides] = Field(default=None, alias="manualOverrides")


class CompetitionAnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    text: Optional[str] = None
    manual_overrides: Optional[ManualOverrides] = Field(default=None, alias="manualOverrides")

