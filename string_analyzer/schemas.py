from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr


class StringRequest(BaseModel):
    """Request schema for creating/analyzing a string."""
    value: StrictStr


class StringProperties(BaseModel):
    """Computed properties of an analyzed string."""
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    """A stored string together with its properties."""
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime


class StringFilters(BaseModel):
    """Typed filter set; a field left as None is not applied."""
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.as_dict()

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class FilterResponse(BaseModel):
    """Response schema for GET /strings."""
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, str]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageFilterResponse(BaseModel):
    """Response schema for the natural language filter endpoint."""
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery
