from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from .exceptions import (
    InvalidFilterError,
    StringAlreadyExistsError,
    StringNotFoundError,
    UnparseableQueryError,
)
from .schemas import FilterResponse, NaturalLanguageFilterResponse, StringRecord, StringRequest
from .services import (
    create_string,
    delete_string_by_value,
    get_all_strings_with_filters,
    get_string_by_value,
    get_strings_by_natural_language,
)
from .store import StringStore

router = APIRouter()


def get_store(request: Request) -> StringStore:
    return request.app.state.store


@router.get("/")
def root() -> dict:
    return {"message": "Welcome to String Analyzer API"}


@router.get("/health")
def health() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok"}


@router.post("/strings", response_model=StringRecord, status_code=201)
def create_string_endpoint(payload: StringRequest, store: StringStore = Depends(get_store)) -> StringRecord:
    """Create and analyze a string."""
    try:
        return create_string(payload.value, store)
    except StringAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageFilterResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Free-text description of the strings to find"),
    store: StringStore = Depends(get_store),
) -> dict:
    """Filter strings using a natural language query."""
    try:
        return get_strings_by_natural_language(store, query)
    except UnparseableQueryError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/strings/{string_value}", response_model=StringRecord)
def get_string_endpoint(string_value: str, store: StringStore = Depends(get_store)) -> StringRecord:
    """Get a specific string by its raw value."""
    try:
        return get_string_by_value(string_value, store)
    except StringNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/strings", response_model=FilterResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="'true' or 'false'"),
    min_length: Optional[str] = Query(None, description="Minimum length (inclusive)"),
    max_length: Optional[str] = Query(None, description="Maximum length (inclusive)"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character the value must contain"),
    store: StringStore = Depends(get_store),
) -> dict:
    """Get all strings with optional filtering."""
    try:
        return get_all_strings_with_filters(
            store,
            is_palindrome=is_palindrome,
            min_length=min_length,
            max_length=max_length,
            word_count=word_count,
            contains_character=contains_character,
        )
    except InvalidFilterError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/strings/{string_value}", status_code=204)
def delete_string_endpoint(string_value: str, store: StringStore = Depends(get_store)) -> Response:
    """Delete a string by its raw value."""
    try:
        delete_string_by_value(string_value, store)
    except StringNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
