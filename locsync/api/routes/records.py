"""Per-record-type endpoints: per-locale edits, cross-locale create/delete, validation."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from locsync.api.state import AppState, get_state
from locsync.errors import UnknownRecordType, UnsupportedOperation
from locsync.models.record_types import (
    LOCALES,
    RECORD_TYPES,
    Dataset,
    Locale,
    RecordType,
    get_record_type,
)

router = APIRouter()


class CreateRecordBody(BaseModel):
    source_locale: Locale = Locale.EN
    record: Dict[str, Any]
    title_field: Optional[str] = None


def _record_type(name: str) -> RecordType:
    try:
        return get_record_type(name)
    except UnknownRecordType as e:
        raise HTTPException(status_code=404, detail=str(e))


def _section(dataset: Optional[Dataset], name: str):
    return {
        "record_type": name,
        "loaded": dataset is not None,
        "data": dataset.get(name) if dataset is not None else None,
    }


def _describe(rt: RecordType):
    return {
        "name": rt.name,
        "shape": rt.shape.value,
        "key_field": rt.key_field,
        "title_field": rt.title_field,
        "validated": rt.validated,
        "fields": {name: kind.value for name, kind in rt.fields.items()},
    }


@router.get("/")
def list_record_types():
    """Registered record types and locales."""
    return {
        "locales": [locale.value for locale in LOCALES],
        "record_types": [_describe(rt) for rt in RECORD_TYPES.values()],
    }


@router.get("/validation")
def validate_all_types(state: AppState = Depends(get_state)):
    """Translation completeness for every record type."""
    return {name: result.to_dict() for name, result in state.validate_all().items()}


@router.get("/{record_type}/validation")
def validate_type(record_type: str, state: AppState = Depends(get_state)):
    """Reference-locale records with fields missing in other locales."""
    _record_type(record_type)
    return state.validate(record_type).to_dict()


@router.get("/{record_type}/next-id")
def get_next_id(record_type: str, locale: Locale = Locale.EN, state: AppState = Depends(get_state)):
    """Key to use for a new record."""
    _record_type(record_type)
    try:
        return {"next_id": state.next_record_id(record_type, locale)}
    except UnsupportedOperation as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{record_type}/{locale}")
def get_locale_value(record_type: str, locale: Locale, state: AppState = Depends(get_state)):
    """Payload for one record type in one locale."""
    _record_type(record_type)
    snapshot = state.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No data loaded")
    return (snapshot.get(record_type) or {}).get(locale.value)


@router.put("/{record_type}/{locale}")
def put_locale_value(
    record_type: str,
    locale: Locale,
    payload: Any = Body(...),
    state: AppState = Depends(get_state),
):
    """Replace one locale's payload; other locales are untouched."""
    _record_type(record_type)
    return _section(state.set_locale_value(record_type, locale, payload), record_type)


@router.post("/{record_type}")
def create_record(record_type: str, body: CreateRecordBody, state: AppState = Depends(get_state)):
    """Add a record to source_locale and stubs of it to the other locales."""
    _record_type(record_type)
    try:
        dataset = state.create_across_locales(
            record_type, body.source_locale, body.record, body.title_field
        )
    except UnsupportedOperation as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _section(dataset, record_type)


@router.delete("/{record_type}/by-key/{key}")
def delete_record_by_key(
    record_type: str,
    key: str,
    key_field: Optional[str] = None,
    state: AppState = Depends(get_state),
):
    """Delete the record with this key from every locale."""
    _record_type(record_type)
    try:
        dataset = state.delete_across_locales(record_type, key, key_field)
    except UnsupportedOperation as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _section(dataset, record_type)


@router.delete("/{record_type}/by-index/{index}")
def delete_record_by_index(record_type: str, index: int, state: AppState = Depends(get_state)):
    """Delete the element at index from every locale that has one."""
    _record_type(record_type)
    return _section(state.delete_across_locales_by_index(record_type, index), record_type)
