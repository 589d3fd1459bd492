"""Whole-dataset endpoints: load, export, restore, reset."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from locsync.api.state import AppState, get_state
from locsync.core.transfer import create_export, export_individual_files
from locsync.errors import DatasetParseError

router = APIRouter()


class LoadBody(BaseModel):
    # Raw JSON text: a unified dataset or an export with a "data" member
    content: Optional[str] = None


@router.get("/")
def get_dataset(state: AppState = Depends(get_state)):
    """Return the current dataset (data is null before anything is loaded)."""
    snapshot = state.get_snapshot()
    return {"loaded": snapshot is not None, "data": snapshot, "error": state.error}


@router.post("/load")
def load_dataset(body: LoadBody, state: AppState = Depends(get_state)):
    """Replace the dataset with an uploaded JSON blob."""
    try:
        dataset = state.load(body.content)
    except DatasetParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"loaded": True, "record_types": sorted(dataset) if isinstance(dataset, dict) else []}


@router.post("/new")
def new_dataset(state: AppState = Depends(get_state)):
    """Start from an empty dataset with every record type and locale present."""
    state.new()
    return {"loaded": True}


@router.get("/export")
def export_dataset(state: AppState = Depends(get_state)):
    """Unified export: {exportDate, data}."""
    snapshot = state.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No data loaded")
    return create_export(snapshot)


@router.get("/files")
def export_files(state: AppState = Depends(get_state)):
    """Per-locale files keyed "<locale>/<type>.json"."""
    snapshot = state.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No data loaded")
    return export_individual_files(snapshot)


@router.get("/stored")
def has_stored(state: AppState = Depends(get_state)):
    return {"exists": state.has_stored_data()}


@router.post("/restore")
def restore_dataset(state: AppState = Depends(get_state)):
    """Load the persisted snapshot, if any."""
    return {"restored": state.restore(), "loaded": state.get_snapshot() is not None}


@router.post("/reset", status_code=204)
def reset_dataset(state: AppState = Depends(get_state)):
    """Drop the dataset and clear the persisted copy."""
    state.reset()
