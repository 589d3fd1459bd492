"""Collapsed/expanded item state per editor view."""
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from locsync.api.state import AppState, get_state

router = APIRouter()


class ToggleBody(BaseModel):
    item_id: str
    all_ids: List[str] = []


class CollapseAllBody(BaseModel):
    all_ids: List[str] = []


def _collapsed(view: str, items) -> dict:
    return {"view": view, "collapsed": sorted(items)}


@router.get("/{view}")
def get_collapsed(view: str, state: AppState = Depends(get_state)):
    return _collapsed(view, state.collapse(view).collapsed)


@router.post("/{view}/toggle")
def toggle(view: str, body: ToggleBody, state: AppState = Depends(get_state)):
    """Expand or collapse one item."""
    return _collapsed(view, state.collapse(view).toggle(body.item_id, body.all_ids))


@router.post("/{view}/collapse-all")
def collapse_all(view: str, body: CollapseAllBody, state: AppState = Depends(get_state)):
    return _collapsed(view, state.collapse(view).collapse_all(body.all_ids))


@router.post("/{view}/expand-all")
def expand_all(view: str, state: AppState = Depends(get_state)):
    return _collapsed(view, state.collapse(view).expand_all())
