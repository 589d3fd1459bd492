"""Pytest configuration and fixtures"""

import copy

import pytest
from fastapi.testclient import TestClient

from locsync.api.app import app
from locsync.api.state import AppState, get_state
from locsync.core.persistence import SnapshotPersistence
from locsync.core.snapshot_store import SnapshotStore


SAMPLE_DATASET = {
    "recipes": {
        "en": [
            {
                "id": "1",
                "title": "Pancakes",
                "description": "Fluffy",
                "type": "breakfast",
                "ingredients": [{"id": "a", "name": "Flour", "amount": 200, "unit": "g"}],
                "spices": ["salt"],
                "instructions": "Mix and fry",
            }
        ],
        "de": [
            {
                "id": "1",
                "title": "Pfannkuchen",
                "description": "",
                "type": "Frühstück",
                "ingredients": [{"id": "a", "name": "Mehl", "amount": 200, "unit": "g"}],
                "spices": [],
                "instructions": "Mischen und braten",
            }
        ],
        "nl": [],
    },
    "checklists": {"en": [], "de": [], "nl": []},
    "cities": {
        "en": [
            {"id": 1, "name": "Paris", "latitude": 48.85, "longitude": 2.35,
             "description": "nice", "zoomLevel": 10, "isIsland": "no"},
            {"id": 2, "name": "Texel", "latitude": 53.05, "longitude": 4.8,
             "description": "island", "zoomLevel": 11, "isIsland": "yes"},
        ],
        "de": [
            {"id": 1, "name": "Paris", "latitude": 48.85, "longitude": 2.35,
             "description": "schön", "zoomLevel": 10, "isIsland": "nein"},
            {"id": 2, "name": "Texel", "latitude": 53.05, "longitude": 4.8,
             "description": "Insel", "zoomLevel": 11, "isIsland": "ja"},
        ],
        "nl": [
            {"id": 1, "name": "Parijs", "latitude": 48.85, "longitude": 2.35,
             "description": "mooi", "zoomLevel": 10, "isIsland": "nee"},
        ],
    },
    "points": {"en": [], "de": [], "nl": []},
    "questions": {
        "en": [{"questiontext": "Q1", "answertext": "A1"}, {"questiontext": "Q2", "answertext": "A2"}],
        "de": [{"questiontext": "F1", "answertext": "A1"}, {"questiontext": "F2", "answertext": "A2"}],
        "nl": [{"questiontext": "V1", "answertext": "A1"}],
    },
    "cabins": {
        "en": [{"cabinNr": 1, "posTop": 10, "posLeft": 20, "beds": 2, "comment": "Bow"}],
        "de": [{"cabinNr": "1", "posTop": 10, "posLeft": 20, "beds": 2, "comment": "Bug"}],
        "nl": [{"cabinNr": 1, "posTop": 10, "posLeft": 20, "beds": 2, "comment": ""}],
    },
    "links": {
        "en": {"phone": "123", "mail": "a@b.c", "links": {"history": "h"}},
        "de": {"phone": "123", "mail": "a@b.c", "links": {"history": "h"}},
        "nl": {"phone": "", "mail": "", "links": {}},
    },
    "about": {
        "en": {"facts": [{"key": "Length", "value": "20m"}], "history": "Old", "captainImage": "", "vita": "Born"},
        "de": {"facts": [], "history": "", "captainImage": "", "vita": ""},
        "nl": {"facts": [], "history": "", "captainImage": "", "vita": ""},
    },
}


@pytest.fixture
def sample_dataset():
    """Fresh copy of the sample dataset."""
    return copy.deepcopy(SAMPLE_DATASET)


@pytest.fixture
def persistence(tmp_path) -> SnapshotPersistence:
    return SnapshotPersistence(tmp_path / "snapshot.json")


@pytest.fixture
def store(persistence) -> SnapshotStore:
    """Empty store (no snapshot) backed by a temporary file."""
    return SnapshotStore(persistence)


@pytest.fixture
def loaded_store(store, sample_dataset) -> SnapshotStore:
    store.replace(sample_dataset)
    return store


@pytest.fixture
def state(store) -> AppState:
    return AppState(store)


@pytest.fixture
def client(state):
    """API client wired to a per-test application state."""
    app.dependency_overrides[get_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()
