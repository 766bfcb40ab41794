"""Shared fixtures: a throwaway catalog, asset tree and application."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from style_advisor.api.main import create_app
from style_advisor.config.settings import Settings

GYM_OUTFITS = [
    {
        "name": f"Gym {number}",
        "tags": ["training"],
        "items": [
            {"category": "tops", "file": f"tank{number}.svg"},
            {"category": "shoes", "file": f"trainers{number}.svg"},
        ],
    }
    for number in range(1, 7)
]

PARTY_OUTFITS = [
    {"tags": ["evening"], "items": [{"category": "shirts", "file": "silk1.svg"}]},
    {"name": "Dance Floor", "items": [{"category": "shoes", "file": "boots1.svg", "color": "black"}]},
]


@pytest.fixture()
def catalog_root(tmp_path: Path) -> Path:
    root = tmp_path / "data"
    root.mkdir()
    (root / "outfits-male.json").write_text(
        json.dumps({"gym": GYM_OUTFITS, "party": PARTY_OUTFITS, "broken": {"name": "not a list"}}),
        encoding="utf-8",
    )
    (root / "outfits-female.json").write_text("{ not json", encoding="utf-8")
    return root


@pytest.fixture()
def assets_root(tmp_path: Path) -> Path:
    root = tmp_path / "assets"
    shirts = root / "male" / "college" / "shirts"
    shoes = root / "male" / "college" / "shoes"
    shirts.mkdir(parents=True)
    shoes.mkdir(parents=True)
    (shirts / "shirt2.svg").write_text("<svg/>", encoding="utf-8")
    (shirts / "shirt1.PNG").write_bytes(b"png")
    (shirts / "notes.txt").write_text("skip me", encoding="utf-8")
    (shoes / "sneakers1.webp").write_bytes(b"webp")
    (root / "male" / "gym").mkdir(parents=True)
    (root / "female" / "party").mkdir(parents=True)
    return root


@pytest.fixture()
def settings(catalog_root: Path, assets_root: Path) -> Settings:
    return Settings(data_root=str(catalog_root), assets_root=str(assets_root))


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture()
def registered(client: TestClient) -> dict:
    response = client.post("/api/auth/register", json={"username": "alice", "password": "pw1"})
    assert response.status_code == 201
    return response.json()
