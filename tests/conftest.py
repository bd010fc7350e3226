import json
from pathlib import Path

import pytest

from pldf.domain.entities import HintEntry, HintStore, ResourceRecord, ResourceStore, StageHints

HINTS_DATA = {
    "stages": {
        "design": {
            "validationHints": {
                "no-adr": {
                    "message": "Missing ADR",
                    "hint": "Write an ADR",
                    "resources": ["adr-guide"],
                },
                "missing-diagram": {
                    "message": "Component diagram is missing",
                    "hint": "Add a C4 container diagram",
                    "resources": ["c4", "unknown", "adr-guide"],
                },
            }
        },
        "implement": {"validationHints": {}},
    },
    "generalHints": {
        "stuck": {
            "message": "",
            "hint": "Re-read the stage checklist",
            "resources": [],
        }
    },
}

RESOURCES_DATA = {
    "resources": {
        "adr-guide": {"title": "ADR Guide", "url": "https://example.com/adr"},
        "c4": {"title": "C4 Model", "url": "https://c4model.com"},
    }
}


@pytest.fixture
def resource_store() -> ResourceStore:
    return ResourceStore(
        resources={
            "adr-guide": ResourceRecord(title="ADR Guide", url="https://example.com/adr"),
            "c4": ResourceRecord(title="C4 Model", url="https://c4model.com"),
        }
    )


@pytest.fixture
def design_store() -> HintStore:
    return HintStore(
        stages={
            "design": StageHints(
                validation_hints={
                    "no-adr": HintEntry(
                        message="Missing ADR", hint="Write an ADR", resources=["adr-guide"]
                    ),
                }
            )
        }
    )


@pytest.fixture
def hints_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "hints"
    directory.mkdir()
    (directory / "hints.json").write_text(json.dumps(HINTS_DATA), encoding="utf-8")
    (directory / "resources.json").write_text(json.dumps(RESOURCES_DATA), encoding="utf-8")
    return directory
