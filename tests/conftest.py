"""Shared fixtures: a small class library snapshot."""

import json

import msgspec
import pytest

from sclookup.graph import IntrospectionIndex, SnapshotSpec

LIB = "/usr/share/SuperCollider/SCClassLibrary"
EXT = "/home/user/.local/share/SuperCollider/Extensions"


@pytest.fixture
def sample_snapshot():
    """Object at the root, Player/Synth/Routine below it."""
    return {
        "version": "1.0",
        "library_roots": [
            {"path": "/usr/share/SuperCollider", "alias": "SC"},
            {"path": LIB, "alias": "SCClassLibrary"},
            {"path": EXT, "alias": "Extensions"},
        ],
        "classes": [
            {
                "name": "Object",
                "path": f"{LIB}/Core/Object.sc",
                "position": 10,
                "methods": [
                    {"name": "dump", "position": 200},
                    {"name": "asRoutine", "path": f"{EXT}/extObject.sc", "position": 20},
                ],
                "class_methods": [{"name": "new", "position": 150}],
            },
            {
                "name": "Player",
                "path": f"{LIB}/Streams/Player.sc",
                "position": 5,
                "superclass": "Object",
                "methods": [
                    {"name": "play", "position": 300, "arguments": ["clock"]},
                    {"name": "stop", "position": 400},
                ],
                "class_methods": [{"name": "new", "position": 50}],
            },
            {
                "name": "Synth",
                "path": f"{LIB}/Synth.sc",
                "superclass": "Object",
                "methods": [
                    {"name": "play", "position": 700},
                    {"name": "set", "position": 800},
                ],
            },
            {
                "name": "Routine",
                "path": f"{EXT}/Routine.sc",
                "superclass": "Object",
            },
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path, sample_snapshot):
    path = tmp_path / "introspection.json"
    path.write_text(json.dumps(sample_snapshot))
    return path


@pytest.fixture
def index(snapshot_file):
    return IntrospectionIndex.load(snapshot_file)


@pytest.fixture
def make_index():
    """Build a ready index from plain class dicts."""

    def _make(classes, library_roots=()):
        data = {"classes": list(classes), "library_roots": list(library_roots)}
        return IntrospectionIndex(msgspec.convert(data, SnapshotSpec))

    return _make
