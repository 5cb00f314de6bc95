import json

import pytest

from ogcache.metadata.table import MetadataTable
from ogcache.types import MetadataRecord


@pytest.fixture
def sample_image_bytes():
    """Minimal valid PNG for testing (1x1 white pixel)."""
    import base64
    return base64.b64decode(
        "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR4"
        "nGP4z8BQDwAEgAF/pooBPQAAAABJRU5ErkJggg=="
    )


@pytest.fixture
def metadata_dict():
    return {
        "default": {"title": "127.io", "description": "Creative articulation."},
        "/blog/foo": {"title": "Foo", "description": "Bar  baz"},
        "/blog/spaced": {"title": "Spaced", "description": "  one\n\ttwo   three  "},
    }


@pytest.fixture
def metadata_table(metadata_dict):
    return MetadataTable({k: MetadataRecord(**v) for k, v in metadata_dict.items()})


@pytest.fixture
def metadata_file(tmp_path, metadata_dict):
    """Write the metadata JSON artifact and return its path."""
    path = tmp_path / "og-metadata.json"
    path.write_text(json.dumps(metadata_dict))
    return path


class RecordingRenderer:
    """Synchronous renderer fake that records its calls."""

    def __init__(self, data: bytes = b"\x89PNG fake", error: Exception | None = None):
        self.data = data
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    def render(self, brand: str, title: str, description: str) -> bytes:
        self.calls.append((brand, title, description))
        if self.error is not None:
            raise self.error
        return self.data


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def renderer_factory():
    return RecordingRenderer
