"""Tests for dataset parsing and fetching."""

import json

import httpx
import pytest

from periodic_quiz.core.dataset_loader import (
    fetch_elements,
    load_elements,
    load_elements_from_file,
    parse_elements,
)
from periodic_quiz.core.models import DatasetLoadError, ElementRecord

from .conftest import SAMPLE_ELEMENTS_DATA


class TestElementRecord:
    """Tests for building records from dataset entries."""

    def test_from_dict_reads_fields(self):
        record = ElementRecord.from_dict(
            {
                "number": 26,
                "symbol": "Fe",
                "name": "Iron",
                "category": "transition metal",
                "xpos": 8,
                "ypos": 4,
                "phase": "Solid",
                "atomic_mass": 55.8452,
                "density": 7.874,
                "boil": 3134,
                "electron_configuration": "1s2 2s2 2p6 3s2 3p6 4s2 3d6",
                "image": {"url": "https://example.org/fe.jpg"},
            }
        )
        assert record.number == 26
        assert record.boil == 3134.0
        assert record.image_url == "https://example.org/fe.jpg"
        assert record.source is None
        assert record.display_image_url() == "https://example.org/fe.jpg"

    def test_missing_optional_fields_are_none(self):
        record = ElementRecord.from_dict({"number": 118, "symbol": "Og", "name": "Oganesson", "density": None})
        assert record.density is None
        assert record.value_for("phase") is None
        assert record.display_image_url() == "https://images-of-elements.com/og.png"
        assert record.value_for("not_a_field") is None

    @pytest.mark.parametrize("entry", [{"symbol": "X", "name": "X"}, {"number": 0, "symbol": "X", "name": "X"}, {"number": 5, "name": "B"}])
    def test_required_fields(self, entry):
        with pytest.raises(DatasetLoadError):
            ElementRecord.from_dict(entry)


class TestParseElements:
    """Tests for whole-document parsing."""

    def test_accepts_wrapped_document(self):
        elements = parse_elements({"elements": SAMPLE_ELEMENTS_DATA})
        assert len(elements) == 10

    def test_accepts_bare_list(self):
        assert len(parse_elements(SAMPLE_ELEMENTS_DATA[:2])) == 2

    def test_rejects_missing_elements(self):
        with pytest.raises(DatasetLoadError):
            parse_elements({"items": []})

    def test_rejects_duplicate_symbols(self):
        duplicate = dict(SAMPLE_ELEMENTS_DATA[0], number=999)
        with pytest.raises(DatasetLoadError):
            parse_elements([SAMPLE_ELEMENTS_DATA[0], duplicate])

    def test_rejects_duplicate_numbers(self):
        duplicate = dict(SAMPLE_ELEMENTS_DATA[0], symbol="Hx")
        with pytest.raises(DatasetLoadError):
            parse_elements([SAMPLE_ELEMENTS_DATA[0], duplicate])


class TestFetchElements:
    """Tests for the HTTP dataset provider."""

    def test_fetch_success(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"elements": SAMPLE_ELEMENTS_DATA})

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            elements = fetch_elements("https://example.org/pt.json", client=client)
        assert [e.symbol for e in elements][:3] == ["H", "He", "Li"]

    def test_fetch_http_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(DatasetLoadError):
                fetch_elements("https://example.org/pt.json", client=client)

    def test_fetch_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>not json</html>")

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(DatasetLoadError):
                fetch_elements("https://example.org/pt.json", client=client)


class TestLoadFromFile:
    """Tests for reading a local dataset copy."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "PeriodicTableJSON.json"
        path.write_text(json.dumps({"elements": SAMPLE_ELEMENTS_DATA}), encoding="utf-8")
        assert len(load_elements_from_file(path)) == 10

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetLoadError):
            load_elements_from_file(tmp_path / "missing.json")

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(DatasetLoadError):
            load_elements_from_file(path)


def _failing_client() -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    return httpx.Client(transport=httpx.MockTransport(handler))


class TestLoadWithFallback:
    """Tests for downloading with a local copy to fall back on."""

    def test_download_preferred(self, tmp_path):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"elements": SAMPLE_ELEMENTS_DATA[:2]})

        path = tmp_path / "PeriodicTableJSON.json"
        path.write_text(json.dumps({"elements": SAMPLE_ELEMENTS_DATA}), encoding="utf-8")
        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            assert len(load_elements("https://example.org/pt.json", fallback_path=path, client=client)) == 2

    def test_failed_download_reads_local_copy(self, tmp_path):
        path = tmp_path / "PeriodicTableJSON.json"
        path.write_text(json.dumps({"elements": SAMPLE_ELEMENTS_DATA}), encoding="utf-8")
        with _failing_client() as client:
            elements = load_elements("https://example.org/pt.json", fallback_path=path, client=client)
        assert len(elements) == 10

    def test_failed_download_without_local_copy_raises(self, tmp_path):
        with _failing_client() as client:
            with pytest.raises(DatasetLoadError, match="Failed to fetch"):
                load_elements("https://example.org/pt.json", fallback_path=tmp_path / "missing.json", client=client)

    def test_failed_download_without_fallback_raises(self):
        with _failing_client() as client:
            with pytest.raises(DatasetLoadError):
                load_elements("https://example.org/pt.json", client=client)
