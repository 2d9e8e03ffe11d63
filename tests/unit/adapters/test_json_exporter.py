"""Tests for adapters/json_exporter.py"""

import json

import pytest

from adapters.json_exporter import dumps_stable, export_payload_json, load_payload_json, to_jsonable
from core.domain.models import SpamConfig, WarningAction
from core.errors import InvalidInputError


class TestJsonExporter:
    def test_models_are_dumped_in_wire_form(self):
        data = to_jsonable({"spam": SpamConfig(excluded_roles=["1"])})
        assert data["spam"]["excluded_roles"] == '["1"]'

    def test_lists_of_models(self):
        data = to_jsonable([WarningAction(warning_count=1, action="ban")])
        assert data == [{"warning_count": 1, "action": "ban", "duration_seconds": None}]

    def test_dumps_is_sorted(self):
        assert dumps_stable({"b": 1, "a": "ñ"}) == '{\n  "a": "ñ",\n  "b": 1\n}'

    def test_export_and_load(self, tmp_path):
        target = tmp_path / "out" / "commands.json"

        written = export_payload_json(payload={"commands": [{"name": "hi"}]}, output_path=target)

        assert written == target
        assert json.loads(target.read_text(encoding="utf-8")) == {"commands": [{"name": "hi"}]}
        assert load_payload_json(target) == {"commands": [{"name": "hi"}]}

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(InvalidInputError, match="Cannot read"):
            load_payload_json(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(InvalidInputError):
            load_payload_json(path)
