"""
Tests for YAML export.
"""

import io

import pytest
import yaml

from brewcalc import yaml_export
from brewcalc.models import Fermentable
from brewcalc.recordset import RecordKind, RecordSet


class TestYamlExport:
    """Tests for yaml_export.write."""

    def test_pale_malt(self, pale_malt):
        text = yaml_export.to_string(RecordSet.of([pale_malt]))
        assert text == (
            "Pale Malt:\n"
            "  version: 1\n"
            "  type: Grain\n"
            "  amount: 5.0\n"
            "  yield: 78.0\n"
            "  color: 3.0\n"
            "  add_after_boil: false\n"
            "  recommend_mash: true\n"
        )

    def test_optional_fields(self, pale_malt):
        malt = pale_malt.model_copy(update={"origin": "UK", "notes": ""})
        data = yaml.safe_load(yaml_export.to_string(RecordSet.of([malt])))
        assert data["Pale Malt"]["origin"] == "UK"
        assert data["Pale Malt"]["notes"] == ""
        assert "supplier" not in data["Pale Malt"]
        assert "name" not in data["Pale Malt"]

    def test_enum_token(self):
        malt = Fermentable(name="DME", type="Dry Extract")
        data = yaml.safe_load(yaml_export.to_string(RecordSet.of([malt])))
        assert data["DME"]["type"] == "Dry Extract"

    def test_insertion_order(self):
        names = ["Pilsner", "Munich", "Abbey"]
        records = RecordSet.of(Fermentable(name=n) for n in names)
        data = yaml.safe_load(yaml_export.to_string(records))
        assert list(data) == names

    def test_empty_set_writes_nothing(self):
        assert yaml_export.to_string(RecordSet.empty()) == ""

    @pytest.mark.parametrize("kind", [k for k in RecordKind if k is not RecordKind.FERMENTABLE])
    def test_other_kinds_write_nothing(self, kind):
        assert yaml_export.to_string(RecordSet(kind)) == ""

    def test_other_kind_with_records(self, cascade):
        sink = io.StringIO()
        yaml_export.write(sink, RecordSet.of([cascade]))
        assert sink.getvalue() == ""

    def test_write_file(self, tmp_path, pale_malt):
        path = tmp_path / "malts.yaml"
        yaml_export.write_file(path, RecordSet.of([pale_malt]))
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["Pale Malt"]["recommend_mash"] is True
