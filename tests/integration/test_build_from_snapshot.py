"""
Integration tests for building a train from a snapshot file.

Runs the command line entry point over real JSON documents.
"""

import json

import pytest

import main
from yardmaster.core.models import LayoutSnapshot

MINIMAL_ROUTE = {"_id": "r1", "originatingYardId": "originLoc", "terminatingYardId": "termLoc"}


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Leave root logging to pytest."""
    monkeypatch.setattr(main, "setup_logging", lambda *args, **kwargs: None)


@pytest.fixture
def snapshot_file(tmp_path, route, industries, locations, rolling_stock, switchlist):
    path = tmp_path / "snapshot.json"
    snapshot = LayoutSnapshot(route, industries, locations, rolling_stock, switchlist)
    path.write_text(json.dumps(snapshot.to_dict()))
    return path


class TestCommandLine:
    """Test the main entry point end to end."""

    def test_build_prints_assignments(self, snapshot_file, capsys):
        assert main.main([str(snapshot_file), "--seed", "1"]) == 0

        output = json.loads(capsys.readouterr().out)
        assigned = {car["_id"]: car for car in output["assigned"]}
        assert set(assigned) == {"C1", "C2", "C3"}
        assert assigned["C1"]["destination"]["immediateDestination"]["industryId"] == "IndMid"
        assert assigned["C3"]["destination"]["immediateDestination"]["industryId"] == "ind_term"
        assert [car["_id"] for car in output["available"]] == ["C4"]
        assert output["status"] == "IN_PROGRESS"
        assert output["switchlist"]["status"] == "IN_PROGRESS"

    def test_summary_output(self, snapshot_file, capsys):
        assert main.main([str(snapshot_file), "--summary"]) == 0

        out = capsys.readouterr().out
        assert "2 cars assigned from Starting Yard" in out
        assert "1 car picked up from industries along the route" in out

    def test_config_file_applied(self, snapshot_file, tmp_path, capsys):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"builder": {"virtual_yard_prefix": "v-"}}))
        data = json.loads(snapshot_file.read_text())
        data["industries"] = [i for i in data["industries"] if i["_id"] != "ind_term"]
        snapshot_file.write_text(json.dumps(data))

        assert main.main([str(snapshot_file), "--config", str(config_path)]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["virtualIndustryIds"] == ["v-termLoc"]

    def test_missing_location_fails(self, snapshot_file):
        data = json.loads(snapshot_file.read_text())
        data["locations"] = [loc for loc in data["locations"] if loc["_id"] != "originLoc"]
        snapshot_file.write_text(json.dumps(data))

        assert main.main([str(snapshot_file)]) == 1

    def test_unreadable_snapshot(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{")

        assert main.main([str(bad)]) == 2
        assert main.main([str(tmp_path / "missing.json")]) == 2

    def test_snapshot_without_route(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"industries": []}))

        assert main.main([str(path)]) == 2

    def test_invalid_config(self, snapshot_file, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text("{oops")

        assert main.main([str(snapshot_file), "--config", str(config_path)]) == 1

    @pytest.mark.parametrize("document", [
        [],
        {"route": "r1"},
        {"route": MINIMAL_ROUTE, "industries": ["x"]},
        {"route": MINIMAL_ROUTE, "locations": {"originLoc": {}}},
    ])
    def test_malformed_snapshot(self, tmp_path, document):
        path = tmp_path / "malformed.json"
        path.write_text(json.dumps(document))

        assert main.main([str(path)]) == 2

    def test_malformed_nested_record(self, snapshot_file):
        data = json.loads(snapshot_file.read_text())
        data["industries"][0]["tracks"] = ["ot1"]
        snapshot_file.write_text(json.dumps(data))

        assert main.main([str(snapshot_file)]) == 2
