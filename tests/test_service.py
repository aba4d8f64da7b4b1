"""
Tests for the VitalityService application service

Covers:
    - Result line for the reference scenarios
    - Diagnostic line instead of a result on malformed input
    - Several requests on one open channel
    - File analysis and JSON export
"""

import io
import json
import logging

import pytest

from netvitality.application.ports import IVitalityUseCase
from netvitality.application.services import VitalityService
from netvitality.domain.services import InputFormatError


@pytest.fixture
def service():
    return VitalityService()


class TestAnalyzeText:

    @pytest.mark.parametrize("key, expected", [
        ("path", "['B']"),
        ("triangle", "['A', 'B', 'C']"),
        ("disjoint", "['C', 'D']"),
        ("isolated", "['Solo']"),
        ("barbell", "['D']"),
    ])
    def test_result_lines(self, service, graph_texts, key, expected):
        assert service.analyze_text(graph_texts[key]).format_line() == expected

    def test_empty_graph(self, service):
        result = service.analyze_text("{[],{}}")
        assert result.format_line() == "[]"
        assert result.minimum is None
        assert result.is_empty

    def test_result_contents(self, service, graph_texts):
        result = service.analyze_text(graph_texts["disjoint"])

        assert result.minimum == 34
        assert result.selected == ["C", "D"]
        assert [c.value for c in result.components] == [2, 10]
        assert result.top(2) == [("C", 34), ("D", 34)]

    def test_summary_describes_unreduced_graph(self, service, graph_texts):
        summary = service.analyze_text(graph_texts["barbell"]).summary

        assert summary.nodes == 7
        assert summary.edges == 8
        assert summary.num_components == 1
        assert summary.num_cut_vertices == 2
        assert summary.total_weight == 28

    def test_info_line_reports_cut_vertices(self, service, graph_texts, caplog):
        with caplog.at_level(logging.INFO, logger="netvitality.application.services.vitality_service"):
            service.analyze_text(graph_texts["barbell"])

        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert any("2 cut vertices" in m and "minimum=234" in m for m in messages)

    def test_malformed_input_raises(self, service):
        with pytest.raises(InputFormatError):
            service.analyze_text("{[['A','B']")

    def test_service_implements_port(self, service):
        assert isinstance(service, IVitalityUseCase)


class TestProcessStream:

    def test_writes_single_result_line(self, service, graph_texts):
        out = io.StringIO()
        assert service.process_stream(io.StringIO(graph_texts["path"]), out) is True
        assert out.getvalue() == "['B']\n"

    def test_writes_single_diagnostic_line(self, service):
        out = io.StringIO()
        assert service.process_stream(io.StringIO("{[['A','B']"), out) is False
        assert out.getvalue() == (
            "Input format violation at line 1 char 11: "
            "expected char , or ] but end of input reached\n"
        )

    def test_repeated_requests_on_one_channel(self, service, graph_texts):
        channel = io.StringIO(
            graph_texts["path"] + "\n" + graph_texts["triangle"] + "\n" + graph_texts["disjoint"]
        )
        out = io.StringIO()
        while service.process_stream(channel, out):
            pass

        lines = out.getvalue().splitlines()
        assert lines[:3] == ["['B']", "['A', 'B', 'C']", "['C', 'D']"]
        # the drained channel ends with a diagnostic, never a fourth result
        assert lines[3].startswith("Input format violation")
        assert len(lines) == 4


class TestFiles:

    def test_analyze_file(self, service, graph_file):
        assert service.analyze_file(graph_file).selected == ["B"]

    def test_missing_file(self, service, tmp_path):
        with pytest.raises(FileNotFoundError):
            service.analyze_file(tmp_path / "missing.txt")

    def test_export_results(self, service, graph_texts, tmp_path):
        result = service.analyze_text(graph_texts["path"])
        target = tmp_path / "nested" / "result.json"

        service.export_results(result, target)

        data = json.loads(target.read_text())
        assert data["selected"] == ["B"]
        assert data["scores"] == {"A": 5, "B": 3, "C": 5}
        assert data["components"][0]["cutpoints"] == ["B"]
