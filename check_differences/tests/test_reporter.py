"""
Tests for the Reporter
======================
"""

from check_differences.artifacts import ArtifactSet
from check_differences.models import AnalysisResult, Contradiction
from check_differences.parser import parse_response
from check_differences.reporter import render
from check_differences.schemas import ExitSignal, OutputFormat
from check_differences.validator import filter_contradictions


ARTIFACTS = ArtifactSet.from_pairs([("id1", "x"), ("id2", "y")])


def report_for(raw: str):
    candidates = parse_response(raw, OutputFormat.JSON, ARTIFACTS.identifiers)
    return render(filter_contradictions(candidates, ARTIFACTS))


class TestRender:
    """Tests for report text and exit signal"""

    def test_empty_is_success(self):
        report = render(AnalysisResult())
        assert report.text == ""
        assert report.signal == ExitSignal.SUCCESS
        assert int(report.signal) == 0

    def test_lines_joined_without_trailing_newline(self):
        result = AnalysisResult(contradictions=(
            Contradiction("id1", "id2", "first"),
            Contradiction("id2", "id1", "second"),
        ))
        report = render(result)
        assert report.text == "id1,id2:first\nid2,id1:second"
        assert report.signal == ExitSignal.FAILURE

    def test_synthetic_line_joins_all_identifiers(self):
        report = render(AnalysisResult.failed(["a", "b", "c"]))
        assert report.text == "a,b,c:an error occurred while analyzing contradictions"
        assert report.signal == ExitSignal.FAILURE


class TestJsonToReport:
    """JSON answer through parser, validator and reporter"""

    def test_no_errors(self):
        report = report_for('```json\n{"summary": "consistent", "errors": []}\n```')
        assert (report.text, report.signal) == ("", ExitSignal.SUCCESS)

    def test_single_error(self):
        raw = '{"summary": "s", "errors": [{"file1": "id1", "file2": "id2", "description": "description"}]}'
        report = report_for(raw)
        assert (report.text, report.signal) == ("id1,id2:description", ExitSignal.FAILURE)

    def test_external_file_never_reported(self):
        raw = '{"errors": [{"file1": "id1", "file2": "other.md", "description": "d"}, {"file1": "id2", "file2": "id1", "description": "kept"}]}'
        report = report_for(raw)
        assert report.text == "id2,id1:kept"

    def test_multiline_description_stays_on_one_line(self):
        raw = '{"errors": [{"file1": "id1", "file2": "id2", "description": "line one\\n  line two\\r\\nline three"}]}'
        report = report_for(raw)
        assert report.text == "id1,id2:line one line two line three"
        assert len(report.text.splitlines()) == 1
