"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from arabic_seo_analyzer.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_json_output(self, runner, sample_json_document):
        result = runner.invoke(cli, ["analyze", str(sample_json_document), "-p", "الرياض", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert set(data) == {
            "keywordAnalysis", "structureAnalysis", "structureStats",
            "duplicateAnalysis", "duplicateStats", "wordCount",
        }
        assert data["keywordAnalysis"]["primary"]["count"] == 4
        assert data["structureAnalysis"]["faqSection"]["status"] == "pass"

    def test_keyword_file(self, runner, sample_json_document, sample_keywords_csv):
        result = runner.invoke(cli, ["analyze", str(sample_json_document), "-k", str(sample_keywords_csv), "--json"])
        assert result.exit_code == 0
        keyword_analysis = json.loads(result.stdout)["keywordAnalysis"]
        assert keyword_analysis["primary"]["count"] == 4
        assert [s["text"] for s in keyword_analysis["secondaries"]] == ["العاصمة السعودية", "مدينة الرياض"]

    def test_options_override_keyword_file(self, runner, sample_json_document, sample_keywords_csv):
        result = runner.invoke(
            cli,
            ["analyze", str(sample_json_document), "-k", str(sample_keywords_csv), "-p", "جدة", "--json"],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["keywordAnalysis"]["primary"]["count"] == 0

    def test_tour_goal(self, runner, sample_json_document):
        result = runner.invoke(cli, ["analyze", str(sample_json_document), "-g", "tour-program", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["structureAnalysis"]["firstTitle"]["current"] != "غير مطبق"

    def test_table_output(self, runner, sample_docx):
        result = runner.invoke(cli, ["analyze", str(sample_docx), "-p", "الرياض", "--lsi", "فندق"])
        assert result.exit_code == 0
        assert "Arabic SEO Analyzer" in result.output
        assert "Keywords" in result.output
        assert "Failing checks:" in result.output

    def test_verbose_table_output(self, runner, sample_json_document):
        result = runner.invoke(cli, ["analyze", str(sample_json_document), "-v"])
        assert result.exit_code == 0
        assert "Headings:" in result.output

    def test_unknown_goal_note(self, runner, sample_json_document):
        result = runner.invoke(cli, ["analyze", str(sample_json_document), "-g", "poetry"])
        assert result.exit_code == 0
        assert "Unknown goal" in result.output


class TestErrors:
    def test_missing_document(self, runner, tmp_path: Path):
        result = runner.invoke(cli, ["analyze", str(tmp_path / "missing.json")])
        assert result.exit_code == 2

    def test_unsupported_document(self, runner, tmp_path: Path):
        path = tmp_path / "article.pdf"
        path.write_bytes(b"%PDF")
        result = runner.invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "Document loading error" in result.output

    def test_bad_keyword_file(self, runner, sample_json_document, tmp_path: Path):
        path = tmp_path / "keywords.json"
        path.write_text("{}", encoding="utf-8")
        result = runner.invoke(cli, ["analyze", str(sample_json_document), "-k", str(path)])
        assert result.exit_code == 1
        assert "Keyword loading error" in result.output
