"""Tests for the resumedoc command line."""

import json

import pytest
import yaml

from resumedoc.export import Format, render_document
from resumedoc.main import main


@pytest.fixture
def sample_json(write_file, sample_doc):
    return write_file("sample.json", render_document(sample_doc, Format.JSON))


class TestConvert:
    def test_json_to_markdown(self, sample_json, tmp_path):
        out = tmp_path / "resume.md"
        assert main(["convert", str(sample_json), "--to", "markdown", "-o", str(out)]) == 0
        assert out.read_text(encoding="utf-8").startswith("# John Doe - Software Engineer")

    def test_markdown_to_json(self, write_file, tmp_path):
        src = write_file("r.md", "# Jane\n\n## Interests\n\n**Hobby:** Chess\n")
        out = tmp_path / "r.json"
        assert main(["convert", str(src), "-t", "json", "-o", str(out)]) == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["title"] == "Jane"
        assert data["sections"][0]["section name"] == "Interests"
        assert data["sections"][0]["content"] == [{"Hobby": "Chess"}]

    def test_default_output_name(self, sample_json, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["convert", str(sample_json), "--to", "html"]) == 0
        assert (tmp_path / "john_doe_software_engineer.html").exists()

    def test_several_inputs_into_directory(self, write_file, tmp_path, capsys):
        first = write_file("a.md", "# Alpha\n## S\n")
        second = write_file("b.md", "# Beta\n## S\n")
        out_dir = tmp_path / "out"
        code = main(
            ["convert", str(first), str(second), "--to", "json", "-o", str(out_dir), "--json"]
        )
        assert code == 0
        assert (out_dir / "alpha.json").exists()
        assert (out_dir / "beta.json").exists()
        report = json.loads(capsys.readouterr().out)
        assert report["failed"] == 0
        assert len(report["written"]) == 2

    def test_refuses_to_overwrite(self, sample_json, tmp_path):
        out = tmp_path / "resume.md"
        out.write_text("keep", encoding="utf-8")
        assert main(["convert", str(sample_json), "--to", "markdown", "-o", str(out)]) == 1
        assert out.read_text(encoding="utf-8") == "keep"
        assert main(
            ["convert", str(sample_json), "--to", "markdown", "-o", str(out), "--overwrite"]
        ) == 0

    def test_missing_input(self, tmp_path, capsys):
        code = main(["convert", str(tmp_path / "nope.json"), "--to", "markdown"])
        assert code == 1
        assert "not found" in capsys.readouterr().out

    def test_invalid_json(self, write_file, tmp_path, capsys):
        src = write_file("bad.json", "{not json")
        assert main(["convert", str(src), "--to", "markdown", "-o", str(tmp_path / "x.md")]) == 1
        assert "Invalid JSON" in capsys.readouterr().out

    def test_validation_errors_are_reported(self, write_file, tmp_path, capsys):
        src = write_file("bad.json", '{"title": "T", "sections": [{"content": 5}]}')
        assert main(["convert", str(src), "--to", "markdown", "-o", str(tmp_path / "x.md")]) == 1
        assert "validation failed" in capsys.readouterr().out

    def test_broken_html_still_converts(self, write_file, tmp_path, capsys):
        src = write_file("bad.html", "<not-even-html")
        out = tmp_path / "bad.md"
        assert main(["convert", str(src), "--to", "markdown", "-o", str(out)]) == 0
        assert "could not be parsed" in capsys.readouterr().out
        assert out.read_text(encoding="utf-8").startswith("# HTML Parse Error")


class TestPdf:
    def test_pdf_export(self, sample_json, tmp_path):
        out = tmp_path / "resume.pdf"
        assert main(["pdf", str(sample_json), "-o", str(out), "--size", "letter"]) == 0
        assert out.read_bytes().startswith(b"%PDF")

    def test_invalid_size(self, sample_json, capsys):
        assert main(["pdf", str(sample_json), "--size", "huge"]) == 1
        assert "Invalid paper size" in capsys.readouterr().out


class TestNew:
    def test_sample(self, tmp_path):
        out = tmp_path / "resume.json"
        assert main(["new", "-o", str(out)]) == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [s["section name"] for s in data["sections"]] == ["Experience", "Education", "Skills"]

    def test_blank_markdown_with_title(self, tmp_path):
        out = tmp_path / "resume.md"
        assert main(["new", "-o", str(out), "--blank", "--title", "Jane Roe"]) == 0
        assert out.read_text(encoding="utf-8").startswith("# Jane Roe\n\n## Experience")

    def test_yaml_output(self, tmp_path):
        out = tmp_path / "resume.yaml"
        assert main(["new", "-o", str(out)]) == 0
        data = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert data["title"] == "John Doe - Software Engineer"
        assert not out.read_text(encoding="utf-8").startswith("{")

    def test_existing_file(self, tmp_path):
        out = tmp_path / "resume.json"
        out.write_text("{}", encoding="utf-8")
        assert main(["new", "-o", str(out)]) == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
