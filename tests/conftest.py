"""Shared fixtures for resumedoc tests."""

import pytest

from resumedoc.document import ResumeDocument, Section
from resumedoc.document.templates import sample_document


@pytest.fixture
def sample_doc() -> ResumeDocument:
    return sample_document()


@pytest.fixture
def experience_doc() -> ResumeDocument:
    return ResumeDocument(
        title="A - B",
        sections=[
            Section(
                name="Experience",
                id="x1",
                content=[
                    {
                        "job title": "Eng",
                        "Organization": "Acme",
                        "Duration": "2020-2024",
                        "Description": "Built things.",
                    }
                ],
            )
        ],
    )


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
