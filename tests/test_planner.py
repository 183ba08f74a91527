from pathlib import Path

import pytest

from conftest import logged
from mdmv.document import Document
from mdmv.errors import AmbiguousDestinationError, InvalidTemplateError, NoFilesToMoveError
from mdmv.mover import Mover
from mdmv.planner import MovePlanner, is_template, render_template


@pytest.fixture
def planner(fs):
    return MovePlanner(fs, Mover(fs))


def make_documents(tmp_path, *specs):
    documents = []
    for path, title in specs:
        (tmp_path / path).parent.mkdir(parents=True, exist_ok=True)
        (tmp_path / path).write_text(f"# {title}\n" if title else "no heading\n")
        documents.append(Document(path=Path(path), title=title))
    return documents


def test_is_template():
    assert not is_template("notes/index.md")
    assert is_template("%title%/index.md")
    assert is_template("notes/%title%.md")


@pytest.mark.parametrize("dest", ["%name%/index.md", "100%.md", "%Title%/index.md"])
def test_is_template_rejects_unknown_placeholders(dest):
    with pytest.raises(InvalidTemplateError, match="incorrect template"):
        is_template(dest)


def test_render_template_escapes_separators():
    assert render_template("%title%/README.md", "A/B test") == "A_B test/README.md"


def test_render_template_replaces_first_placeholder_only():
    assert render_template("%title%/%title%.md", "Note") == "Note/%title%.md"


def test_empty_batch_fails(planner):
    with pytest.raises(NoFilesToMoveError, match="no files to move"):
        planner.move_files([], "dest")


def test_invalid_template_fails_before_moving(planner, tmp_path):
    documents = make_documents(tmp_path, ("a.md", "First"))

    with pytest.raises(InvalidTemplateError):
        planner.move_files(documents, "%name%/index.md")

    assert (tmp_path / "a.md").exists()


def test_template_destination(planner, tmp_path):
    documents = make_documents(tmp_path, ("a.md", "First"), ("b.md", "Second"))

    planner.move_files(documents, "notes/%title%/index.md")

    assert (tmp_path / "notes/First/index.md").exists()
    assert (tmp_path / "notes/Second/index.md").exists()
    assert documents[0].path == Path("notes/First/index.md")


def test_template_without_heading_uses_file_name(planner, tmp_path, log_messages):
    documents = make_documents(tmp_path, ("drafts/plain.md", ""))

    planner.move_files(documents, "%title%/index.md")

    assert (tmp_path / "plain/index.md").exists()
    assert logged(log_messages, "No heading found")


def test_directory_destination(planner, tmp_path):
    (tmp_path / "dest").mkdir()
    documents = make_documents(tmp_path, ("one/a.md", "A"), ("two/b.md", "B"))

    planner.move_files(documents, "dest")

    assert (tmp_path / "dest/a.md").exists()
    assert (tmp_path / "dest/b.md").exists()


def test_literal_destination_single_file(planner, tmp_path):
    documents = make_documents(tmp_path, ("a.md", "A"))

    planner.move_files(documents, "renamed/b.md")

    assert (tmp_path / "renamed/b.md").exists()
    assert not (tmp_path / "a.md").exists()


def test_literal_destination_multiple_files_fails(planner, tmp_path):
    documents = make_documents(tmp_path, ("a.md", "A"), ("b.md", "B"))

    with pytest.raises(AmbiguousDestinationError, match="existing directory"):
        planner.move_files(documents, "dest.md")

    assert (tmp_path / "a.md").exists()
    assert (tmp_path / "b.md").exists()
    assert not (tmp_path / "dest.md").exists()
