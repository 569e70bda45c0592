from __future__ import annotations

import pytest

from org_hierarchy import (
    DuplicateIdError,
    EmptyTreeError,
    ExportFormatError,
    HierarchyConfig,
    IOFailureError,
    OrgTree,
    format_line,
    parse_hierarchy,
    read_hierarchy,
    render,
    write_hierarchy,
)
from org_hierarchy.models import HierarchyLine

from sample_data import COMPANY_EXPORT


def parent_links(tree: OrgTree) -> dict[int, list[int]]:
    return {line.id: [c.id for c in tree.get_children(line.id)] for line in tree.iter_hierarchy()}


def test_format_line():
    assert format_line(HierarchyLine(0, 1, "Alice", "CEO")) == "CEO (ID: 1): Alice"
    assert format_line(HierarchyLine(2, 3, "Carol", "Eng")) == "    Eng (ID: 3): Carol"


def test_render_matches_expected_bytes(tree):
    assert render(tree) == COMPANY_EXPORT


def test_render_is_stable(tree):
    assert render(tree) == render(tree)


def test_render_empty_tree_raises(empty_tree):
    with pytest.raises(EmptyTreeError):
        render(empty_tree)


def test_write_hierarchy_bytes(tree, tmp_path):
    path = write_hierarchy(tree, tmp_path / "out.txt")
    assert path.read_bytes() == COMPANY_EXPORT.encode("utf-8")


def test_write_hierarchy_io_failure(tree, tmp_path):
    target = tmp_path / "missing-dir" / "out.txt"
    with pytest.raises(IOFailureError) as exc_info:
        write_hierarchy(tree, target)
    assert exc_info.value.path == str(target)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_round_trip_preserves_structure(tree, tmp_path):
    path = write_hierarchy(tree, tmp_path / "out.txt")
    loaded = read_hierarchy(path)

    assert parent_links(loaded) == parent_links(tree)
    assert render(loaded) == render(tree)


def test_parse_keeps_odd_names_and_roles():
    text = "Head of R&D (ID: 1): Dr. X (ID: 7): Y\n  Intern (ID: -2): \n"
    org = parse_hierarchy(text)
    assert org.find_by_id(1).role == "Head of R&D"
    assert org.find_by_id(1).name == "Dr. X (ID: 7): Y"
    assert org.find_by_id(-2).name == ""


def test_parse_empty_text_gives_empty_tree():
    assert parse_hierarchy("").is_empty
    assert parse_hierarchy("\n").is_empty


@pytest.mark.parametrize(
    "text, line_number",
    [
        ("  CEO (ID: 1): A\n", 1),
        ("CEO (ID: 1): A\n    VP (ID: 2): B\n", 2),
        ("CEO (ID: 1): A\n   VP (ID: 2): B\n", 2),
        ("CEO (ID: 1): A\nCEO (ID: 2): B\n", 2),
        ("CEO (ID: 1): A\n  garbage\n", 2),
    ],
)
def test_parse_rejects_malformed(text, line_number):
    with pytest.raises(ExportFormatError) as exc_info:
        parse_hierarchy(text)
    assert exc_info.value.line_number == line_number


def test_parse_duplicate_ids_follow_config():
    text = "CEO (ID: 1): A\n  VP (ID: 1): B\n"
    with pytest.raises(DuplicateIdError):
        parse_hierarchy(text)

    org = parse_hierarchy(text, HierarchyConfig(enforce_unique_ids=False))
    assert len(org) == 2


def test_read_missing_file(tmp_path):
    with pytest.raises(IOFailureError):
        read_hierarchy(tmp_path / "nope.txt")


def test_write_empty_tree_creates_no_file(empty_tree, tmp_path):
    target = tmp_path / "out.txt"
    with pytest.raises(EmptyTreeError):
        write_hierarchy(empty_tree, target)
    assert not target.exists()


@pytest.mark.parametrize("name", ["Ann\u2028Lee", "Tab\x0cFeed", "Next\x85Line", "Carriage\rReturn"])
def test_round_trip_names_with_other_line_breaks(tmp_path, name):
    org = OrgTree()
    org.create(1, "Alice", "CEO")
    org.add_child(1, 2, name, "VP")

    loaded = read_hierarchy(write_hierarchy(org, tmp_path / "out.txt"))

    assert loaded.find_by_id(2).name == name
    assert render(loaded) == render(org)
