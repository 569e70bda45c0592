"""Flat text export of the hierarchy, and a loader for the same format.

One line per employee in pre-order, indented two spaces per level::

    CEO (ID: 1): Alice
      VP (ID: 2): Bob
        Eng (ID: 3): Carol
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from .config import HierarchyConfig
from .errors import ExportFormatError, HierarchyError, IOFailureError
from .models import EmployeeSpec, HierarchyLine
from .org_tree import OrgTree

logger = logging.getLogger(__name__)

INDENT = "  "

_LINE_RE = re.compile(r"^(?P<indent> *)(?P<role>.*?) \(ID: (?P<id>-?\d+)\): (?P<name>.*)$")


def format_line(line: HierarchyLine) -> str:
    return f"{INDENT * line.depth}{line.role} (ID: {line.id}): {line.name}"


def render_lines(tree: OrgTree) -> Iterator[str]:
    """Yield newline-terminated lines; used for both display and file export."""
    for line in tree.iter_hierarchy():
        yield format_line(line) + "\n"


def render(tree: OrgTree) -> str:
    return "".join(render_lines(tree))


def write_hierarchy(tree: OrgTree, path: str | Path) -> Path:
    """Write the full hierarchy to ``path`` and return it."""
    path = Path(path)
    content = render(tree)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        raise IOFailureError(str(path), exc.strerror or str(exc)) from exc
    logger.info("Wrote %d employees to %s", content.count("\n"), path)
    return path


# ── Loader ──────────────────────────────────────


def _parse_line(text: str, line_number: int) -> HierarchyLine:
    match = _LINE_RE.match(text)
    if match is None:
        raise ExportFormatError(line_number, f"not an employee line: {text!r}")
    indent = len(match.group("indent"))
    if indent % len(INDENT):
        raise ExportFormatError(line_number, f"odd indentation ({indent} spaces)")
    return HierarchyLine(
        depth=indent // len(INDENT),
        id=int(match.group("id")),
        name=match.group("name"),
        role=match.group("role"),
    )


def parse_hierarchy(text: str, config: HierarchyConfig | None = None) -> OrgTree:
    """Rebuild a tree from exported text.

    Raises:
        ExportFormatError: bad indentation, a second root, or an unparseable line.
        DuplicateIdError: repeated id while uniqueness is enforced.
    """
    tree = OrgTree(config)
    if not text.strip():
        return tree

    root: EmployeeSpec | None = None
    # chain[d] is the most recent employee seen at depth d
    chain: list[EmployeeSpec] = []
    # only "\n" ends a line; names may hold other line-break characters
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line_number, raw in enumerate(lines, start=1):
        line = _parse_line(raw, line_number)
        spec = EmployeeSpec(id=line.id, name=line.name, role=line.role)
        if root is None:
            if line.depth != 0:
                raise ExportFormatError(line_number, "first line must not be indented")
            root = spec
        elif line.depth == 0:
            raise ExportFormatError(line_number, "more than one root")
        elif line.depth > len(chain):
            raise ExportFormatError(line_number, "indentation skips a level")
        else:
            chain[line.depth - 1].subordinates.append(spec)
        del chain[line.depth:]
        chain.append(spec)

    tree.build(root)
    return tree


def read_hierarchy(path: str | Path, config: HierarchyConfig | None = None) -> OrgTree:
    """Load a tree previously written by :func:`write_hierarchy`."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except OSError as exc:
        logger.error("Failed to read %s: %s", path, exc)
        raise IOFailureError(str(path), exc.strerror or str(exc)) from exc
    try:
        tree = parse_hierarchy(text, config)
    except HierarchyError:
        logger.warning("Could not load hierarchy from %s", path)
        raise
    logger.info("Loaded %d employees from %s", len(tree), path)
    return tree
