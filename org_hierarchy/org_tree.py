"""
Organization hierarchy tree.

Holds one rooted tree of employees and provides build, query, mutation and
traversal operations. Lookups hand out :class:`EmployeeRecord` snapshots, so
callers never hold a reference into the tree across a mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .config import HierarchyConfig
from .errors import (
    DuplicateIdError,
    EmptyTreeError,
    InvalidArgumentError,
    NotFoundError,
    ParentNotFoundError,
    StaleIteratorError,
)
from .models import Employee, EmployeeRecord, EmployeeSpec, HierarchyLine

logger = logging.getLogger(__name__)


class OrgTree:
    """Rooted reporting tree; empty until :meth:`create` or :meth:`build`."""

    def __init__(self, config: HierarchyConfig | None = None):
        self.config = config or HierarchyConfig()
        self._root: Employee | None = None
        # bumped on every structural change; open hierarchy iterators check it
        self._version = 0

    # ──────────────────────────────────────────────
    # Internal traversal
    # ──────────────────────────────────────────────

    def _walk(self) -> Iterator[tuple[Employee | None, int, int, Employee]]:
        """Pre-order walk yielding ``(parent, index_in_parent, depth, node)``.

        Uses an explicit stack so tree depth is not tied to the recursion limit.
        """
        if self._root is None:
            return
        stack: list[tuple[Employee | None, int, int, Employee]] = [(None, 0, 0, self._root)]
        while stack:
            parent, index, depth, node = stack.pop()
            yield parent, index, depth, node
            for i in range(len(node.children) - 1, -1, -1):
                stack.append((node, i, depth + 1, node.children[i]))

    def _require_root(self) -> Employee:
        if self._root is None:
            raise EmptyTreeError()
        return self._root

    def _find_node(self, employee_id: int) -> Employee | None:
        for _, _, _, node in self._walk():
            if node.id == employee_id:
                return node
        return None

    def _get_node(self, employee_id: int) -> Employee:
        self._require_root()
        node = self._find_node(employee_id)
        if node is None:
            logger.debug("Employee %d not found", employee_id)
            raise NotFoundError(employee_id)
        return node

    # ──────────────────────────────────────────────
    # Basic state
    # ──────────────────────────────────────────────

    @property
    def root(self) -> EmployeeRecord | None:
        return self._root.to_record() if self._root is not None else None

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return sum(1 for _ in self._walk())

    def __contains__(self, employee_id: object) -> bool:
        return isinstance(employee_id, int) and self._find_node(employee_id) is not None

    # ──────────────────────────────────────────────
    # Construction
    # ──────────────────────────────────────────────

    def create(self, employee_id: int, name: str, role: str) -> EmployeeRecord:
        """Replace the whole tree with a single root employee."""
        self._root = None
        self._root = Employee(id=employee_id, name=name, role=role)
        self._version += 1
        logger.info("Created company rooted at %d (%s)", employee_id, role)
        return self._root.to_record()

    def build(self, spec: EmployeeSpec) -> EmployeeRecord:
        """Replace the whole tree with ``spec`` and all of its subordinates.

        The new tree is assembled off to the side and only installed once it
        is complete, so a duplicate id leaves the current tree untouched.
        """
        seen: set[int] = set()
        root = Employee(id=spec.id, name=spec.name, role=spec.role)
        pending: list[tuple[EmployeeSpec, Employee]] = [(spec, root)]
        count = 0
        while pending:
            spec_node, node = pending.pop()
            if self.config.enforce_unique_ids and spec_node.id in seen:
                raise DuplicateIdError(spec_node.id)
            seen.add(spec_node.id)
            count += 1
            for sub in spec_node.subordinates:
                child = Employee(id=sub.id, name=sub.name, role=sub.role)
                node.children.append(child)
                pending.append((sub, child))

        self._root = None
        self._root = root
        self._version += 1
        logger.info("Built company rooted at %d with %d employees", spec.id, count)
        return root.to_record()

    def add_child(
        self, parent_id: int, employee_id: int, name: str, role: str
    ) -> EmployeeRecord:
        """Append a new employee as the last subordinate of ``parent_id``."""
        self._require_root()
        parent = self._find_node(parent_id)
        if parent is None:
            logger.debug("Supervisor %d not found", parent_id)
            raise ParentNotFoundError(parent_id)
        if self.config.enforce_unique_ids and self._find_node(employee_id) is not None:
            raise DuplicateIdError(employee_id)

        child = Employee(id=employee_id, name=name, role=role)
        parent.children.append(child)
        self._version += 1
        logger.info("Added %d under %d", employee_id, parent_id)
        return child.to_record()

    # ──────────────────────────────────────────────
    # Lookups
    # ──────────────────────────────────────────────

    def find_by_id(self, employee_id: int) -> EmployeeRecord:
        """First pre-order match for ``employee_id``."""
        return self._get_node(employee_id).to_record()

    def find_all_by_role(self, role: str) -> list[EmployeeRecord]:
        """Every employee whose role equals ``role`` exactly, in pre-order."""
        self._require_root()
        found = [node.to_record() for _, _, _, node in self._walk() if node.role == role]
        logger.debug("Role %r matched %d employees", role, len(found))
        return found

    def get_children(self, employee_id: int) -> list[EmployeeRecord]:
        """Direct subordinates in display order."""
        return [child.to_record() for child in self._get_node(employee_id).children]

    def get_path(self, employee_id: int) -> list[EmployeeRecord]:
        """Chain of employees from the root down to ``employee_id``.

        e.g. get_path(3) → [CEO (1), VP (2), Eng (3)]
        """
        self._require_root()
        path: list[Employee] = []
        for _, _, depth, node in self._walk():
            del path[depth:]
            path.append(node)
            if node.id == employee_id:
                return [n.to_record() for n in path]
        raise NotFoundError(employee_id)

    def get_depth(self, employee_id: int) -> int:
        """Depth level of an employee (0 = root)."""
        self._require_root()
        for _, _, depth, node in self._walk():
            if node.id == employee_id:
                return depth
        raise NotFoundError(employee_id)

    def get_subtree_dict(self, employee_id: int) -> dict:
        """Nested dict of an employee and everyone under them.

        Returns:
            {"id": 2, "name": "Bob", "role": "VP", "children": [{...}, ...]}
        """
        top = self._get_node(employee_id)
        result = {"id": top.id, "name": top.name, "role": top.role, "children": []}
        stack = [(top, result)]
        while stack:
            node, out = stack.pop()
            for child in node.children:
                child_out = {"id": child.id, "name": child.name, "role": child.role, "children": []}
                out["children"].append(child_out)
                stack.append((child, child_out))
        return result

    # ──────────────────────────────────────────────
    # Mutation
    # ──────────────────────────────────────────────

    def update(
        self, employee_id: int, name: str | None = None, role: str | None = None
    ) -> EmployeeRecord:
        """Change name and/or role; empty or omitted fields are left alone."""
        node = self._get_node(employee_id)
        if name:
            node.name = name
        if role:
            node.role = role
        logger.info("Updated %d", employee_id)
        return node.to_record()

    def _set_role(self, employee_id: int, role: str, action: str) -> EmployeeRecord:
        self._require_root()
        if not role:
            raise InvalidArgumentError("New position must not be empty.")
        node = self._get_node(employee_id)
        node.role = role
        logger.info("%s %d to %s", action, employee_id, role)
        return node.to_record()

    def promote(self, employee_id: int, role: str) -> EmployeeRecord:
        return self._set_role(employee_id, role, "Promoted")

    def demote(self, employee_id: int, role: str) -> EmployeeRecord:
        return self._set_role(employee_id, role, "Demoted")

    def delete_subtree(self, employee_id: int) -> EmployeeRecord:
        """Remove an employee and everyone under them.

        Only subordinates are matched, so the root is never removed here;
        replace the company with :meth:`create` instead.
        """
        root = self._require_root()
        for parent, index, _, node in self._walk():
            if parent is not None and node.id == employee_id:
                del parent.children[index]
                self._version += 1
                logger.info("Deleted %d and its subordinates", employee_id)
                return node.to_record()

        if root.id == employee_id:
            raise NotFoundError(
                employee_id,
                f"Employee {employee_id} is the root and cannot be deleted; "
                "create a new company instead.",
            )
        raise NotFoundError(employee_id)

    # ──────────────────────────────────────────────
    # Traversal
    # ──────────────────────────────────────────────

    def iter_hierarchy(self) -> Iterator[HierarchyLine]:
        """Lazy pre-order ``(depth, id, name, role)`` lines, root at depth 0.

        The iterator is only valid until the next structural change
        (create, build, add_child, delete_subtree); resuming it afterwards
        raises :class:`StaleIteratorError`. Name and role edits are allowed.
        """
        self._require_root()
        return self._iter_lines(self._version)

    def _iter_lines(self, version: int) -> Iterator[HierarchyLine]:
        for _, _, depth, node in self._walk():
            if self._version != version:
                raise StaleIteratorError()
            yield HierarchyLine(depth, node.id, node.name, node.role)
        if self._version != version:
            raise StaleIteratorError()
