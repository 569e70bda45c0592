"""Interactive console menu for the org hierarchy.

Usage:
    python -m org_hierarchy
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, TextIO

from .config import HierarchyConfig, load_config
from .errors import EmptyTreeError, HierarchyError
from .export import read_hierarchy, render_lines, write_hierarchy
from .models import EmployeeRecord, EmployeeSpec
from .org_tree import OrgTree

logger = logging.getLogger(__name__)

MAIN_MENU = """\
+======================================+
|           H I E R A R C H Y          |
|             S Y S T E M              |
+======================================+
Choose an operation
1. Create Company
2. Search Employee
3. Display Hierarchy
4. Write Employee Information to File
5. Manage Employee
6. Load Hierarchy from File
0. Exit
"""

MANAGE_MENU = """\
Choose an action
1. Add Subordinate
2. Promote Employee
3. Demote Employee
4. Delete Employee
5. Update Employee
"""


def _banner(title: str) -> str:
    return f"+{'=' * 38}+\n|{title:^38}|\n+{'=' * 38}+\n"


def _describe(emp: EmployeeRecord) -> str:
    return f"ID: {emp.id}, Name: {emp.name}, Position: {emp.role}"


class HierarchyConsole:
    """Menu loop driving a single :class:`OrgTree`."""

    def __init__(
        self,
        tree: OrgTree | None = None,
        config: HierarchyConfig | None = None,
        input_func: Callable[[str], str] = input,
        out: TextIO | None = None,
    ):
        self.config = config or HierarchyConfig()
        self.tree = tree if tree is not None else OrgTree(self.config)
        self._input = input_func
        self._out = out or sys.stdout

    # ── I/O helpers ──────────────────────────────

    def _print(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _screen(self, title: str) -> None:
        if self.config.clear_screen:
            os.system("cls" if os.name == "nt" else "clear")
        self._out.write(_banner(title))

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _ask_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._print(f"Please enter a whole number (got {raw!r}).")

    def _ask_employee(self, label: str) -> EmployeeSpec:
        self._print(f"\nEnter details for {label}:")
        employee_id = self._ask_int("ID: ")
        name = self._ask("Name: ")
        role = self._ask("Position: ")
        return EmployeeSpec(id=employee_id, name=name, role=role)

    # ── Main loop ────────────────────────────────

    def run(self) -> None:
        while True:
            self._out.write(MAIN_MENU)
            try:
                choice = self._ask("Enter your choice: ").strip()
            except EOFError:
                choice = "0"
            if choice == "0":
                self._print("Exiting...")
                return
            try:
                self.dispatch(choice)
            except EOFError:
                self._print("\nExiting...")
                return

    def dispatch(self, choice: str) -> None:
        actions = {
            "1": self.create_company,
            "2": self.search_employee,
            "3": self.display_hierarchy,
            "4": self.write_to_file,
            "5": self.manage_employee,
            "6": self.load_from_file,
        }
        action = actions.get(choice)
        if action is None:
            self._print("Invalid choice. Try again.")
            return
        try:
            action()
        except HierarchyError as exc:
            logger.debug("Menu action %s failed: %s", choice, exc)
            self._print(str(exc))

    # ── Menu actions ─────────────────────────────

    def create_company(self) -> None:
        self._screen("Enter Company details")
        root = self._ask_employee("the company head")

        count = self._ask_int("\nEnter the number of employees under the CEO: ")
        for i in range(count):
            employee = self._ask_employee(f"employee {i + 1}")
            subs = self._ask_int(f"Enter the number of subordinates for {employee.name}: ")
            for j in range(subs):
                employee.subordinates.append(
                    self._ask_employee(f"subordinate {j + 1} of {employee.name}")
                )
            root.subordinates.append(employee)

        self.tree.build(root)
        self._print("Company created successfully!")

    def search_employee(self) -> None:
        self._screen("Employee")
        self._print("Choose a search option:")
        self._print("1. Search by ID")
        self._print("2. Search by Position")
        choice = self._ask("Enter your choice: ").strip()

        if choice == "1":
            employee_id = self._ask_int("Enter ID to search: ")
            self._print(f"Employee found: {_describe(self.tree.find_by_id(employee_id))}")
        elif choice == "2":
            role = self._ask("Enter position to search: ")
            found = self.tree.find_all_by_role(role)
            self._print(f"\nEmployees with position '{role}':")
            if not found:
                self._print("No employees found.")
            for emp in found:
                self._print(_describe(emp))
        else:
            self._print("Invalid choice. Please try again.")

    def display_hierarchy(self) -> None:
        self._screen("Company Hierarchy")
        for line in render_lines(self.tree):
            self._out.write(line)

    def write_to_file(self) -> None:
        if self.tree.is_empty:
            raise EmptyTreeError()
        self._screen("Export Employees")
        default = self.config.export_path
        filename = self._ask(f"Enter filename to save employee information [{default}]: ").strip()
        path = write_hierarchy(self.tree, filename or default)
        self._print(f"Employee information written to {path} successfully.")

    def load_from_file(self) -> None:
        self._screen("Load Hierarchy")
        default = self.config.export_path
        filename = self._ask(f"Enter filename to load [{default}]: ").strip()
        self.tree = read_hierarchy(filename or default, self.config)
        self._print(f"Loaded {len(self.tree)} employees.")

    def manage_employee(self) -> None:
        self._screen("management information system")
        self._out.write(MANAGE_MENU)
        choice = self._ask("Enter your choice: ").strip()

        if choice == "1":
            employee_id = self._ask_int("Enter ID of the subordinate: ")
            name = self._ask("Enter name of the subordinate: ")
            role = self._ask("Enter position of the subordinate: ")
            supervisor_id = self._ask_int("Enter ID of the supervisor: ")
            self.tree.add_child(supervisor_id, employee_id, name, role)
            self._print("Subordinate added successfully.")
        elif choice in ("2", "3"):
            verb = "promote" if choice == "2" else "demote"
            employee_id = self._ask_int(f"Enter ID of the employee to {verb}: ")
            role = self._ask("Enter new position: ")
            if choice == "2":
                self.tree.promote(employee_id, role)
            else:
                self.tree.demote(employee_id, role)
            self._print(f"Employee {verb}d successfully.")
        elif choice == "4":
            employee_id = self._ask_int("Enter ID of the employee to delete: ")
            self.tree.delete_subtree(employee_id)
            self._print("Employee deleted successfully.")
        elif choice == "5":
            employee_id = self._ask_int("Enter ID of the employee to update: ")
            name = self._ask("Enter new name (or leave empty): ")
            role = self._ask("Enter new position (or leave empty): ")
            self.tree.update(employee_id, name, role)
            self._print("Employee updated successfully.")
        else:
            self._print("Invalid action choice.")


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    logger.info("Starting hierarchy console")
    HierarchyConsole(config=config).run()


if __name__ == "__main__":
    main()
