"""In-memory organization hierarchy with text export."""

from .config import HierarchyConfig, load_config
from .errors import (
    DuplicateIdError,
    EmptyTreeError,
    ExportFormatError,
    HierarchyError,
    InvalidArgumentError,
    IOFailureError,
    NotFoundError,
    ParentNotFoundError,
    StaleIteratorError,
)
from .export import (
    format_line,
    parse_hierarchy,
    read_hierarchy,
    render,
    render_lines,
    write_hierarchy,
)
from .models import Employee, EmployeeRecord, EmployeeSpec, HierarchyLine
from .org_tree import OrgTree

__all__ = [
    # tree
    "OrgTree",
    # models
    "Employee",
    "EmployeeRecord",
    "EmployeeSpec",
    "HierarchyLine",
    # config
    "HierarchyConfig",
    "load_config",
    # export
    "format_line",
    "render_lines",
    "render",
    "write_hierarchy",
    "parse_hierarchy",
    "read_hierarchy",
    # errors
    "HierarchyError",
    "EmptyTreeError",
    "NotFoundError",
    "ParentNotFoundError",
    "InvalidArgumentError",
    "DuplicateIdError",
    "ExportFormatError",
    "IOFailureError",
    "StaleIteratorError",
]
