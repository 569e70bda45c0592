from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make package importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from org_hierarchy import EmployeeSpec, HierarchyConfig, OrgTree  # noqa: E402

from sample_data import COMPANY  # noqa: E402


@pytest.fixture
def config() -> HierarchyConfig:
    return HierarchyConfig(clear_screen=False)


@pytest.fixture
def tree(config: HierarchyConfig) -> OrgTree:
    org = OrgTree(config)
    org.build(EmployeeSpec(**COMPANY))
    return org


@pytest.fixture
def empty_tree(config: HierarchyConfig) -> OrgTree:
    return OrgTree(config)
