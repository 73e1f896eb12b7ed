"""
Test to ensure the business summary stays in sync with the integration scenarios.

This test will fail if:
- A scenario class/method is added without updating the business summary
- A documented scenario no longer exists
"""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / 'scripts' / 'validate_test_docs_sync.py'


@pytest.fixture(scope="module")
def sync():
    spec = importlib.util.spec_from_file_location("validate_test_docs_sync", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestDocumentationSync:
    """Ensure scenario documentation stays in sync with actual tests."""

    def test_doc_files_exist(self, sync):
        assert sync.TEST_FILE.exists(), f"Test file not found: {sync.TEST_FILE}"
        assert sync.DOC_FILE.exists(), f"Documentation file not found: {sync.DOC_FILE}"

    def test_scenarios_found(self, sync):
        scenarios = sync.collect_scenarios(sync.TEST_FILE)
        assert scenarios
        assert all(scenarios.values())

    def test_every_scenario_documented(self, sync):
        errors, _ = sync.find_drift(sync.TEST_FILE, sync.DOC_FILE)
        assert not errors, (
            "\n".join(errors) + "\nPlease update docs/test_scenarios_business_summary.md"
        )

    def test_no_stale_documentation(self, sync):
        _, warnings = sync.find_drift(sync.TEST_FILE, sync.DOC_FILE)
        assert not warnings, (
            "\n".join(warnings) + "\nPlease update docs/test_scenarios_business_summary.md"
        )
