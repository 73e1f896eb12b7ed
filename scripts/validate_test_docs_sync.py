#!/usr/bin/env python3
"""
Validate that docs/test_scenarios_business_summary.md stays in sync with
tests/test_integration_scenarios.py.

This script checks:
1. All scenario classes in the test file are documented
2. All scenario methods are referenced in the doc
3. Documented scenarios still exist in the test file

Run: python scripts/validate_test_docs_sync.py
"""

import ast
import re
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
TEST_FILE = PROJECT_ROOT / 'tests' / 'test_integration_scenarios.py'
DOC_FILE = PROJECT_ROOT / 'docs' / 'test_scenarios_business_summary.md'


def collect_scenarios(test_file: Path) -> dict[str, list[str]]:
    """Map each Test* class in the file to its test_* methods, in source order."""
    tree = ast.parse(test_file.read_text(encoding='utf-8'))
    scenarios = {}
    for node in tree.body:
        if isinstance(node, ast.ClassDef) and node.name.startswith('Test'):
            scenarios[node.name] = [
                item.name for item in node.body
                if isinstance(item, ast.FunctionDef) and item.name.startswith('test_')
            ]
    return scenarios


def collect_documented(doc_file: Path) -> tuple[set[str], set[str]]:
    """Class and method names referenced by the business summary."""
    content = doc_file.read_text(encoding='utf-8')
    classes = set(re.findall(r'\*\*Test Class\*\*:\s*`(Test\w+)`', content))
    methods = set(re.findall(r'\*\*Test Method\*\*:\s*`(test_\w+)`', content))
    return classes, methods


def find_drift(test_file: Path, doc_file: Path) -> tuple[list[str], list[str]]:
    """Return (errors, warnings) describing where the doc and tests disagree."""
    scenarios = collect_scenarios(test_file)
    doc_classes, doc_methods = collect_documented(doc_file)
    methods = {m for names in scenarios.values() for m in names}

    errors = [f"Missing class documentation: {c}" for c in sorted(set(scenarios) - doc_classes)]
    errors += [f"Missing method documentation: {m}" for m in sorted(methods - doc_methods)]
    warnings = [f"Documented class no longer exists: {c}" for c in sorted(doc_classes - set(scenarios))]
    warnings += [f"Documented method no longer exists: {m}" for m in sorted(doc_methods - methods)]
    return errors, warnings


def main() -> int:
    for path in (TEST_FILE, DOC_FILE):
        if not path.exists():
            print(f"File not found: {path}")
            return 1

    errors, warnings = find_drift(TEST_FILE, DOC_FILE)

    print("=" * 60)
    print("Test Documentation Sync Validation")
    print("=" * 60)
    for error in errors:
        print(f"ERROR   {error}")
    for warning in warnings:
        print(f"WARNING {warning}")
    if not errors and not warnings:
        print("All integration scenarios are documented and in sync.")

    return 1 if errors else 0


if __name__ == '__main__':
    sys.exit(main())
