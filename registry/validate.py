#!/usr/bin/env python3
"""
minicalc Diagnostic Snapshot Validator

Validates registry/diagnostics.yaml against registry/schema.json, then renders
every case through minicalc and compares the output with its snapshot.

Usage:
    python registry/validate.py
"""

import io
import json
import sys
from collections import defaultdict
from pathlib import Path

import jsonschema
import yaml

from minicalc import EvalError, Interpreter, SourceText, parse


def resolve_path(relative_path: str) -> Path:
    """Resolve path relative to script location."""
    script_dir = Path(__file__).parent
    return (script_dir / relative_path).resolve()


def load_yaml(path: Path) -> dict:
    """Load YAML file."""
    try:
        with open(path, 'r') as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        print(f"ERROR: File not found: {path}")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Invalid YAML in {path}: {e}")
        sys.exit(1)


def load_json(path: Path) -> dict:
    """Load JSON file."""
    try:
        with open(path, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        print(f"ERROR: File not found: {path}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"ERROR: Invalid JSON in {path}: {e}")
        sys.exit(1)


def validate_schema(data: dict, schema: dict) -> list:
    """Validate data against JSON schema. Returns list of errors."""
    errors = []
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {' -> '.join(str(p) for p in e.path)}")
    except jsonschema.SchemaError as e:
        errors.append(f"Invalid schema: {e.message}")

    return errors


def check_duplicate_names(cases: list) -> list:
    """Case names identify snapshots and must be unique."""
    seen = set()
    errors = []
    for case in cases:
        name = case.get('name')
        if name in seen:
            errors.append(f"Duplicate case name '{name}'")
        seen.add(name)
    return errors


def render_case(case: dict) -> tuple:
    """Render one case. Returns ``(kind, rendered)``; both empty when nothing failed."""
    filename = case.get('filename', '<test>')
    source = SourceText(case['source'], filename)

    program, diagnostic = parse(case['source'], filename)
    if diagnostic is None and case.get('stage', 'parse') == 'run':
        try:
            Interpreter(case['source'], filename, output=io.StringIO()).run()
        except EvalError as e:
            diagnostic = e.diagnostic
            if diagnostic is None:
                return ('', f"error: {e}")

    if diagnostic is None:
        return ('', '')
    return (str(diagnostic.kind), source.render(diagnostic))


def check_snapshots(cases: list) -> list:
    """Re-render every case and compare with its snapshot."""
    errors = []
    for case in cases:
        kind, rendered = render_case(case)
        if kind != case['kind']:
            errors.append(
                f"Case '{case['name']}': expected kind '{case['kind']}', got '{kind or 'none'}'"
            )
        if rendered != case['expected']:
            errors.append(
                f"Case '{case['name']}': rendered output differs from snapshot\n"
                f"--- expected\n{case['expected']}\n--- actual\n{rendered}"
            )
    return errors


def generate_summary(cases: list) -> dict:
    """Generate summary statistics."""
    summary = {
        'total': len(cases),
        'by_kind': defaultdict(int),
        'by_stage': defaultdict(int),
    }

    for case in cases:
        summary['by_kind'][case.get('kind', 'unknown')] += 1
        summary['by_stage'][case.get('stage', 'parse')] += 1

    return summary


def print_summary(summary: dict):
    """Print validation summary."""
    print("=" * 70)
    print("VALIDATION SUMMARY")
    print("=" * 70)
    print(f"\nTotal cases: {summary['total']}")

    print("\nBy kind:")
    for kind, count in sorted(summary['by_kind'].items()):
        print(f"  {kind:30s} {count:3d}")

    print("\nBy stage:")
    for stage, count in sorted(summary['by_stage'].items()):
        print(f"  {stage:30s} {count:3d}")

    print()


def main():
    """Main validation routine."""
    print("minicalc Diagnostic Snapshot Validator")
    print("-" * 70)
    print()

    registry_path = resolve_path("diagnostics.yaml")
    schema_path = resolve_path("schema.json")

    print(f"Loading cases from: {registry_path}")
    registry_data = load_yaml(registry_path)

    print(f"Loading schema from: {schema_path}")
    schema = load_json(schema_path)
    print()

    all_errors = []

    # 1. Schema validation
    print("Validating against JSON schema...")
    schema_errors = validate_schema(registry_data, schema)
    if schema_errors:
        all_errors.extend(schema_errors)
        # Later checks index fields the schema guarantees.
        for error in all_errors:
            print(f"  ✗ {error}")
        print("\nValidation FAILED with errors.")
        sys.exit(1)
    print("✓ Schema validation passed")

    cases = registry_data.get('cases', [])

    # 2. Duplicate names
    print("Checking for duplicate case names...")
    dup_errors = check_duplicate_names(cases)
    if dup_errors:
        all_errors.extend(dup_errors)
    else:
        print("✓ No duplicate case names")

    # 3. Snapshot comparison
    print("Rendering cases and comparing snapshots...")
    snapshot_errors = check_snapshots(cases)
    if snapshot_errors:
        all_errors.extend(snapshot_errors)
    else:
        print("✓ All snapshots match")

    print()

    if all_errors:
        print("ERRORS:")
        for error in all_errors:
            print(f"  ✗ {error}")
        print()

    summary = generate_summary(cases)
    print_summary(summary)

    if all_errors:
        print("Validation FAILED with errors.")
        sys.exit(1)
    else:
        print("Validation PASSED.")
        sys.exit(0)


if __name__ == '__main__':
    main()
