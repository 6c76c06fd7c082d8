"""
Functional tests driven by JSON test cases.

Each case gives an inline syntax schema and text fragments that must
(or must not) appear in the generated file.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from syntax_factory import GeneratorConfig, SyntaxFactoryGenerator


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate_code(schema, config_dict):
    """Helper to generate code with given schema and config."""
    config = GeneratorConfig.from_dict(config_dict or {})
    return SyntaxFactoryGenerator(schema, config).generate()


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    generated_code = _generate_code(test_case["schema"], test_case.get("config"))

    for pattern in test_case.get("expected_contains", []):
        assert pattern in generated_code, f"Expected pattern '{pattern}' not found in output ({test_case['description']})"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in generated_code, f"Unexpected pattern '{pattern}' found in output ({test_case['description']})"


if __name__ == "__main__":
    pytest.main([__file__])
