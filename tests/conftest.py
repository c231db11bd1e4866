"""
Pytest configuration for church-core tests.

Provides:
- Hypothesis profiles (HYPOTHESIS_PROFILE=default|ci)
- A fixture that restores the registry after tests that mutate it
"""

import os

import pytest

try:
    from hypothesis import settings

    # Default profile: database caching on, reproduction blob on failure.
    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
        deadline=None,
    )

    # CI profile: deterministic and a bit cheaper.
    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
        deadline=None,
        max_examples=50,
    )

    settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))

except ImportError:
    pass  # hypothesis not installed, skip configuration


@pytest.fixture
def clean_registry():
    from church_core.program_registry import clear_registry

    clear_registry()
    yield
    clear_registry()
