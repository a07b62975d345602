"""Pytest configuration for the monadparse test suite.

Hypothesis profiles:
- dev: default locally; 300 examples for tests without their own settings
- ci: derandomized, 50 examples, prints reproduction blobs
- verbose: 100 examples with Hypothesis progress output

The property tests in test_*_hypothesis.py pin their own max_examples, so
the profile mainly decides determinism, deadlines and verbosity for them.

Selection order: HYPOTHESIS_PROFILE, then CI=true -> "ci", else "dev".
Example: HYPOTHESIS_PROFILE=verbose pytest tests/test_parser_hypothesis.py

Tests marked @pytest.mark.fuzz (long law checks over thousands of generated
parsers) are skipped unless selected with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

PROFILES = ("dev", "ci", "verbose")

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

# Generated parsers are nested closures; building them is slow on cold caches.
_SLOW_GENERATION = [HealthCheck.too_slow]

settings.register_profile(
    "dev",
    max_examples=300,
    phases=_PHASES,
    suppress_health_check=_SLOW_GENERATION,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    deadline=None,
    print_blob=True,
    suppress_health_check=_SLOW_GENERATION,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SLOW_GENERATION,
)


def _select_profile() -> str:
    """Pick the Hypothesis profile for this run."""
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in PROFILES:
        return requested
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_select_profile())


def pytest_configure(config: pytest.Config) -> None:
    """Register the markers used by this suite."""
    config.addinivalue_line(
        "markers",
        "fuzz: long-running parser law checks, run only with -m fuzz",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the marker expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="long-running law check; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
