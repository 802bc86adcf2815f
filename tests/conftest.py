"""Pytest configuration for the diagnostix test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Every test runs with colour disabled and a freshly reset default registry,
so global fragment overrides never leak between tests.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from diagnostix import decoration
from diagnostix.runtime import registry

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev"
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# ISOLATION
# =============================================================================


@pytest.fixture(autouse=True)
def _plain_output() -> Iterator[None]:
    """Disable colour and reset the default registry around every test."""
    decoration.set_color_enabled(False)
    registry.reset()
    yield
    registry.reset()
    decoration.set_color_enabled(None)
