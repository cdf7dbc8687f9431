"""Pytest configuration for the appshell test suite.

Hypothesis profiles (max_examples is set here and nowhere else):
- dev: local runs, 500 examples
- ci: CI runs, 50 derandomized examples
- verbose: 100 examples with progress output

The profile comes from HYPOTHESIS_PROFILE when set, else "ci" when CI=true,
else "dev":

    HYPOTHESIS_PROFILE=verbose pytest tests/

Every test starts with DEBUG build mode and default debug overrides.
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from appshell.enums import BuildMode
from appshell.locale_utils import clear_locale_cache
from appshell.runtime.config import debug_overrides

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

# The autouse reset fixture below is per test, not per example.
_SUPPRESSED = [HealthCheck.function_scoped_fixture]

settings.register_profile(
    "dev", max_examples=500, phases=_PHASES, suppress_health_check=_SUPPRESSED
)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
    suppress_health_check=_SUPPRESSED,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SUPPRESSED,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


@pytest.fixture(autouse=True)
def _reset_process_state(monkeypatch: pytest.MonkeyPatch):
    """Pin the build mode and restore process-wide overrides around each test."""
    monkeypatch.setenv("APPSHELL_BUILD_MODE", BuildMode.DEBUG.value)
    debug_overrides.reset()
    yield
    debug_overrides.reset()
    clear_locale_cache()
