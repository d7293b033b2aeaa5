from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

try:
    from hypothesis import HealthCheck, settings
except ImportError:  # pragma: no cover - hypothesis is optional in some environments
    HealthCheck = None  # type: ignore[assignment]
    settings = None  # type: ignore[assignment]

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from htmx_fragments import injection  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_error_script_flag(monkeypatch: pytest.MonkeyPatch) -> injection.EmissionFlag:
    # Every test starts as if the process had just launched.
    flag = injection.EmissionFlag()
    monkeypatch.setattr(injection, "ERROR_SCRIPT_FLAG", flag)
    return flag


def _register_hypothesis_profiles() -> None:
    if settings is None:
        return
    # The autouse flag fixture is function scoped; property tests never read it.
    suppressed = (HealthCheck.function_scoped_fixture, HealthCheck.too_slow)
    settings.register_profile(
        "dev",
        settings(max_examples=25, deadline=500, suppress_health_check=suppressed),
    )
    settings.register_profile(
        "ci",
        settings(max_examples=100, deadline=None, print_blob=True, suppress_health_check=suppressed),
    )
    settings.load_profile("ci" if os.getenv("CI") else "dev")


_register_hypothesis_profiles()
