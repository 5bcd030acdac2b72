import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.mark.parametrize(
    "module",
    [
        "portfolio_advisor.main",
        "portfolio_advisor.services.base",
        "portfolio_advisor.tools.registry",
        "portfolio_advisor.storage.portfolio_store",
        "portfolio_advisor.market.insight_service",
    ],
)
def test_module_imports_in_fresh_interpreter(module: str) -> None:
    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr
