import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parents[2]


def _run_ring(args: list[str], stdin: bytes = b"", env: dict | None = None) -> subprocess.CompletedProcess:
    """Run the CLI module with args, feeding stdin as raw bytes."""
    run_env = os.environ.copy()
    run_env.pop("DECODER_RING_LOG_LEVEL", None)
    run_env.pop("DECODER_RING_LOG_FILE", None)
    if env:
        run_env.update(env)
    return subprocess.run(
        [sys.executable, "-m", "decoder_ring", *args],
        input=stdin,
        capture_output=True,
        cwd=PROJECT_ROOT,
        env=run_env,
        timeout=30,
    )


@pytest.fixture
def ring():
    """Callable running the CLI; see _run_ring."""
    return _run_ring
