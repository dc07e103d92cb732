import os
import subprocess
import sys
import textwrap

from eitherkit.app.config import BEARTYPE_THIS_PACKAGE_ENV


def _run_checked(code: str) -> subprocess.CompletedProcess[str]:
    env = {**os.environ, BEARTYPE_THIS_PACKAGE_ENV: "1"}
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(code)],
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_demo_accepts_int_input_when_type_checked() -> None:
    proc = _run_checked(
        """
        from eitherkit.demo import invert, run_pipeline
        from eitherkit.either import Failure, Success

        assert invert(0) == Failure("divide by zero"), invert(0)
        assert invert(4) == Success(0.25), invert(4)
        assert run_pipeline(0) == "divide by zero"
        print("ok")
        """
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "ok"


def test_from_returns_raises_type_error_when_type_checked() -> None:
    proc = _run_checked(
        """
        from eitherkit.interop import from_returns

        for value in (None, 1, "text"):
            try:
                from_returns(value)
            except TypeError as exc:
                assert "Expected a returns Result" in str(exc), exc
            else:
                raise AssertionError(f"no error for {value!r}")
        print("ok")
        """
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "ok"
