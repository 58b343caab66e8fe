from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from zvdo.util.assertx import ValidationError


@dataclass(frozen=True)
class ProcessResult:
    command: list[str]
    stdout: str
    stderr: str
    exit_code: int


def _last_line(text: str) -> str:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    return lines[-1] if lines else ""


def run_process(
    command: Sequence[str],
    cwd: Path | None = None,
    timeout_sec: int | None = None,
) -> ProcessResult:
    """Run an external tool to completion and fail on a non-zero exit.

    No timeout is applied unless one is passed; media conversions of long
    sources routinely run for many minutes.
    """
    try:
        completed = subprocess.run(
            list(command),
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout_sec,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ValidationError(f"Tool not found: {command[0]}") from exc
    except subprocess.TimeoutExpired as exc:
        raise ValidationError(f"Command timed out: {' '.join(command)}") from exc

    result = ProcessResult(
        command=list(command),
        stdout=completed.stdout,
        stderr=completed.stderr,
        exit_code=completed.returncode,
    )
    if result.exit_code != 0:
        message = f"Command failed ({result.exit_code}): {' '.join(result.command)}"
        detail = _last_line(result.stderr)
        if detail:
            message = f"{message}: {detail}"
        raise ValidationError(message)
    return result
