from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..errors import CommandError

logger = logging.getLogger(__name__)

DRY_RUN_PREFIX = "[DRY-RUN]"


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def cmd_exists(name: str) -> bool:
    return shutil.which(name) is not None


class CommandExecutor:
    """Run external commands with consistent logging and dry-run handling.

    - Always logs the command (``CMD ...`` or ``[DRY-RUN] ...``; read-only
      probes log ``PROBE ...``).
    - Commands are argument lists; nothing goes through a shell.
    - ``elevate`` prefixes the privilege wrapper (``sudo`` by default).
    - In dry-run mode nothing is executed and every call reports success.
    """

    def __init__(self, *, dry_run: bool = False, elevate_prefix: Sequence[str] = ("sudo",)) -> None:
        self.dry_run = dry_run
        self.elevate_prefix = tuple(elevate_prefix)

    def argv_for(self, argv: Sequence[str], *, elevate: bool = False) -> list[str]:
        argv_list = list(argv)
        if elevate:
            argv_list = [*self.elevate_prefix, *argv_list]
        return argv_list

    def trace(self, message: str) -> None:
        logger.info("%s %s", DRY_RUN_PREFIX, message)

    def execute(
        self,
        argv: Sequence[str],
        *,
        elevate: bool = False,
        check: bool = True,
        cwd: str | None = None,
        input_text: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CmdResult:
        argv_list = self.argv_for(argv, elevate=elevate)

        if self.dry_run:
            self.trace(fmt_argv(argv_list) + (f"  (cwd={cwd})" if cwd else ""))
            return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

        logger.info("CMD %s", fmt_argv(argv_list))
        try:
            p = subprocess.run(
                argv_list,
                input=input_text,
                text=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=cwd,
                env=dict(os.environ, **(env or {})),
            )
        except FileNotFoundError as e:
            if check:
                raise CommandError(argv_list, 127, str(e)) from e
            logger.warning("Command not found: %s", argv_list[0])
            return CmdResult(argv=argv_list, returncode=127, stdout="", stderr=str(e))

        if p.stdout:
            logger.debug("STDOUT %s", p.stdout.strip())
        if p.stderr:
            logger.debug("STDERR %s", p.stderr.strip())

        if p.returncode != 0:
            if check:
                logger.error("Command failed (exit code %s): %s", p.returncode, fmt_argv(argv_list))
                raise CommandError(argv_list, p.returncode, p.stderr or "")
            logger.warning("Command exited %s: %s", p.returncode, fmt_argv(argv_list))

        return CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout, stderr=p.stderr)


def probe_cmd(argv: Sequence[str], *, cwd: str | None = None) -> CmdResult:
    """Run a read-only, unprivileged query.

    Probes run in dry-run mode too since they never change the host
    (``systemctl is-enabled``, ``g810-led --list-keyboards``).
    """

    argv_list = list(argv)
    logger.info("PROBE %s", fmt_argv(argv_list))
    try:
        p = subprocess.run(
            argv_list,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=cwd,
        )
    except FileNotFoundError as e:
        return CmdResult(argv=argv_list, returncode=127, stdout="", stderr=str(e))
    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout, stderr=p.stderr)
