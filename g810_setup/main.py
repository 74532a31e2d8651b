from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import Callable, List, Optional, Sequence

from . import __version__
from .errors import ConfigError, ProvisioningError, UsageError
from .lib.command import CommandExecutor
from .lib.env import PATHS, REPO_URL
from .logging_utils import LOG_RULE, configure_logging
from .pipeline import PipelineResult, RunContext, Step, run_pipeline
from .run_config import RunConfig, build_run_config, load_settings
from .steps import (
    CheckDependenciesStep,
    DetectPlatformStep,
    DisableServiceStep,
    EnableServiceStep,
    InstallSoftwareStep,
    KeyboardCheckStep,
    ListKeyboardsStep,
    LoadProfileStep,
    RemoveProfileStep,
    RemoveSoftwareStep,
    SummaryStep,
    ValidatePlatformStep,
    VerifyAccessStep,
    WriteProfileStep,
)

logger = logging.getLogger(__name__)

PROG = "g810-setup"

EXIT_FLAGS = ("-h", "--help", "--version")
SWITCH_FLAGS = ("--dry-run", "--uninstall")
VALUE_FLAGS = ("--log-file", "--repo-dir", "--config")

EPILOG = f"""\
supported systems:
  CachyOS / Arch Linux (uses pacman, builds from source)
  Debian / Ubuntu (uses apt)

examples:
  {PROG}
  {PROG} --dry-run
  {PROG} --log-file /tmp/g810-setup.log
  {PROG} --uninstall

For more information, visit: {REPO_URL}
"""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _usage_error(message)


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog=PROG,
        description="Automated g810-led installation and keyboard profile setup",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s version {__version__}")
    p.add_argument("--dry-run", action="store_true", help="Show what would be done without making changes")
    p.add_argument("--uninstall", action="store_true", help="Remove g810-led and clean up configuration")
    p.add_argument("--log-file", metavar="PATH", default=None, help=f"Log file path (default: {PATHS.log_default})")
    p.add_argument("--repo-dir", metavar="PATH", default=None, help=f"Source checkout (default: {PATHS.repo_default})")
    p.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help=f"YAML settings file (default: {PATHS.settings_default}, if present)",
    )
    return p


def _usage_error(message: str) -> UsageError:
    return UsageError(f"{message}. Use --help for usage information.")


def _scan_flags(argv: Sequence[str]) -> None:
    """Walk flags left to right, as a shell case loop would.

    The first unknown flag is fatal even if --help or --version follows it;
    argparse would otherwise act on those first.
    """

    i = 0
    while i < len(argv):
        arg = argv[i]
        flag = arg.split("=", 1)[0]
        if flag in EXIT_FLAGS:
            return
        if flag not in SWITCH_FLAGS and flag not in VALUE_FLAGS:
            raise _usage_error(f"Unknown option: {arg}")
        if flag in VALUE_FLAGS and "=" not in arg:
            if i + 1 >= len(argv):
                raise _usage_error(f"Missing value for option: {flag}")
            i += 1
        i += 1


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    _scan_flags(sys.argv[1:] if argv is None else argv)
    args, unknown = build_parser().parse_known_args(argv)
    if unknown:
        raise _usage_error(f"Unknown option: {unknown[0]}")
    return args


def confirm_prompt(prompt: str) -> bool:
    """Ask a y/N question; anything but an explicit yes (or no terminal) is no."""

    if not sys.stdin or not sys.stdin.isatty():
        logger.info("%s (y/N) -> N (no terminal)", prompt)
        return False
    try:
        answer = input(f"{prompt} (y/N) ")
    except EOFError:
        return False
    return answer.strip().lower() == "y"


def build_steps(uninstall: bool = False) -> List[Step]:
    if uninstall:
        return [
            DetectPlatformStep(),
            ValidatePlatformStep(),
            CheckDependenciesStep(),
            VerifyAccessStep(),
            DisableServiceStep(),
            RemoveSoftwareStep(),
            RemoveProfileStep(),
            SummaryStep(),
        ]
    return [
        DetectPlatformStep(),
        ValidatePlatformStep(),
        CheckDependenciesStep(),
        VerifyAccessStep(),
        InstallSoftwareStep(),
        ListKeyboardsStep(),
        KeyboardCheckStep(),
        WriteProfileStep(),
        LoadProfileStep(),
        EnableServiceStep(),
        SummaryStep(),
    ]


def run(
    config: RunConfig,
    *,
    confirm: Callable[[str], bool] = confirm_prompt,
    executor: Optional[CommandExecutor] = None,
) -> PipelineResult:
    """Run the install (or uninstall) workflow for one fixed configuration."""

    actual_log_path = configure_logging(log_path=config.log_path)

    logger.info(LOG_RULE)
    logger.info("g810-led Configuration Setup v%s", __version__)
    logger.info(LOG_RULE)
    if config.dry_run:
        logger.info("Dry-run mode enabled")

    ctx = RunContext(
        config=config,
        executor=executor or CommandExecutor(dry_run=config.dry_run),
        confirm=confirm,
    )
    state = {"log_path": actual_log_path}
    return run_pipeline(ctx, build_steps(config.uninstall), state=state)


def _raise_interrupt(signum, frame) -> None:
    raise KeyboardInterrupt()


def main(argv: Optional[List[str]] = None) -> int:
    signal.signal(signal.SIGTERM, _raise_interrupt)

    try:
        args = parse_args(argv)
    except UsageError as e:
        configure_logging()
        logger.error("%s", e)
        return 1

    log_path = args.log_file or PATHS.log_default
    try:
        settings_path = args.config or PATHS.settings_default
        config = build_run_config(
            dry_run=bool(args.dry_run),
            uninstall=bool(args.uninstall),
            log_path=args.log_file,
            repo_dir=args.repo_dir,
            settings=load_settings(settings_path, required=args.config is not None),
        )
        run(config)
    except KeyboardInterrupt:
        configure_logging(log_path=log_path)
        logger.error("Script interrupted")
        return 1
    except ConfigError as e:
        configure_logging(log_path=log_path)
        logger.error("%s", e)
        return 1
    except ProvisioningError as e:
        logger.error("%s", e)
        logger.error("Script failed with exit code 1")
        return 1

    logger.debug("Script completed successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
