from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import ProvisioningError
from .command import CommandExecutor
from .env import REPO_BRANCH

logger = logging.getLogger(__name__)


def ensure_checkout(
    executor: CommandExecutor,
    *,
    repo_url: str,
    repo_dir: str,
    branch: str = REPO_BRANCH,
) -> str:
    """Clone the source repository, or bring an existing checkout up to date.

    An existing checkout is hard-reset to ``origin/<branch>``: local edits in
    ``repo_dir`` are discarded so the build always matches upstream. A
    half-finished clone from an interrupted run is repaired the same way.

    Returns "cloned" or "updated".
    """

    logger.info("Managing g810-led repository at %s", repo_dir)

    parent = os.path.dirname(os.path.abspath(repo_dir))
    if executor.dry_run:
        executor.trace(f"mkdir -p {parent}")
    else:
        Path(parent).mkdir(parents=True, exist_ok=True)

    if Path(repo_dir).is_dir():
        logger.info("Repository exists, updating...")
        executor.execute(["git", "-C", repo_dir, "fetch", "origin"])
        executor.execute(["git", "-C", repo_dir, "reset", "--hard", f"origin/{branch}"])
        return "updated"

    logger.info("Cloning repository from %s", repo_url)
    executor.execute(["git", "clone", repo_url, repo_dir])
    return "cloned"


def build(executor: CommandExecutor, repo_dir: str) -> None:
    logger.info("Building g810-led from source")
    if not executor.dry_run and not Path(repo_dir).is_dir():
        raise ProvisioningError(f"Repository directory not found: {repo_dir}")

    executor.execute(["make", "clean"], cwd=repo_dir)
    executor.execute(["make", "bin"], cwd=repo_dir)


def make_install(executor: CommandExecutor, repo_dir: str) -> None:
    executor.execute(["make", "-C", repo_dir, "install"], elevate=True)


def make_uninstall(executor: CommandExecutor, repo_dir: str) -> None:
    executor.execute(["make", "-C", repo_dir, "uninstall"], elevate=True)
