from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib import profile
from ..lib.env import KEYBOARD_TOOL
from ..logging_utils import LOG_RULE
from ..pipeline import RunContext
from ..result import StepResult

logger = logging.getLogger(__name__)


class SummaryStep:
    step_id = "90_summary"
    reaches = None
    best_effort = True

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        cfg = ctx.config
        kb = cfg.keyboard
        warnings = list(state.get("warnings") or [])

        logger.info(LOG_RULE)
        if cfg.uninstall:
            logger.info("Removal completed%s", " (dry-run)" if cfg.dry_run else "")
            logger.info("  • Backup (if any) kept at %s.bak", kb.profile_path)
            logger.info("  • Source checkout kept at %s", cfg.repo_dir)
        else:
            logger.info("Setup completed successfully!%s", " (dry-run)" if cfg.dry_run else "")
            logger.info(LOG_RULE)
            rendered = state.get("profile") or profile.generate(kb)
            logger.info("Keyboard configuration:")
            logger.info("  • Profile file: %s", rendered.target_path)
            logger.info("  • All keys: %s", rendered.all_keys_color)
            logger.info("  • F-keys: %s", rendered.fkeys_color)
            for name, color in rendered.groups:
                logger.info("  • %s: %s", name, color)
            logger.info("")
            logger.info("Next steps:")
            logger.info("  • To modify profile: sudo nano %s", kb.profile_path)
            logger.info("  • To reload profile: sudo %s -p %s", KEYBOARD_TOOL, kb.profile_path)
            logger.info("  • For help: %s --help", KEYBOARD_TOOL)
        logger.info("  • View logs: tail -f %s", state.get("log_path") or cfg.log_path)

        if warnings:
            logger.info(LOG_RULE)
            logger.warning("Completed with %d warning(s); check manually:", len(warnings))
            for w in warnings:
                logger.warning("  • %s", w)
        logger.info(LOG_RULE)
        return StepResult.success()
