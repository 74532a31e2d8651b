"""g810-led setup (Python-first, step-driven).

Core design goals:
- Idempotent steps that can simply be re-run
- Dry-run mode that never mutates the host
- Per-distribution package backends (pacman, apt)
- Centralized logging
"""

__version__ = "0.3.0"

__all__ = ["__version__"]
