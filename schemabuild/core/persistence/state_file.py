"""
State file persistence — atomic read/write for BuildState.

State is stored as JSON in .state/current.json. Writes are atomic
(write to temp file, then rename) to prevent corruption if the
process crashes mid-write.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from schemabuild.core.models.state import BuildState

logger = logging.getLogger(__name__)

# Default state file path (relative to project root)
DEFAULT_STATE_DIR = ".state"
DEFAULT_STATE_FILE = "current.json"


def default_state_path(project_root: Path) -> Path:
    """Get the default state file path for a project."""
    return project_root / DEFAULT_STATE_DIR / DEFAULT_STATE_FILE


def load_state(path: Path) -> BuildState:
    """Load build state from a JSON file.

    Returns:
        BuildState model. If the file is missing or unreadable, a fresh state.
    """
    if not path.is_file():
        logger.info("No state file at %s — starting fresh", path)
        return BuildState()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        state = BuildState.model_validate(data)
        logger.debug("Loaded state from %s (updated_at=%s)", path, state.updated_at)
        return state
    except json.JSONDecodeError as e:
        logger.warning("Corrupt state file %s: %s — starting fresh", path, e)
        return BuildState()
    except (OSError, ValidationError) as e:
        logger.warning("Cannot load state from %s: %s — starting fresh", path, e)
        return BuildState()


def save_state(state: BuildState, path: Path) -> None:
    """Save build state to a JSON file (atomic write).

    Args:
        state: The state to save.
        path: Target path for the state file.
    """
    state.touch()

    path.parent.mkdir(parents=True, exist_ok=True)

    data = state.model_dump(mode="json")
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    # Atomic write: temp file in same directory, then rename
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".state_", suffix=".tmp")
    os.close(fd)
    tmp = Path(tmp_path)
    try:
        tmp.write_text(content, encoding="utf-8")
        tmp.replace(path)
        logger.debug("State saved to %s", path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        logger.error("Failed to save state to %s: %s", path, e)
        raise
