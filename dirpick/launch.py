"""Turning the final selection into an opened location."""
from typing import List, Optional, Sequence
import logging
import os
import shlex
import subprocess

from dirpick.selector import Candidate

logger = logging.getLogger(__name__)

FALLBACK_EDITOR = "vi"


class LaunchError(RuntimeError):
    pass


def resolve(candidates: Sequence[Candidate], selection: str) -> Optional[Candidate]:
    """Candidate whose name is exactly `selection`; None for empty or unknown names."""
    if not selection:
        return None
    return next((c for c in candidates if c.name == selection), None)


def editor_command(editor: Optional[str] = None) -> List[str]:
    cmd = editor or os.environ.get("VISUAL") or os.environ.get("EDITOR") or FALLBACK_EDITOR
    return shlex.split(cmd)


def open_location(location: str, editor: Optional[str] = None, run=subprocess.run) -> int:
    cmd = editor_command(editor)
    if not cmd:
        raise LaunchError("empty editor command")
    cmd.append(location)
    logger.info("Opening %s with %s", location, cmd[0])
    try:
        proc = run(cmd, check=False)
    except FileNotFoundError as e:
        raise LaunchError(f"editor not found: {cmd[0]}") from e
    if proc.returncode:
        logger.warning("%s exited with status %d", cmd[0], proc.returncode)
    return proc.returncode
