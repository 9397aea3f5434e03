"""Alias file loader.

The alias file is plain text, one `name = path` pair per line:

    # projects
    web  = ~/code/web
    api  = $HOME/code/api

Order is kept; it is the order shown in the selector.
"""
from pathlib import Path
from typing import List, Optional
import logging
import os

from dirpick.selector import Candidate

logger = logging.getLogger(__name__)

ENV_CONFIG = "DIRPICK_CONFIG"
DEFAULT_CONFIG = Path("~/.config/dirpick/aliases")


class ConfigError(ValueError):
    def __init__(self, msg: str, source: str = "<string>", lineno: int = 0):
        self.source = source
        self.lineno = lineno
        where = f"{source}:{lineno}" if lineno else source
        super().__init__(f"{where}: {msg}")


def default_config_path() -> Path:
    env = os.environ.get(ENV_CONFIG)
    return Path(env).expanduser() if env else DEFAULT_CONFIG.expanduser()


def parse_candidates(text: str, source: str = "<string>") -> List[Candidate]:
    cands = []
    seen = set()
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        name, sep, location = line.partition("=")
        if not sep:
            raise ConfigError(f"expected 'name = path', got {raw!r}", source, lineno)
        name, location = name.strip(), location.strip()
        if not name:
            raise ConfigError("empty alias name", source, lineno)
        if not location:
            raise ConfigError(f"empty path for alias {name!r}", source, lineno)
        if name in seen:
            raise ConfigError(f"duplicate alias {name!r}", source, lineno)
        seen.add(name)
        cands.append(Candidate(name, os.path.expanduser(os.path.expandvars(location))))
    return cands


def load_candidates(path: Optional[str] = None) -> List[Candidate]:
    """Read the alias file at `path` (or the default location)."""
    p = Path(path).expanduser() if path else default_config_path()
    if not p.exists():
        raise FileNotFoundError(f"Alias file not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        cands = parse_candidates(f.read(), source=str(p))

    if not cands:
        logger.warning("No aliases defined in %s", p)
    else:
        logger.info("Loaded %d aliases from %s", len(cands), p)
    return cands
