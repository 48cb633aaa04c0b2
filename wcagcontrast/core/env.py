"""Environment configuration for wcagcontrast.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Variables:
  WCAGCONTRAST_PRECISION  decimal places in text output (default 2, 0..10)
"""

import os
from pathlib import Path

PRECISION_VAR = 'WCAGCONTRAST_PRECISION'
DEFAULT_PRECISION = 2
MAX_PRECISION = 10


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start to the first .env, giving up at a .git boundary or the filesystem root."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone and a file in a worktree
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines. Quotes around values are stripped; comments and junk lines skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def get_precision() -> int:
    """Decimal places for text output, from WCAGCONTRAST_PRECISION."""
    raw = os.environ.get(PRECISION_VAR, '').strip()
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_PRECISION
    return max(0, min(MAX_PRECISION, value))
