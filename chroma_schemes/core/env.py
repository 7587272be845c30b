"""Settings for chroma-tool, read from the environment and .env files.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings:
  CHROMA_OUTPUT_STYLE   expanded (default) or compressed
  CHROMA_LOG_LEVEL      logging level name for the CLI (default WARNING)
"""

import os
from pathlib import Path

OUTPUT_STYLES = ('expanded', 'compressed')


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines, dropping comments and surrounding quotes."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def output_style() -> str:
    """The configured output style; unknown values raise ValueError."""
    style = os.environ.get('CHROMA_OUTPUT_STYLE', 'expanded').strip().lower() or 'expanded'
    if style not in OUTPUT_STYLES:
        raise ValueError(f'CHROMA_OUTPUT_STYLE must be one of {", ".join(OUTPUT_STYLES)}, got {style!r}')
    return style


def log_level() -> str:
    return os.environ.get('CHROMA_LOG_LEVEL', 'WARNING').strip().upper() or 'WARNING'
