"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR (and the --no-color option) for complete disable.
- Supports palette overrides via environment or a .env file in the working directory.
"""
from __future__ import annotations
import logging
import os, sys
from pathlib import Path

logger = logging.getLogger(__name__)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

PALETTE_KEYS = ('TODOLIST_PRIMARY', 'TODOLIST_COMPLETED', 'TODOLIST_PENDING')


def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)


def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def load_env_overrides(env_path: Path) -> dict[str, str]:
    """Read palette overrides (KEY=#RRGGBB lines) from a .env file."""
    overrides: dict[str, str] = {}
    if not env_path.exists():
        return overrides
    try:
        text = env_path.read_text()
    except OSError as exc:
        logger.warning("Could not read %s: %s", env_path, exc)
        return overrides
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k, v = k.strip(), v.strip()
        if k in PALETTE_KEYS and _is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides


RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY_DEFAULT = '#5B7FDB'
HEX_COMPLETED_DEFAULT = '#6CC551'
HEX_PENDING_DEFAULT = '#E8A33D'

# resolved against the working directory, not the install location
_ENV_OVERRIDES = load_env_overrides(Path.cwd() / '.env')

# priority: real env var > .env override > default
HEX_PRIMARY = str(os.environ.get('TODOLIST_PRIMARY') or _ENV_OVERRIDES.get('TODOLIST_PRIMARY', HEX_PRIMARY_DEFAULT))
HEX_COMPLETED = str(os.environ.get('TODOLIST_COMPLETED') or _ENV_OVERRIDES.get('TODOLIST_COMPLETED', HEX_COMPLETED_DEFAULT))
HEX_PENDING = str(os.environ.get('TODOLIST_PENDING') or _ENV_OVERRIDES.get('TODOLIST_PENDING', HEX_PENDING_DEFAULT))

PRIMARY = _from_hex(HEX_PRIMARY)
C_COMPLETED = _from_hex(HEX_COMPLETED)
C_PENDING = _from_hex(HEX_PENDING)

STATUS_COLOR = {
    'Completed': C_COMPLETED,
    'Pending': C_PENDING,
}

HEADER_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY


def disable() -> None:
    """Turn styling off for the rest of the process (--no-color)."""
    global _ENABLE
    _ENABLE = False


def enabled() -> bool:
    return _ENABLE


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET


__all__ = [
    'color', 'disable', 'enabled', 'load_env_overrides', 'RESET', 'BOLD', 'DIM',
    'STATUS_COLOR', 'HEADER_COLOR', 'EMPTY_COLOR',
    'HEX_PRIMARY', 'HEX_COMPLETED', 'HEX_PENDING',
]
