"""core/tuning.py — Data-driven tuning constants.

Gameplay and window numbers live in ``data/tuning.toml`` and are loaded
once at startup.  Any module can read a value with::

    from core import tuning
    speed = tuning.get("player", "speed", 160.0)

Every ``get`` carries its own default, so a missing file or key never
stops the game.  ``reload()`` re-reads the file (F5 in-game); new values
apply to the next session.  Tests pin values with ``override()``.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


_data: dict = {}
_path: Path | None = None

DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning constants from *path*.

    If *path* is ``None``, default to ``data/tuning.toml`` in the
    project root (one level above ``core/``).
    """
    global _data, _path

    path = DEFAULT_PATH if path is None else Path(path)
    _path = path

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {path}")


def reload() -> None:
    """Re-read the tuning file from disk."""
    load(_path)


def reset() -> None:
    """Forget every loaded value and override."""
    global _data, _path
    _data = {}
    _path = None


def _node(section_path: str):
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
        if node is None:
            return None
    return node


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation for nested tables, e.g. ``"npc"`` looks
    up ``[npc]``.

    >>> get("npc", "count", 6)
    6
    """
    node = _node(section)
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    node = _node(section_path)
    return dict(node) if isinstance(node, dict) else {}


def override(section_path: str, key: str, value) -> None:
    """Set a value in memory only.  Cleared by the next ``load()``."""
    node = _data
    for part in section_path.split("."):
        node = node.setdefault(part, {})
    node[key] = value


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
