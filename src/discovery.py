"""
Entity and migration file discovery.
Resolves the glob patterns carried by the connection config into files on disk.
"""

import glob
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

logger = logging.getLogger("kodus-datasource")

# TypeORM names migrations <timestamp>-<Name>.js
_MIGRATION_RE = re.compile(r"^(?P<version>\d+)[-_]?(?P<name>.*)$")


def resolve_patterns(patterns: Iterable[str], root: str | Path = ".") -> list[Path]:
    """Expand glob patterns relative to root; each file appears once, sorted by path."""
    root = Path(root)
    found: set[Path] = set()

    for pattern in patterns:
        # root is a literal path; only the pattern carries wildcards
        matches = glob.glob(str(Path(glob.escape(str(root))) / pattern), recursive=True)
        logger.debug(f"Pattern {pattern} matched {len(matches)} file(s)")
        found.update(Path(m).resolve() for m in matches if Path(m).is_file())

    return sorted(found)


def discover_entities(patterns: Iterable[str], root: str | Path = ".") -> list[dict[str, Any]]:
    """List entity mapping files matched by the patterns."""
    return [
        {"name": path.stem, "filename": path.name, "path": str(path)}
        for path in resolve_patterns(patterns, root)
    ]


def _migration_sort_key(migration: dict[str, Any]) -> tuple[int, int, str]:
    version = migration["version"]
    if version:
        return (0, int(version), migration["filename"])
    return (1, 0, migration["filename"])


def discover_migrations(patterns: Iterable[str], root: str | Path = ".") -> list[dict[str, Any]]:
    """List migration files matched by the patterns, ordered by version."""
    migrations = []

    for path in resolve_patterns(patterns, root):
        match = _MIGRATION_RE.match(path.stem)
        if match:
            version, name = match.group("version"), match.group("name")
        else:
            version, name = "", path.stem

        migrations.append(
            {
                "version": version,
                "name": name,
                "filename": path.name,
                "path": str(path),
            }
        )

    return sorted(migrations, key=_migration_sort_key)
