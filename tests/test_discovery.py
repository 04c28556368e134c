"""Tests for entity and migration file discovery."""

from config import ENTITIES_PATTERNS, MIGRATIONS_PATTERNS
from discovery import discover_entities, discover_migrations, resolve_patterns


def test_entities_found_across_modules(tmp_path, make_file) -> None:
    make_file("dist/modules/users/infra/typeorm/entities/User.js")
    make_file("dist/modules/teams/infra/typeorm/entities/Team.js")
    make_file("dist/modules/teams/infra/typeorm/entities/Team.js.map")
    make_file("dist/modules/teams/infra/typeorm/repositories/TeamRepository.js")

    entities = discover_entities(ENTITIES_PATTERNS, tmp_path)

    assert [e["name"] for e in entities] == ["Team", "User"]
    assert entities[0]["filename"] == "Team.js"
    assert entities[0]["path"].endswith("dist/modules/teams/infra/typeorm/entities/Team.js")


def test_nested_module_directories_match(tmp_path, make_file) -> None:
    make_file("dist/modules/platform/github/infra/typeorm/entities/Integration.js")

    entities = discover_entities(ENTITIES_PATTERNS, tmp_path)

    assert [e["name"] for e in entities] == ["Integration"]


def test_missing_directories_yield_nothing(tmp_path) -> None:
    assert discover_entities(ENTITIES_PATTERNS, tmp_path) == []
    assert discover_migrations(MIGRATIONS_PATTERNS, tmp_path) == []


def test_migrations_ordered_by_numeric_version(tmp_path, make_file) -> None:
    folder = "dist/config/database/typeorm/migrations"
    make_file(f"{folder}/1700000000000-AddTeams.js")
    make_file(f"{folder}/999-Initial.js")
    make_file(f"{folder}/seed.js")
    make_file(f"{folder}/1690000000000-CreateUsers.js")

    migrations = discover_migrations(MIGRATIONS_PATTERNS, tmp_path)

    assert [m["version"] for m in migrations] == ["999", "1690000000000", "1700000000000", ""]
    assert [m["name"] for m in migrations] == ["Initial", "CreateUsers", "AddTeams", "seed"]
    assert migrations[1]["filename"] == "1690000000000-CreateUsers.js"


def test_overlapping_patterns_list_each_file_once(tmp_path, make_file) -> None:
    make_file("dist/a/One.js")

    paths = resolve_patterns(["./dist/a/*.js", "./dist/**/*.js"], tmp_path)

    assert len(paths) == 1
    assert paths[0].name == "One.js"


def test_directories_are_not_files(tmp_path, make_file) -> None:
    (tmp_path / "dist" / "dir.js").mkdir(parents=True)
    make_file("dist/real.js")

    assert [p.name for p in resolve_patterns(["./dist/*.js"], tmp_path)] == ["real.js"]


def test_root_with_glob_characters(tmp_path) -> None:
    root = tmp_path / "proj[1]"
    entity = root / "dist/modules/users/infra/typeorm/entities/User.js"
    entity.parent.mkdir(parents=True)
    entity.write_text("module.exports = {};\n")

    entities = discover_entities(ENTITIES_PATTERNS, root)

    assert [e["name"] for e in entities] == ["User"]
    assert "proj[1]" in entities[0]["path"]
