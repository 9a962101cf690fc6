"""Tests for the name-keyed skill cache."""

import datetime as _datetime
import pathlib as _pathlib

import pytest as _pytest

import skillserver.skills.cache as cache_module
import skillserver.skills.skill as skill_module
import skillserver.skills.types as types


def _skill(name: str, description: str = "desc") -> skill_module.Skill:
    base = _pathlib.Path("/skills") / name.strip().lower()
    return skill_module.Skill(
        name=name,
        description=description,
        base_directory=base,
        file_path=base / "SKILL.md",
        content=f"---\nname: {name}\ndescription: {description}\n---\n",
        last_loaded=_datetime.datetime.now(_datetime.timezone.utc),
        source=types.SkillSource.GLOBAL_CLAUDE,
        location="global",
    )


class TestSkillCache:
    """Tests for SkillCache."""

    def test_starts_empty(self, cache: cache_module.SkillCache) -> None:
        """A new cache has nothing in it."""
        assert cache.size() == 0
        assert cache.get_all_skills() == []

    @_pytest.mark.parametrize("lookup", ["PDF", "pdf", " pdf ", "Pdf"])
    def test_lookup_ignores_case_and_whitespace(
        self, cache: cache_module.SkillCache, lookup: str
    ) -> None:
        """Any casing or padding of the name finds the skill."""
        stored = _skill("Pdf")
        cache.set(stored)

        assert cache.get(lookup) is stored
        assert cache.has(lookup)

    def test_get_unknown_returns_none(self, cache: cache_module.SkillCache) -> None:
        """Unknown names are absent, not errors."""
        assert cache.get("missing") is None
        assert not cache.has("missing")

    def test_set_overwrites_same_normalized_name(self, cache: cache_module.SkillCache) -> None:
        """Names differing only by case share one slot."""
        cache.set(_skill("Git", "first"))
        cache.set(_skill("git", "second"))

        assert cache.size() == 1
        found = cache.get("GIT")
        assert found is not None
        assert found.description == "second"

    def test_delete(self, cache: cache_module.SkillCache) -> None:
        """delete removes by normalized name and ignores unknown names."""
        cache.set(_skill("Git"))
        cache.delete(" GIT ")
        cache.delete("never-existed")

        assert cache.size() == 0

    def test_clear(self, cache: cache_module.SkillCache) -> None:
        """clear empties the cache."""
        cache.set(_skill("a"))
        cache.set(_skill("b"))
        cache.clear()

        assert cache.size() == 0

    def test_get_all_skills(self, cache: cache_module.SkillCache) -> None:
        """Every stored record is returned."""
        cache.set(_skill("a"))
        cache.set(_skill("b"))

        assert {s.name for s in cache.get_all_skills()} == {"a", "b"}

    def test_get_all_skills_is_a_copy(self, cache: cache_module.SkillCache) -> None:
        """Mutating the returned list does not touch the cache."""
        cache.set(_skill("a"))
        cache.get_all_skills().clear()

        assert cache.size() == 1

    def test_replace_with_swaps_contents(self, cache: cache_module.SkillCache) -> None:
        """replace_with installs the other cache's entries wholesale."""
        cache.set(_skill("old"))
        staging = cache_module.SkillCache()
        staging.set(_skill("new"))

        cache.replace_with(staging)

        assert cache.has("new")
        assert not cache.has("old")
        assert staging.size() == 0
