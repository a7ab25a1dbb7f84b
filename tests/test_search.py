"""Tests for assetbrowser.search"""

import os

import pytest

import assetbrowser.search as search_module
from assetbrowser.guard import PathGuard
from assetbrowser.search import search_files, matches

from conftest import make_symlink


@pytest.fixture
def guard(assets):
	return PathGuard(str(assets))


def names(results):
	return [r.name for r in results]


class TestMatches:
	def test_name_case_insensitive(self):
		assert matches("BOSS", "boss_fight.lua", [])

	def test_tag_substring(self):
		assert matches("fig", "x.lua", ["boss", "fight"])

	def test_no_match(self):
		assert not matches("dragon", "boss_fight.lua", ["boss", "fight"])


class TestSearchFiles:
	def test_directory_and_file_hits(self, guard):
		results = search_files("boss", guard)

		assert names(results) == ["BOSS", "boss_fight.lua"]

		boss_dir, boss_file = results
		assert boss_dir.type == "directory"
		assert boss_dir.path == "monsters/BOSS"
		assert boss_dir.parent_path == "monsters"
		assert boss_dir.tags is None

		assert boss_file.type == "game"
		assert boss_file.extension == ".lua"
		assert boss_file.tags == ["boss", "fight"]
		assert boss_file.size == len("return { hp = 100 }\n")
		assert boss_file.parent_path == "monsters"

	def test_uppercase_term(self, guard):
		assert names(search_files("BoSs", guard)) == ["BOSS", "boss_fight.lua"]

	def test_root_level_parent_path(self, guard):
		results = search_files("hero", guard)
		assert names(results) == ["hero.png"]
		assert results[0].parent_path == ""
		assert results[0].path == "hero.png"

	def test_directory_hit_still_descended(self, guard):
		results = search_files("icon", guard)
		assert names(results) == ["icons", "sword_icon_01.png"]
		assert results[1].parent_path == "icons"

	def test_pure_number_tags_do_not_match(self, guard):
		# "01" is dropped from tags but still part of the filename
		assert names(search_files("01", guard)) == ["sword_icon_01.png"]

	def test_no_hits(self, guard):
		assert search_files("dragon", guard) == []

	def test_short_terms_tolerated(self, guard):
		assert "hero.png" in names(search_files("h", guard))
		everything = search_files("", guard)
		assert len(everything) == 8

	def test_start_below_root(self, guard):
		results = search_files("boss", guard, guard.resolve("icons"))
		assert results == []

	def test_repeatable(self, guard):
		first = [r.to_dict() for r in search_files("o", guard)]
		second = [r.to_dict() for r in search_files("o", guard)]
		assert first == second

	def test_result_keys(self, guard):
		boss_dir, boss_file = [r.to_dict() for r in search_files("boss", guard)]
		assert set(boss_dir) == {"name", "path", "type", "parent_path"}
		assert {"size", "extension", "tags", "parent_path", "mimeType"} <= set(boss_file)


class TestSymlinks:
	def test_directory_reachable_twice_reported_once(self, assets, guard):
		(assets / "a").mkdir()
		(assets / "b").mkdir()
		make_symlink(assets / "a" / "link", assets / "monsters")
		make_symlink(assets / "b" / "link", assets / "monsters")

		results = search_files("boss", guard)

		assert names(results).count("BOSS") == 1
		assert names(results).count("boss_fight.lua") == 1
		for r in results:
			assert not r.path.startswith("..")

	def test_cycle_terminates(self, assets, guard):
		make_symlink(assets / "monsters" / "loop", assets)
		make_symlink(assets / "icons" / "back", assets / "monsters")

		results = search_files("boss", guard)
		assert names(results).count("boss_fight.lua") == 1

	def test_visited_set_not_shared_between_calls(self, assets, guard):
		make_symlink(assets / "monsters" / "loop", assets)
		assert names(search_files("hero", guard)) == ["hero.png"]
		assert names(search_files("hero", guard)) == ["hero.png"]


class TestFailures:
	def test_unreadable_branch_skipped(self, assets, guard, monkeypatch):
		original = search_module.sorted_children
		blocked = os.path.join(guard.root, "monsters")

		def flaky(path):
			if path == blocked:
				raise PermissionError(13, "Permission denied", path)
			return original(path)
		monkeypatch.setattr(search_module, "sorted_children", flaky)

		results = search_files("o", guard)
		assert "boss_fight.lua" not in names(results)
		assert "icons" in names(results)

	def test_dangling_symlink_skipped(self, assets, guard):
		make_symlink(assets / "boss_ghost.png", assets / "missing.png", target_is_directory=False)
		assert "boss_ghost.png" not in names(search_files("boss", guard))
