import os
from pathlib import Path

import pytest

from assetbrowser import AssetLibrary
from assetbrowser_server.config import ServerConfig
from assetbrowser_server.server import create_app


def make_symlink(link: Path, target: Path, target_is_directory: bool = True):
	"""Create a symlink or skip the test where the platform forbids it."""
	try:
		os.symlink(target, link, target_is_directory=target_is_directory)
	except (OSError, NotImplementedError) as e:
		pytest.skip(f"symlinks unavailable: {e}")


@pytest.fixture
def assets(tmp_path: Path) -> Path:
	"""
	assets/
		hero.png            (2048 bytes)
		readme.md
		icons/
			sword_icon_01.png
		monsters/
			boss_fight.lua
			BOSS/
			slime.ogg
	"""
	root = tmp_path / "assets"
	(root / "icons").mkdir(parents=True)
	(root / "monsters" / "BOSS").mkdir(parents=True)

	(root / "hero.png").write_bytes(b"\x89PNG" + b"\x00" * 2044)
	(root / "readme.md").write_text("# Assets\n")
	(root / "icons" / "sword_icon_01.png").write_bytes(b"\x89PNG")
	(root / "monsters" / "boss_fight.lua").write_text("return { hp = 100 }\n")
	(root / "monsters" / "slime.ogg").write_bytes(b"OggS")
	return root


@pytest.fixture
def library(assets: Path) -> AssetLibrary:
	return AssetLibrary(str(assets))


@pytest.fixture
def app(assets: Path):
	config = ServerConfig(assets_dir=assets, max_preview_size=1024)
	app = create_app(config)
	app.config["TESTING"] = True
	return app


@pytest.fixture
def client(app):
	return app.test_client()
