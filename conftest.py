"""
pytest configuration for DevToolkit.
Puts src/ on the import path and provides shared catalog and app fixtures.
"""

import json
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from catalog import ToolCatalog, ToolDescriptor
from config.settings import Settings
from config.tools import TOOLS


def make_tool(name, category, tags=None, description=None, route=None):
    """Build a descriptor with sensible defaults for hand-made catalogs."""
    slug = name.lower().replace(' ', '-')
    return ToolDescriptor(
        name=name,
        route=route or f"/tools/{slug}",
        description=description if description is not None else f"{name} description",
        category=category,
        tags=tuple(tags or [slug])
    )


@pytest.fixture
def catalog():
    """The static application catalog with every tool enabled."""
    return ToolCatalog.from_records(TOOLS)


@pytest.fixture
def tool_factory():
    return make_tool


@pytest.fixture
def config_file(tmp_path):
    """Write a config.json into a temporary directory and return its path."""
    def _write(config):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(config), encoding='utf-8')
        return path
    return _write


@pytest.fixture
def client():
    """Flask test client for an app built with default settings."""
    from main import create_app
    app = create_app(Settings())
    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch, tmp_path):
    """Keep tests away from the user's config directory."""
    monkeypatch.delenv('DEVTOOLKIT_CONFIG_FILE', raising=False)
    monkeypatch.setenv('DEVTOOLKIT_CONFIG_DIR', str(tmp_path / "devtoolkit-config"))
    yield
