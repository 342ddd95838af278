"""
Tests for configuration loading.

Verifies:
1. Defaults when pyproject.toml has no `[tool.rewrite_py]` table.
2. TOML values are read from the nearest pyproject.toml up the tree.
3. Explicit arguments override TOML values.
"""

import pytest

from rewrite_py.config import RuntimeConfig, _load_toml_settings


@pytest.fixture
def project(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.rewrite_py]\nstrict = true\nlog_skipped = false\n")
  return tmp_path


def test_defaults():
  config = RuntimeConfig()
  assert config.strict is False
  assert config.log_skipped is True


def test_defaults_without_tool_table(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[project]\nname = 'demo'\n")
  config = RuntimeConfig.load(search_path=tmp_path)
  assert config.strict is False
  assert config.log_skipped is True


def test_load_from_toml(project):
  config = RuntimeConfig.load(search_path=project)
  assert config.strict is True
  assert config.log_skipped is False


def test_search_walks_up(project):
  nested = project / "src" / "pkg"
  nested.mkdir(parents=True)
  settings, found_in = _load_toml_settings(nested)
  assert settings == {"strict": True, "log_skipped": False}
  assert found_in == project.resolve()


def test_explicit_arguments_override(project):
  config = RuntimeConfig.load(strict=False, log_skipped=True, search_path=project)
  assert config.strict is False
  assert config.log_skipped is True


def test_invalid_toml_is_ignored(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.rewrite_py\nstrict = ")
  settings, found_in = _load_toml_settings(tmp_path)
  assert settings == {}
  assert found_in is None
