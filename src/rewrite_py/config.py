"""
Runtime Configuration Store.

Settings that change how the builder reacts to constructs it cannot map.
Values come from explicit arguments first, then from the `[tool.rewrite_py]`
table of the nearest `pyproject.toml`, then from the field defaults.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore

TOOL_SECTION = "rewrite_py"


class RuntimeConfig(BaseModel):
  """
  Configuration for a single build/print pipeline.
  """

  strict: bool = Field(
    False,
    description="If True, an unsupported statement aborts the build instead of being skipped.",
  )
  log_skipped: bool = Field(True, description="Emit a warning log record for every skipped statement.")

  @classmethod
  def load(
    cls,
    strict: Optional[bool] = None,
    log_skipped: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Args:
        strict (Optional[bool]): Override for strict mode.
        log_skipped (Optional[bool]): Override for skip logging.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    final_strict = strict if strict is not None else bool(toml_config.get("strict", False))
    final_log = log_skipped if log_skipped is not None else bool(toml_config.get("log_skipped", True))

    return cls(strict=final_strict, log_skipped=final_log)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts the tool table.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      return data.get("tool", {}).get(TOOL_SECTION, {}), parent

  return {}, None
