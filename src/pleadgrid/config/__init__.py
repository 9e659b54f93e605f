"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable named by ``storage.directory_env`` (attachment store)
"""

from .schema import ConfigModel, OverflowSettings, load_config

__all__ = ["ConfigModel", "OverflowSettings", "load_config"]
