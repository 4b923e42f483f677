"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually called by frameworks (Pydantic, watchdog) or by the
protocols of the standard library.
"""
# pylint: disable=all
# Pydantic field validator - used by framework via @field_validator decorator
_.expand  # noqa: F821  # unused method (composekey/settings/paths.py:27)

# Pydantic model_config class variable - read by framework at class definition time
model_config  # noqa: F821  # unused variable (composekey/data/compose_file.py:43)

# watchdog event handler hook - called by the observer thread
_.on_any_event  # noqa: F821  # unused method (composekey/settings/watcher.py:85)

# Entry-point callables referenced from pyproject.toml
main  # noqa: F821  # unused function (composekey/__main__.py:87)
