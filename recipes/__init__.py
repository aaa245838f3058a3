from __future__ import annotations

from functools import cache
from importlib import resources

RECIPE_RESOURCE = "Makefile"


@cache
def load_recipe() -> bytes:
    """Return the packaged deps-report recipe, read once per process."""
    return resources.files(__package__).joinpath(RECIPE_RESOURCE).read_bytes()


__all__ = ["RECIPE_RESOURCE", "load_recipe"]
