from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Iterator

from recipes import load_recipe

from .errors import RecipeError
from .runtime import RECIPE_NAME

logger = logging.getLogger("go-dep-report")


@contextmanager
def materialize_recipe() -> Iterator[Path]:
    """Write the packaged recipe to a private temporary directory.

    The directory and the recipe inside it are removed when the block exits,
    whether it exits normally or with an exception.
    """
    try:
        data = load_recipe()
    except OSError as e:
        raise RecipeError("Error reading embedded recipe", e) from e

    try:
        tmpdir = TemporaryDirectory(prefix="go-dep-report-")
    except OSError as e:
        raise RecipeError("Error creating temporary recipe", e) from e

    with tmpdir:
        recipe_path = Path(tmpdir.name) / RECIPE_NAME
        try:
            recipe_path.write_bytes(data)
        except OSError as e:
            raise RecipeError("Error writing temporary recipe", e) from e

        logger.info("recipe: %s (%d bytes)", recipe_path, len(data))
        yield recipe_path
