import bisect
import logging
from pathlib import Path
from typing import Callable

from filedrecipes.lib import codec
from filedrecipes.lib.errors import (
    MalformedRecipeFileError,
    RecipeFileIOError,
    RecipeIndexError,
    RecipeNotFoundError,
)
from filedrecipes.lib.models import Recipe

RecipesChangedCallback = Callable[["RecipeRepository"], None]


class RecipeRepository:
    """
    Working collection of recipes bound to one recipe file.

    The stored recipes never leave the repository: every accessor hands out
    clones, and `delete` accepts a clone by looking up the stored original.
    `is_modified` tracks unsaved changes and is cleared by `load` and `save`.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).resolve()
        self._recipes: list[Recipe] = []
        self._observers: list[RecipesChangedCallback] = []
        self._is_modified = False
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def is_modified(self) -> bool:
        return self._is_modified

    @property
    def count(self) -> int:
        return len(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def subscribe(self, callback: RecipesChangedCallback) -> None:
        self._observers.append(callback)

    def unsubscribe(self, callback: RecipesChangedCallback) -> None:
        self._observers.remove(callback)

    def _recipes_changed(self) -> None:
        for callback in list(self._observers):
            callback(self)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._recipes):
            raise RecipeIndexError(index, len(self._recipes))

    def get_all(self) -> list[Recipe]:
        return [recipe.clone() for recipe in self._recipes]

    def get_at(self, index: int) -> Recipe:
        self._check_index(index)
        return self._recipes[index].clone()

    def add(self, recipe: Recipe) -> None:
        """
        Store a copy of `recipe`, keeping the collection sorted by name.

        Raises MalformedRecipeFileError for values the file format cannot
        hold (see `codec.check_recipe`).
        """
        codec.check_recipe(recipe)
        position = bisect.bisect_right(
            [stored.name for stored in self._recipes], recipe.name
        )
        self._recipes.insert(position, recipe.clone())
        self._is_modified = True
        self.logger.debug(f"Added recipe {recipe.name!r} at {position}")
        self._recipes_changed()

    def delete(self, recipe: Recipe) -> None:
        position = next(
            (i for i, stored in enumerate(self._recipes) if stored is recipe), None
        )
        if position is None:
            # A clone from get_all/get_at: remove the equal stored original.
            position = next(
                (i for i, stored in enumerate(self._recipes) if stored == recipe),
                None,
            )
        if position is None:
            raise RecipeNotFoundError(recipe.name)
        self._remove(position)

    def delete_at(self, index: int) -> None:
        self._check_index(index)
        self._remove(index)

    def _remove(self, position: int) -> None:
        removed = self._recipes.pop(position)
        self._is_modified = True
        self.logger.debug(f"Deleted recipe {removed.name!r}")
        self._recipes_changed()

    def save(self) -> None:
        """
        Write the collection to the file.

        The text is encoded before the file is opened, so an encoding error
        leaves the existing file as it was.
        """
        try:
            data = codec.serialize(self._recipes).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise MalformedRecipeFileError(f"not valid UTF-8: {exc.reason}") from exc

        try:
            with open(self.path, "wb") as fp:
                fp.write(data)
        except OSError as exc:
            self.logger.error(f"Error while writing {str(self.path)!r}: {exc}")
            raise RecipeFileIOError(self.path, exc.strerror or str(exc)) from exc

        self._is_modified = False
        self.logger.info(f"Saved {len(self._recipes)} recipes to {str(self.path)!r}")
        self._recipes_changed()

    def load(self) -> None:
        """
        Replace the collection with the recipes in the file, sorted by name.

        On any error the current collection is kept as it was.
        """
        try:
            with open(self.path, encoding="utf-8") as fp:
                loaded = codec.parse_lines(fp)
        except UnicodeDecodeError as exc:
            raise MalformedRecipeFileError(f"not valid UTF-8: {exc.reason}") from exc
        except MalformedRecipeFileError as exc:
            self.logger.warning(f"Rejected {str(self.path)!r}: {exc}")
            raise
        except OSError as exc:
            self.logger.error(f"Error while reading {str(self.path)!r}: {exc}")
            raise RecipeFileIOError(self.path, exc.strerror or str(exc)) from exc

        self._recipes = sorted(loaded, key=lambda recipe: recipe.name)
        self._is_modified = False
        self.logger.info(
            f"Loaded {len(self._recipes)} recipes from {str(self.path)!r}"
        )
        self._recipes_changed()
