"""
Section-delimited recipe text format.

    [Recept]
    <recipe name>
    [Ingredienser]
    <amount>;<measure>;<ingredient name>
    [Instruktioner]
    <instruction line>

Recipes follow each other with no closing marker. Ingredient fields are not
escaped, so a `;` inside a field cannot be represented.
"""

from enum import Enum
from typing import Iterable, TextIO

from filedrecipes.lib.errors import MalformedRecipeFileError
from filedrecipes.lib.models import Ingredient, Recipe

SECTION_RECIPE = "[Recept]"
SECTION_INGREDIENTS = "[Ingredienser]"
SECTION_INSTRUCTIONS = "[Instruktioner]"

FIELD_SEPARATOR = ";"


class ReadStatus(Enum):
    """How the next content line will be interpreted."""

    INDEFINITE = "indefinite"
    EXPECTING_RECIPE_NAME = "recipe_name"
    EXPECTING_INGREDIENT = "ingredient"
    EXPECTING_INSTRUCTION = "instruction"


SECTIONS = {
    SECTION_RECIPE: ReadStatus.EXPECTING_RECIPE_NAME,
    SECTION_INGREDIENTS: ReadStatus.EXPECTING_INGREDIENT,
    SECTION_INSTRUCTIONS: ReadStatus.EXPECTING_INSTRUCTION,
}


def parse(text: str) -> list[Recipe]:
    return parse_lines(text.split("\n"))


def parse_lines(lines: Iterable[str]) -> list[Recipe]:
    """
    Decode recipes from `lines` in file order.

    Line terminators are stripped and whitespace-only lines are skipped.
    Raises MalformedRecipeFileError on the first line that does not fit the
    current section; nothing is returned in that case.
    """
    recipes: list[Recipe] = []
    status = ReadStatus.INDEFINITE
    recipe: Recipe | None = None
    line_number = 0

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            continue

        if line in SECTIONS:
            if status is ReadStatus.EXPECTING_RECIPE_NAME:
                raise MalformedRecipeFileError(
                    "section marker where a recipe name was expected",
                    line_number=line_number,
                    line=line,
                )
            status = SECTIONS[line]
            continue

        if status is ReadStatus.EXPECTING_RECIPE_NAME:
            recipe = Recipe(name=line)
            recipes.append(recipe)
            status = ReadStatus.EXPECTING_INGREDIENT
        elif recipe is None:
            raise MalformedRecipeFileError(
                "content outside of a recipe section",
                line_number=line_number,
                line=line,
            )
        elif status is ReadStatus.EXPECTING_INGREDIENT:
            recipe.add_ingredient(parse_ingredient(line, line_number))
        else:
            recipe.add_instruction(line)

    if status is ReadStatus.EXPECTING_RECIPE_NAME:
        raise MalformedRecipeFileError(
            "file ends before the recipe name", line_number=line_number
        )

    return recipes


def parse_ingredient(line: str, line_number: int = 0) -> Ingredient:
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != 3:
        raise MalformedRecipeFileError(
            f"expected 3 ingredient fields, got {len(fields)}",
            line_number=line_number,
            line=line,
        )
    amount, measure, name = fields
    return Ingredient(amount=amount, measure=measure, name=name)


def format_ingredient(ingredient: Ingredient) -> str:
    return FIELD_SEPARATOR.join((ingredient.amount, ingredient.measure, ingredient.name))


def _check_line(value: str, what: str) -> None:
    if "\n" in value or "\r" in value:
        raise MalformedRecipeFileError(f"{what} spans more than one line: {value!r}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedRecipeFileError(f"{what} is not valid UTF-8: {value!r}") from exc


def check_ingredient_field(value: str) -> str:
    _check_line(value, "ingredient field")
    if FIELD_SEPARATOR in value:
        raise MalformedRecipeFileError(
            f"ingredient field contains {FIELD_SEPARATOR!r}: {value!r}"
        )
    return value


def check_content_line(value: str, what: str) -> str:
    """A recipe name or instruction must come back from `parse_lines` unchanged."""
    _check_line(value, what)
    if not value.strip():
        raise MalformedRecipeFileError(f"{what} is blank")
    if value in SECTIONS:
        raise MalformedRecipeFileError(f"{what} is a section marker: {value!r}")
    return value


def check_recipe(recipe: Recipe) -> None:
    """Raise MalformedRecipeFileError if `recipe` cannot be written and read back."""
    check_content_line(recipe.name, "recipe name")
    for ingredient in recipe.ingredients:
        check_ingredient_field(ingredient.amount)
        check_ingredient_field(ingredient.measure)
        check_ingredient_field(ingredient.name)
    for line in recipe.instructions:
        check_content_line(line, "instruction")


def iter_lines(recipes: Iterable[Recipe]) -> Iterable[str]:
    for recipe in recipes:
        yield SECTION_RECIPE
        yield recipe.name
        yield SECTION_INGREDIENTS
        for ingredient in recipe.ingredients:
            yield format_ingredient(ingredient)
        yield SECTION_INSTRUCTIONS
        yield from recipe.instructions


def serialize(recipes: Iterable[Recipe]) -> str:
    return "".join(f"{line}\n" for line in iter_lines(recipes))


def dump(recipes: Iterable[Recipe], fp: TextIO) -> None:
    for line in iter_lines(recipes):
        fp.write(f"{line}\n")
