import pytest

from filedrecipes.lib.repository import RecipeRepository

RECIPES_TEXT = """[Recept]
Pancakes
[Ingredienser]
3;dl;vetemjöl
6;dl;mjölk
3;st;ägg
[Instruktioner]
Vispa ihop mjöl och hälften av mjölken.
Vispa i resten av mjölken och äggen.
Stek tunna pannkakor.
[Recept]
Apple Pie
[Ingredienser]
4;st;äpplen
1;dl;socker
[Instruktioner]
Skiva äpplena.
Grädda i 225 grader.
"""


@pytest.fixture
def recipes_file(tmp_path):
    path = tmp_path / "recipes.txt"
    path.write_text(RECIPES_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def repository(recipes_file):
    repository = RecipeRepository(recipes_file)
    repository.load()
    return repository
