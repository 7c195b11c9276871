from pydantic import BaseModel, ConfigDict, field_validator

from filedrecipes.lib import codec
from filedrecipes.lib.models import Ingredient, Recipe


class IngredientModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    amount: str = ""
    measure: str = ""
    name: str = ""

    @field_validator("amount", "measure", "name")
    @classmethod
    def fits_ingredient_line(cls, value: str) -> str:
        return codec.check_ingredient_field(value)


class RecipeModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    ingredients: list[IngredientModel] = []
    instructions: list[str] = []

    @field_validator("name")
    @classmethod
    def fits_name_line(cls, value: str) -> str:
        return codec.check_content_line(value, "recipe name")

    @field_validator("instructions")
    @classmethod
    def fit_instruction_lines(cls, value: list[str]) -> list[str]:
        return [codec.check_content_line(line, "instruction") for line in value]

    def to_recipe(self) -> Recipe:
        return Recipe(
            name=self.name,
            ingredients=[
                Ingredient(amount=i.amount, measure=i.measure, name=i.name)
                for i in self.ingredients
            ],
            instructions=list(self.instructions),
        )


class RecipeResponse(BaseModel):
    recipe: RecipeModel


class RecipeListResponse(BaseModel):
    recipes: list[RecipeModel]
    is_modified: bool


class StatusResponse(BaseModel):
    count: int
    is_modified: bool
