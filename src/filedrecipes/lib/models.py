from dataclasses import dataclass, field


@dataclass
class Ingredient:
    amount: str = ""
    measure: str = ""
    name: str = ""

    def clone(self) -> "Ingredient":
        return Ingredient(amount=self.amount, measure=self.measure, name=self.name)

    def __str__(self) -> str:
        return " ".join(part for part in (self.amount, self.measure, self.name) if part)


@dataclass
class Recipe:
    name: str
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)

    def add_instruction(self, line: str) -> None:
        self.instructions.append(line)

    def clone(self) -> "Recipe":
        """Return a copy that shares no lists or ingredients with this recipe."""
        return Recipe(
            name=self.name,
            ingredients=[ingredient.clone() for ingredient in self.ingredients],
            instructions=list(self.instructions),
        )

    # Recipes sort by name only; equality stays structural.
    def __lt__(self, other: "Recipe") -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.name < other.name
