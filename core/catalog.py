import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from core.errors import EmptyCatalogError


@dataclass(frozen=True)
class Dish:
    name: str
    ingredients: Tuple[str, ...]
    duration: int


def load_dishes(path) -> Tuple[Dish, ...]:
    """Read the dish dataset. Relative paths resolve against the working directory."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        rows = json.load(f)

    dishes = tuple(
        Dish(
            name=row["name"],
            ingredients=tuple(row["ingredients"]),
            duration=int(row["duration"]),
        )
        for row in rows
    )
    if not dishes:
        logging.warning(f"[CORE] {path.name} contains no dishes")
    logging.info(f"[CORE] Loaded {len(dishes)} dishes from {path.name}")
    return dishes


class DishCatalog:
    """Read-only view over the dish dataset."""

    def __init__(self, dishes):
        self._dishes = tuple(dishes)

    def __len__(self):
        return len(self._dishes)

    def __iter__(self):
        return iter(self._dishes)

    def with_ingredient(self, ingredient: str) -> List[Dish]:
        # exact, case-sensitive match
        return [dish for dish in self._dishes if ingredient in dish.ingredients]

    def random_dish(self) -> Dish:
        if not self._dishes:
            raise EmptyCatalogError("No dishes available to suggest")
        return random.choice(self._dishes)

    @classmethod
    def from_config(cls, cfg: dict) -> "DishCatalog":
        path = cfg.get("dishes", {}).get("path", "assets/dishes.json")
        return cls(load_dishes(path))
