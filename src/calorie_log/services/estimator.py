"""Keyword-based calorie estimation."""

import math

# First match wins, so order matters more than position in the food name.
KEYWORD_CALORIES: tuple[tuple[str, int], ...] = (
    ("banana", 105),
    ("apple", 95),
    ("orange", 80),
    ("egg", 78),
    ("rice", 200),
    ("bread", 80),
    ("sandwich", 350),
    ("salad", 180),
    ("chicken", 250),
    ("pizza", 285),
    ("pasta", 350),
    ("coffee", 5),
    ("latte", 180),
    ("burger", 500),
    ("fries", 365),
    ("yogurt", 150),
    ("smoothie", 220),
    ("oats", 150),
    ("oatmeal", 150),
    ("protein", 200),
)

CATEGORY_CALORIES: tuple[tuple[str, int], ...] = (
    ("breakfast", 350),
    ("lunch", 600),
    ("dinner", 650),
    ("snack", 200),
)

DEFAULT_CALORIES = 300


def estimate_calories(name: str, category: str | None = None) -> int:
    """Estimate calories from the food name, then the category, then a default."""
    lowered = name.lower()
    for keyword, calories in KEYWORD_CALORIES:
        if keyword in lowered:
            return calories

    if category:
        lowered_category = category.strip().lower()
        for known, calories in CATEGORY_CALORIES:
            if lowered_category == known:
                return calories

    return DEFAULT_CALORIES


def resolve_calories(calories: object, name: str, category: str | None) -> int:
    """Use supplied positive calories rounded half up, otherwise estimate."""
    if _is_number(calories) and calories > 0:
        rounded = math.floor(calories + 0.5)
        if rounded > 0:
            return rounded
    return estimate_calories(name, category)


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)
