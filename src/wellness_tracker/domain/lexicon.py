"""Static lookup tables used by the meal estimator."""

from collections.abc import Mapping
from types import MappingProxyType

from wellness_tracker.domain.nutrition import FoodEntry

FOOD_LEXICON: Mapping[str, FoodEntry] = MappingProxyType(
    {
        # Breakfast
        "egg": FoodEntry(calories=70, protein=6, carbs=1, fat=5),
        "eggs": FoodEntry(calories=140, protein=12, carbs=2, fat=10),
        "toast": FoodEntry(calories=75, protein=3, carbs=14, fat=1),
        "bread": FoodEntry(calories=75, protein=3, carbs=14, fat=1),
        "butter": FoodEntry(calories=100, protein=0, carbs=0, fat=11),
        "oatmeal": FoodEntry(calories=150, protein=5, carbs=27, fat=3),
        "banana": FoodEntry(calories=105, protein=1, carbs=27, fat=0),
        "apple": FoodEntry(calories=95, protein=0, carbs=25, fat=0),
        "orange": FoodEntry(calories=62, protein=1, carbs=15, fat=0),
        "coffee": FoodEntry(calories=2, protein=0, carbs=0, fat=0),
        "milk": FoodEntry(calories=150, protein=8, carbs=12, fat=8),
        # Lunch and dinner
        "chicken": FoodEntry(calories=165, protein=31, carbs=0, fat=4),
        "chicken breast": FoodEntry(calories=165, protein=31, carbs=0, fat=4),
        "rice": FoodEntry(calories=205, protein=4, carbs=45, fat=0),
        "pasta": FoodEntry(calories=220, protein=8, carbs=43, fat=1),
        "salad": FoodEntry(calories=20, protein=1, carbs=4, fat=0),
        "sandwich": FoodEntry(calories=350, protein=15, carbs=35, fat=15),
        "burger": FoodEntry(calories=540, protein=25, carbs=40, fat=27),
        "pizza": FoodEntry(calories=285, protein=12, carbs=36, fat=10),
        "steak": FoodEntry(calories=271, protein=25, carbs=0, fat=19),
        "salmon": FoodEntry(calories=208, protein=20, carbs=0, fat=13),
        "vegetables": FoodEntry(calories=50, protein=2, carbs=10, fat=0),
        "broccoli": FoodEntry(calories=55, protein=4, carbs=11, fat=1),
        # Snacks
        "chips": FoodEntry(calories=150, protein=2, carbs=15, fat=10),
        "cookies": FoodEntry(calories=160, protein=2, carbs=21, fat=8),
        "yogurt": FoodEntry(calories=100, protein=10, carbs=12, fat=0),
        "nuts": FoodEntry(calories=160, protein=7, carbs=6, fat=14),
        "protein bar": FoodEntry(calories=200, protein=20, carbs=20, fat=7),
        "smoothie": FoodEntry(calories=250, protein=10, carbs=40, fat=5),
    }
)

# Lookup order matters: the first word found next to a food wins.
QUANTITY_LEXICON: Mapping[str, float] = MappingProxyType(
    {
        "two": 2,
        "2": 2,
        "three": 3,
        "3": 3,
        "four": 4,
        "4": 4,
        "double": 2,
        "large": 1.5,
        "small": 0.75,
        "half": 0.5,
    }
)
