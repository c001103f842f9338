"""Shared fixtures for the leftovers tests."""
from __future__ import annotations

import pytest

FULL_RECIPE = """## 1. Recipe Title
**Veggie Fried Rice**

## 2. Ingredients List
* 2 cups cooked rice
* 1 medium onion, diced
* 1/2 capsicum, chopped
* 2 tablespoons olive oil

## 3. Instructions
1. Heat the oil in a wok.
2. Add the onion and capsicum; stir-fry for 3 minutes.
3. Add the rice and fry until hot.

## 4. Substitutions
* Use brown rice instead of white rice.

## 5. Cooking Tips
* Day-old rice fries best.

## 6. Nutritional Information (per serving)
* Calories: 350
* Protein: 8g
* Carbs: 55g
* Fat: 10g
* Note: Values are approximate.

## 7. Total Time Required
* Prep time: 10 minutes
* Cook time: 15 minutes

## 8. Serving Size
Serves 2
"""

SIMPLE_RECIPE = """Veggie Fried Rice
Ingredients:
- 2 cups rice
- 1 onion
Instructions:
1. Chop onion.
2. Fry rice.
Nutrition:
Calories: 400
Protein: 10g
Serves: 2
"""


@pytest.fixture
def full_recipe_text() -> str:
    return FULL_RECIPE


@pytest.fixture
def simple_recipe_text() -> str:
    return SIMPLE_RECIPE
