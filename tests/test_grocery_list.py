"""Tests for assembling the final grocery list."""

import logging

from camp_grocery.categorizer import GROCERY_CATEGORIES
from camp_grocery.grocery_list import (
    EXTERNAL_MEAL_SUFFIX,
    GroceryItem,
    GroceryList,
    aggregate,
    build_grocery_list,
    finalize,
)
from camp_grocery.merger import MergedIngredient, RecipeRef
from camp_grocery.pantry import PantryConfig, reconcile


class TestAggregate:
    def test_merges_and_categorizes(self, trip_recipes):
        merged = aggregate(trip_recipes)

        by_name = {m.name: m for m in merged}
        assert by_name["Eggs"].category == "Dairy"
        assert by_name["Eggs"].combined_amount == "8"
        assert by_name["Olive oil"].combined_amount == "3 tbsp"
        assert by_name["Aluminum foil"].category == "Camping Gear"
        assert by_name["Potatoes, cubed"].category == "Produce"

    def test_logs_counts(self, trip_recipes, caplog):
        with caplog.at_level(logging.INFO, logger="camp_grocery"):
            aggregate(trip_recipes)

        assert "Total ingredients before merge: 14" in caplog.text
        assert "Total unique ingredients after merge: 11" in caplog.text


class TestGroceryItem:
    def test_from_merged(self):
        ingredient = MergedIngredient(
            key="egg",
            name="Eggs",
            amounts=("6", "2"),
            combined_amount="8",
            recipes=(RecipeRef(1, "Breakfast"), RecipeRef(2, "Pancakes")),
            category="Dairy",
        )

        item = GroceryItem.from_merged(ingredient, checked=True)

        assert item == GroceryItem(
            name="Eggs",
            category="Dairy",
            checked=True,
            amount="8",
            recipes=["Breakfast", "Pancakes"],
        )

    def test_from_merged_uncategorized(self):
        item = GroceryItem.from_merged(MergedIngredient(key="propane", name="Propane"))
        assert item.category == "Camping Gear"

    def test_to_dict_omits_empty_fields(self):
        assert GroceryItem(name="Salt", category="Pantry").to_dict() == {
            "name": "Salt",
            "category": "Pantry",
            "checked": False,
        }


class TestFinalize:
    def test_needed_then_owned_then_external(self, trip_recipes):
        confirmed = reconcile(aggregate(trip_recipes), ["milk"])

        grocery_list = finalize(confirmed, ["Friday Tacos"])

        assert grocery_list.items[-2].name == "Milk"
        assert grocery_list.items[-2].checked
        external = grocery_list.items[-1]
        assert external.name == "Friday Tacos" + EXTERNAL_MEAL_SUFFIX
        assert external.category == "Pantry"
        assert not external.checked

    def test_blank_external_meal_is_skipped(self):
        assert finalize([], ["  "]).items == []

    def test_only_external_meals(self):
        grocery_list = finalize([], ["Friday Tacos"])

        assert [i.name for i in grocery_list.items] == [
            "Friday Tacos (see trip for recipe details)"
        ]


class TestGroceryList:
    def test_grouped_has_every_category(self):
        grocery_list = GroceryList(items=[GroceryItem(name="Milk", category="Dairy")])

        grouped = grocery_list.grouped

        assert list(grouped) == list(GROCERY_CATEGORIES)
        assert [i.name for i in grouped["Dairy"]] == ["Milk"]
        assert grouped["Camping Gear"] == []

    def test_needed_and_already_have(self):
        grocery_list = GroceryList(
            items=[
                GroceryItem(name="Milk", category="Dairy"),
                GroceryItem(name="Salt", category="Pantry", checked=True),
            ]
        )

        assert [i.name for i in grocery_list.needed] == ["Milk"]
        assert [i.name for i in grocery_list.already_have] == ["Salt"]

    def test_to_dict(self):
        grocery_list = GroceryList(
            items=[GroceryItem(name="Milk", category="Dairy")], recipe_titles=["Pancakes"]
        )

        data = grocery_list.to_dict()

        assert data["recipes"] == ["Pancakes"]
        assert data["items"] == [{"name": "Milk", "category": "Dairy", "checked": False}]
        assert list(data["grouped"]) == list(GROCERY_CATEGORIES)


class TestBuildGroceryList:
    """End-to-end tests for build_grocery_list."""

    def test_weekend_trip(self, trip_recipes):
        grocery_list = build_grocery_list(
            trip_recipes,
            already_have=["eggs"],
            external_meals=["Saturday Tacos"],
            pantry=PantryConfig(),
        )

        assert grocery_list.recipe_titles == [
            "Skillet Breakfast",
            "Foil Packet Dinner",
            "Campfire Pancakes",
        ]
        assert [i.name for i in grocery_list.already_have] == ["Eggs", "Olive oil", "Salt"]
        assert len(grocery_list.needed) == 9

        grouped = grocery_list.grouped
        assert [i.name for i in grouped["Meat"]] == ["Bacon", "Smoked sausage"]
        assert [i.name for i in grouped["Produce"]] == [
            "Red onion, diced",
            "Potatoes, cubed",
            "Green onion",
        ]
        assert [i.name for i in grouped["Camping Gear"]] == ["Aluminum foil"]
        assert "Saturday Tacos (see trip for recipe details)" in [
            i.name for i in grouped["Pantry"]
        ]

    def test_without_pantry(self, camp_chili):
        grocery_list = build_grocery_list([camp_chili])

        assert [(i.name, i.category, i.amount) for i in grocery_list.items] == [
            ("Ground beef", "Meat", "1 lb"),
            ("Beans", "Pantry", "1 can"),
            ("Chili powder", "Pantry", "2 tbsp"),
        ]
        assert grocery_list.already_have == []
