import pytest

from delivery.exceptions import (
    DeliveryError,
    DuplicateCategoryError,
    DuplicateDishError,
    UnknownCategoryError,
    UnknownRestaurantError,
)


class TestCategories:
    def test_categories_are_sorted(self, service):
        for name in ["Mexican", "Italian", "Japanese"]:
            service.add_category(name)

        assert service.get_categories() == ["Italian", "Japanese", "Mexican"]

    def test_duplicate_category_fails_on_second_call(self, service):
        service.add_category("Italian")

        with pytest.raises(DuplicateCategoryError) as exc_info:
            service.add_category("Italian")

        assert exc_info.value.details == {"category": "Italian"}
        assert service.get_categories() == ["Italian"]

    def test_errors_share_base_class(self, service):
        service.add_category("Italian")
        with pytest.raises(DeliveryError):
            service.add_category("Italian")

    def test_no_categories(self, service):
        assert service.get_categories() == []


class TestRestaurants:
    def test_unknown_category_rejected(self, service):
        with pytest.raises(UnknownCategoryError):
            service.add_restaurant("Luigi's", "Italian")

        assert service.get_restaurants_for_category("Italian") == []

    def test_restaurants_for_category_ascending(self, seeded_service):
        assert seeded_service.get_restaurants_for_category("Italian") == [
            "Luigi's",
            "Trattoria Roma",
        ]
        assert seeded_service.get_restaurants_for_category("Japanese") == ["Sakura"]

    def test_restaurants_for_empty_or_unknown_category(self, seeded_service):
        assert seeded_service.get_restaurants_for_category("Mexican") == []
        assert seeded_service.get_restaurants_for_category("Thai") == []

    def test_reregistering_restaurant_overwrites(self, seeded_service):
        seeded_service.add_restaurant("Luigi's", "Mexican")

        assert seeded_service.get_restaurants_for_category("Italian") == ["Trattoria Roma"]
        assert seeded_service.get_restaurants_for_category("Mexican") == ["Luigi's"]
        assert seeded_service.get_dishes_for_restaurant("Luigi's") == []


class TestDishes:
    def test_add_dish_to_unknown_restaurant(self, service):
        with pytest.raises(UnknownRestaurantError) as exc_info:
            service.add_dish("Pizza", "Nowhere", 9.0)

        assert exc_info.value.details["restaurant_name"] == "Nowhere"

    def test_duplicate_dish_in_same_restaurant(self, seeded_service):
        with pytest.raises(DuplicateDishError):
            seeded_service.add_dish("Pizza", "Luigi's", 8.0)

    def test_same_dish_name_in_other_restaurant(self, seeded_service):
        seeded_service.add_dish("Ramen", "Luigi's", 9.0)

        assert "Ramen" in seeded_service.get_dishes_for_restaurant("Luigi's")

    def test_dishes_for_restaurant_sorted(self, seeded_service):
        assert seeded_service.get_dishes_for_restaurant("Luigi's") == [
            "Lasagna",
            "Pizza",
            "Tiramisu",
        ]

    def test_dishes_for_unknown_or_empty_restaurant(self, seeded_service):
        seeded_service.add_restaurant("Empty", "Mexican")

        assert seeded_service.get_dishes_for_restaurant("Empty") == []
        assert seeded_service.get_dishes_for_restaurant("Nowhere") == []

    def test_dishes_by_price_bounds_inclusive(self, seeded_service):
        result = seeded_service.get_dishes_by_price(5, 10)

        assert result == {
            "Luigi's": ["Pizza"],
            "Sakura": ["Ramen"],
            "Trattoria Roma": ["Pizza"],
        }
        assert "Tiramisu" not in result["Luigi's"]

    def test_dishes_by_price_omits_restaurants_without_match(self, seeded_service):
        assert seeded_service.get_dishes_by_price(11, 12) == {
            "Luigi's": ["Lasagna"],
            "Trattoria Roma": ["Carbonara"],
        }
        assert seeded_service.get_dishes_by_price(100, 200) == {}

    def test_dishes_by_category_distinct(self, seeded_service):
        assert seeded_service.get_dishes_by_category("Italian") == [
            "Lasagna",
            "Pizza",
            "Tiramisu",
            "Carbonara",
        ]

    def test_dishes_by_category_empty_or_unknown(self, seeded_service):
        assert seeded_service.get_dishes_by_category("Mexican") == []
        assert seeded_service.get_dishes_by_category("Thai") == []
