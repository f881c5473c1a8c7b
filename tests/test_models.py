from delivery.models import Dish, Order, OrderStatus, Restaurant


def test_dish_equality_by_name_only():
    assert Dish("Pizza", 9.5, "Luigi's") == Dish("Pizza", 12.0, "Trattoria Roma")
    assert len({Dish("Pizza", 9.5, "A"), Dish("Pizza", 1.0, "B")}) == 1
    assert sorted([Dish("b", 1, "x"), Dish("a", 2, "x")])[0].name == "a"


def test_price_in_range_inclusive():
    dish = Dish("Pizza", 10.0, "Luigi's")

    assert dish.price_in_range(5, 10)
    assert dish.price_in_range(10, 20)
    assert not dish.price_in_range(10.01, 20)


def test_restaurant_average_rating():
    restaurant = Restaurant("Luigi's", "Italian")
    assert restaurant.average_rating is None
    assert not restaurant.has_ratings

    restaurant.add_rating(3)
    restaurant.add_rating(4)

    assert restaurant.average_rating == 3.5


def test_order_slot_matching_and_assignment():
    order = Order(1, ["Pizza"], [1], "Jane", "Luigi's", 19, 4)

    assert order.status is OrderStatus.PENDING
    assert order.matches_slot(19, 4)
    assert not order.matches_slot(19, 3)
    assert not order.matches_slot(20, 10)

    order.mark_assigned()

    assert order.delivered
    assert not order.matches_slot(19, 4)
