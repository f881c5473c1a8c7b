from delivery.services.delivery_service import DeliveryService


def test_catalog_to_delivery(settings):
    service = DeliveryService(settings)
    service.add_category("Italian")
    service.add_restaurant("Luigi's", "Italian")
    service.add_dish("Pizza", "Luigi's", 9.5)

    assert service.get_dishes_by_price(9, 10) == {"Luigi's": ["Pizza"]}

    order_id = service.add_order(["Pizza"], [1], "Mario", "Luigi's", 8, 3)
    assert order_id == 1
    assert service.get_pending_orders() == 1

    assert service.schedule_delivery(8, 5, 10) == [1]
    assert service.schedule_delivery(8, 5, 10) == []
    assert service.get_pending_orders() == 0

    service.set_rating_for_restaurant("Luigi's", 5)
    assert service.best_restaurant() == "Luigi's"
    assert service.orders_per_category() == {"Italian": 1}
