from mapeditor.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)
        received["sender"] = sender

    bus.subscribe("test", handler)
    delivered = bus.emit("test", value=42, msg="hello")

    assert delivered == 1
    assert received["value"] == 42
    assert received["msg"] == "hello"
    assert received["sender"] is bus


def test_event_bus_emit_without_subscribers_is_noop(caplog):
    bus = EventBus()

    with caplog.at_level("DEBUG", logger="mapeditor.events.bus"):
        delivered = bus.emit("nobody_listens", value=1)

    assert delivered == 0
    assert "nobody_listens" in caplog.text


def test_event_bus_delivers_to_all_receivers_in_order():
    bus = EventBus()
    order = []
    bus.subscribe("test", lambda sender, **kwargs: order.append("first"))
    bus.subscribe("test", lambda sender, **kwargs: order.append("second"))

    assert bus.emit("test") == 2
    assert order == ["first", "second"]
