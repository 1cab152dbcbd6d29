from gridgames.events.bus import EVENT_BOARD_CHANGED, EVENT_TICK


def test_handlers_receive_keyword_payload(event_bus):
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    event_bus.subscribe(EVENT_BOARD_CHANGED, handler)
    event_bus.emit(EVENT_BOARD_CHANGED, reason="load")
    assert received == {"reason": "load"}


def test_every_subscriber_receives_the_event(event_bus):
    calls = []
    event_bus.subscribe(EVENT_TICK, lambda sender, **kw: calls.append(("first", kw["dt"])))
    event_bus.subscribe(EVENT_TICK, lambda sender, **kw: calls.append(("second", kw["dt"])))
    event_bus.emit(EVENT_TICK, dt=0.5)
    assert sorted(calls) == [("first", 0.5), ("second", 0.5)]


def test_emit_without_subscribers_is_noop(event_bus):
    event_bus.emit("nobody_listens", value=1)
