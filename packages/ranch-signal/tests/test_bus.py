"""Tests for the queued signal bus."""
from __future__ import annotations

from ranch import Engine
from ranch_signal import (
    INTERACTION_ENDED,
    PET_ADDED,
    PET_REMOVED,
    InteractionEnded,
    PetAdded,
    PetRemoved,
    SignalBus,
    make_signal_system,
)
from ranch_social import InteractionType


def test_publish_is_queued_until_flush():
    bus = SignalBus()
    received = []
    bus.subscribe(PET_ADDED, lambda name, data: received.append(data))
    bus.publish(PET_ADDED, pet_id="a")
    assert received == []
    assert bus.pending == 1
    assert bus.flush() == 1
    assert received == [{"pet_id": "a"}]
    assert bus.pending == 0


def test_delivery_in_publish_order():
    bus = SignalBus()
    received = []
    bus.subscribe(PET_ADDED, lambda name, data: received.append((name, data["pet_id"])))
    bus.subscribe(PET_REMOVED, lambda name, data: received.append((name, data["pet_id"])))
    bus.publish(PET_ADDED, pet_id="a")
    bus.publish(PET_REMOVED, pet_id="a")
    bus.publish(PET_ADDED, pet_id="b")
    bus.flush()
    assert received == [(PET_ADDED, "a"), (PET_REMOVED, "a"), (PET_ADDED, "b")]


def test_multiple_handlers():
    bus = SignalBus()
    calls = []
    bus.subscribe(PET_ADDED, lambda name, data: calls.append(1))
    bus.subscribe(PET_ADDED, lambda name, data: calls.append(2))
    bus.publish(PET_ADDED, pet_id="a")
    bus.flush()
    assert calls == [1, 2]


def test_unsubscribe():
    bus = SignalBus()
    calls = []
    handler = bus.subscribe(PET_ADDED, lambda name, data: calls.append(data))
    bus.unsubscribe(PET_ADDED, handler)
    bus.unsubscribe(PET_ADDED, handler)
    bus.unsubscribe(PET_REMOVED, handler)
    bus.publish(PET_ADDED, pet_id="a")
    bus.flush()
    assert calls == []


def test_signals_without_subscribers_are_dropped():
    bus = SignalBus()
    bus.publish("nobody_listens", value=1)
    assert bus.flush() == 1
    assert bus.pending == 0


def test_handler_publish_waits_for_next_flush():
    bus = SignalBus()
    received = []

    def relay(name, data):
        received.append(name)
        bus.publish(PET_REMOVED, pet_id=data["pet_id"])

    bus.subscribe(PET_ADDED, relay)
    bus.subscribe(PET_REMOVED, lambda name, data: received.append(name))
    bus.publish(PET_ADDED, pet_id="a")
    bus.flush()
    assert received == [PET_ADDED]
    bus.flush()
    assert received == [PET_ADDED, PET_REMOVED]


def test_clear_drops_queue():
    bus = SignalBus()
    bus.publish(PET_ADDED, pet_id="a")
    bus.clear()
    assert bus.flush() == 0


def test_signal_system_flushes_each_tick():
    engine = Engine()
    bus = SignalBus()
    received = []
    bus.subscribe(PET_ADDED, lambda name, data: received.append(engine.clock.tick_number))
    engine.add_system(make_signal_system(bus))
    bus.publish(PET_ADDED, pet_id="a")
    engine.step(0.016)
    assert received == [1]


# --- Typed records ---

def test_emit_delivers_fields_as_data():
    bus = SignalBus()
    received = []
    bus.subscribe(INTERACTION_ENDED, lambda name, data: received.append((name, data)))
    bus.emit(InteractionEnded(("a", "b"), InteractionType.PLAY, "removed"))
    bus.flush()
    assert received == [
        (INTERACTION_ENDED, {"pair": ("a", "b"), "kind": InteractionType.PLAY, "reason": "removed"}),
    ]


def test_on_delivers_typed_records():
    bus = SignalBus()
    received = []
    bus.on(PetAdded, received.append)
    bus.emit(PetAdded("a"))
    bus.publish(PET_ADDED, pet_id="b")
    bus.emit(PetRemoved("a"))
    bus.flush()
    assert received == [PetAdded("a"), PetAdded("b")]


def test_on_returns_handler_for_unsubscribe():
    bus = SignalBus()
    received = []
    handler = bus.on(PetRemoved, received.append)
    bus.unsubscribe(PetRemoved.signal, handler)
    bus.emit(PetRemoved("a"))
    bus.flush()
    assert received == []


def test_record_signal_names():
    assert PetAdded.signal == PET_ADDED
    assert PetRemoved.signal == PET_REMOVED
    assert InteractionEnded.signal == INTERACTION_ENDED
