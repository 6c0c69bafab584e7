import logging

from pagewise import PaginationInfo
from pagewise.lifecycle.observability import (
    NormalizationEvent,
    _state,
    add_listener,
    capture_normalizations,
    disable_tracing,
    enable_tracing,
    remove_listener,
)


class TestCaptureNormalizations:
    def test_collects_correction(self):
        with capture_normalizations() as events:
            PaginationInfo(10, 99, 5)
        assert len(events) == 1
        assert events[0].field == "page_number"
        assert events[0].requested == 99
        assert events[0].resolved == 1
        assert events[0].reason == "outside 1..2"
        assert events[0].info_class == "PaginationInfo"

    def test_every_correction_is_reported_in_order(self):
        with capture_normalizations() as events:
            PaginationInfo(-3, 0, -1)
        assert [e.field for e in events] == ["number_of_items", "items_per_page", "page_number"]

    def test_valid_arguments_emit_nothing(self):
        with capture_normalizations() as events:
            PaginationInfo(100, 3, 10)
            PaginationInfo(100)
        assert events == []

    def test_only_block_is_captured(self):
        PaginationInfo(10, 0)
        with capture_normalizations() as events:
            PaginationInfo(10, 1, 0)
        PaginationInfo(10, 9)
        assert [e.field for e in events] == ["items_per_page"]

    def test_restores_tracing_state(self):
        with capture_normalizations():
            assert _state.enabled is True
        assert _state.enabled is False
        assert _state.listeners == []

        enable_tracing()
        with capture_normalizations():
            pass
        assert _state.enabled is True

    def test_subclass_name_in_event(self):
        class Custom(PaginationInfo):
            pass

        with capture_normalizations() as events:
            Custom(10, 3)
        assert events[0].info_class == "Custom"


class TestListeners:
    def test_listener_receives_events(self):
        received = []

        def listener(event: NormalizationEvent):
            received.append(event)

        enable_tracing()
        add_listener(listener)
        PaginationInfo(10, 1, 0)
        assert [e.field for e in received] == ["items_per_page"]
        assert received[0].resolved == 20

        remove_listener(listener)
        PaginationInfo(10, 1, 0)
        assert len(received) == 1

    def test_listener_not_called_when_disabled(self):
        received = []
        add_listener(received.append)
        PaginationInfo(10, 7)
        assert received == []

    def test_disable_tracing_drops_listeners(self):
        received = []
        enable_tracing()
        add_listener(received.append)
        disable_tracing()
        enable_tracing()
        PaginationInfo(10, 7)
        assert received == []

    def test_normalization_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pagewise"):
            PaginationInfo(10, 4)
        assert any("Normalized page_number" in record.message for record in caplog.records)
