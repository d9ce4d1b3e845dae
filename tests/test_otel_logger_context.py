"""Unit tests for OtelLogger.with_context and the structlog context store."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import structlog

from logbridge.foundation.log.values import Boolean, Integer, Lazy, LogEntry, Opaque, String
from logbridge.infra.otel.context import ContextStore, StructlogContextStore, current_context
from logbridge.infra.otel.logger import OtelLogger


class TestWithContext:
    @pytest.mark.unit
    def test_values_visible_during_computation(self) -> None:
        log = OtelLogger("svc")
        seen = log.with_context(
            [
                LogEntry("req_id", String("abc")),
                LogEntry("attempt", Integer(2)),
                LogEntry("lazy", Lazy(lambda: Boolean(True))),
                LogEntry("obj", Opaque(None)),
            ],
            current_context,
        )
        assert seen == {"req_id": "abc", "attempt": "2", "lazy": "True", "obj": "None"}

    @pytest.mark.unit
    def test_context_removed_after_return(self) -> None:
        log = OtelLogger("svc")
        log.with_context([LogEntry("req_id", String("abc"))], lambda: None)
        assert current_context() == {}

    @pytest.mark.unit
    def test_context_removed_after_failure(self) -> None:
        log = OtelLogger("svc")
        err = KeyError("missing")

        def computation() -> None:
            raise err

        with pytest.raises(KeyError) as exc_info:
            log.with_context([LogEntry("req_id", String("abc"))], computation)

        assert exc_info.value is err
        assert current_context() == {}

    @pytest.mark.unit
    def test_nested_inner_shadows_and_outer_restored(self) -> None:
        log = OtelLogger("svc")

        def inner() -> dict[str, object]:
            return current_context()

        def outer() -> tuple[dict[str, object], dict[str, object]]:
            inside = log.with_context([LogEntry("req_id", String("xyz"))], inner)
            return inside, current_context()

        inside, after_inner = log.with_context([LogEntry("req_id", String("abc"))], outer)

        assert inside == {"req_id": "xyz"}
        assert after_inner == {"req_id": "abc"}
        assert current_context() == {}

    @pytest.mark.unit
    def test_outer_integer_restored(self) -> None:
        log = OtelLogger("svc")

        def outer() -> tuple[object, object]:
            during = log.with_context([LogEntry("a", Integer(2))], lambda: current_context()["a"])
            return during, current_context()["a"]

        assert log.with_context([LogEntry("a", Integer(1))], outer) == ("2", "1")

    @pytest.mark.unit
    def test_pre_existing_binding_restored(self) -> None:
        structlog.contextvars.bind_contextvars(req_id="outer", tenant="acme")
        log = OtelLogger("svc")

        log.with_context(
            [LogEntry("req_id", String("inner")), LogEntry("user", String("u1"))],
            lambda: None,
        )

        assert current_context() == {"req_id": "outer", "tenant": "acme"}

    @pytest.mark.unit
    def test_duplicate_keys_last_wins(self) -> None:
        log = OtelLogger("svc")
        seen = log.with_context(
            [LogEntry("k", String("first")), LogEntry("k", String("second"))],
            current_context,
        )
        assert seen == {"k": "second"}
        assert current_context() == {}

    @pytest.mark.unit
    def test_empty_entries_skip_store(self) -> None:
        store = MagicMock()
        log = OtelLogger("svc", context_store=store)

        assert log.with_context([], lambda: 99) == 99
        store.scope.assert_not_called()

    @pytest.mark.unit
    def test_single_scope_for_all_entries(self) -> None:
        store = MagicMock()
        log = OtelLogger("svc", context_store=store)

        log.with_context([LogEntry("a", Integer(1)), LogEntry("b", Integer(2))], lambda: None)

        store.scope.assert_called_once_with({"a": "1", "b": "2"})

    @pytest.mark.unit
    def test_computation_result_returned(self) -> None:
        log = OtelLogger("svc")
        assert log.with_context([LogEntry("a", Integer(1))], lambda: "result") == "result"


class TestStructlogContextStore:
    @pytest.mark.unit
    def test_satisfies_protocol(self) -> None:
        assert isinstance(StructlogContextStore(), ContextStore)

    @pytest.mark.unit
    def test_scope_binds_and_resets(self) -> None:
        store = StructlogContextStore()
        with store.scope({"a": "1"}):
            assert store.snapshot() == {"a": "1"}
        assert store.snapshot() == {}

    @pytest.mark.unit
    def test_snapshot_is_copy(self) -> None:
        store = StructlogContextStore()
        with store.scope({"a": "1"}):
            snap = store.snapshot()
            snap["a"] = "changed"
            assert store.snapshot() == {"a": "1"}


class TestWithContextRawPayloads:
    @pytest.mark.unit
    def test_raw_payloads_rendered(self) -> None:
        payload = object()
        log = OtelLogger("svc")
        seen = log.with_context(
            [
                LogEntry("obj", payload),  # type: ignore[arg-type]
                LogEntry("n", 42),  # type: ignore[arg-type]
                LogEntry("lazy", Lazy(lambda: [1, 2])),  # type: ignore[arg-type,return-value]
            ],
            current_context,
        )
        assert seen == {"obj": str(payload), "n": "42", "lazy": "[1, 2]"}
        assert current_context() == {}

    @pytest.mark.unit
    def test_parameter_name_keys(self) -> None:
        log = OtelLogger("svc")
        seen = log.with_context([LogEntry("self", Integer(1)), LogEntry("kw", Integer(2))], current_context)
        assert seen == {"self": "1", "kw": "2"}
        assert current_context() == {}
