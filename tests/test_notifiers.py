"""Tests for the notifier contract, event values and the non-printing notifiers."""

from unittest.mock import MagicMock

import pytest

from spektree.notifiers import (
    Failed,
    Finished,
    Ignored,
    NotifierSnapshot,
    RecordingNotifier,
    SilentNotifier,
    Started,
    Succeeded,
    TreeNotifier,
    VerboseNotifier,
    dispatch,
)
from spektree.sinks import BufferSink
from spektree.tree import ActionType, Failure, SpecNode

GROUP = SpecNode("g", ActionType.GROUP)
LEAF = SpecNode("t", ActionType.TEST)


class TestContract:
    @pytest.mark.parametrize("notifier", [
        VerboseNotifier(BufferSink()),
        SilentNotifier(),
        RecordingNotifier(),
    ])
    def test_implementations_satisfy_protocol(self, notifier):
        assert isinstance(notifier, TreeNotifier)

    def test_dispatch_routes_each_event(self):
        target = MagicMock()
        failure = Failure("m", "K")

        dispatch(target, Started(LEAF))
        dispatch(target, Succeeded(LEAF))
        dispatch(target, Failed(LEAF, failure))
        dispatch(target, Ignored(LEAF))
        dispatch(target, Finished())

        target.on_start.assert_called_once_with(LEAF)
        target.on_success.assert_called_once_with(LEAF)
        target.on_failure.assert_called_once_with(LEAF, failure)
        target.on_ignore.assert_called_once_with(LEAF)
        target.on_finish.assert_called_once_with()

    def test_dispatch_rejects_unknown_values(self):
        with pytest.raises(TypeError):
            dispatch(MagicMock(), "start")


class TestSilentNotifier:
    def test_counts_like_verbose(self):
        silent = SilentNotifier()
        for n in (GROUP, LEAF):
            silent.on_start(n)
        silent.on_failure(LEAF, Failure("m", "K"))
        silent.on_success(GROUP)
        silent.on_ignore(LEAF)
        silent.on_finish()

        assert silent.snapshot() == NotifierSnapshot(indentation=0, passed=0, failed=1, ignored=1)
        assert silent.summary().total == 2


class TestRecordingNotifier:
    def test_records_and_replays(self):
        rec = RecordingNotifier()
        rec.on_start(LEAF)
        rec.on_success(LEAF)
        rec.on_finish()
        assert rec.events == [Started(LEAF), Succeeded(LEAF), Finished()]

        sink = BufferSink()
        rec.replay(VerboseNotifier(sink))
        assert sink.lines[0] == "t"
        assert "Found 1 tests" in sink.lines

    def test_forwards_to_wrapped_notifier(self):
        silent = SilentNotifier()
        rec = RecordingNotifier(forward=silent)
        rec.on_ignore(LEAF)
        assert silent.snapshot().ignored == 1


class TestSnapshot:
    def test_rejects_negative_values(self):
        with pytest.raises(ValueError):
            NotifierSnapshot(indentation=-1)

    def test_total(self):
        assert NotifierSnapshot(passed=2, failed=1, ignored=4).total == 7
