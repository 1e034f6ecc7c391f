"""Tests for the line-stream capture source."""

import io

import pytest

from scanreg.application.capture_session import CaptureSession
from scanreg.domain.exceptions import AcquisitionFailure
from scanreg.domain.model.capture import CaptureConfig
from scanreg.infrastructure.capture.stream_capture_source import (
    KEYBOARD_WEDGE_FORMAT,
    StreamCaptureSource,
)


def _session(text: str):
    source = StreamCaptureSource(io.StringIO(text))
    events = []
    session = CaptureSession(source, on_identifier=events.append)
    return source, session, events


class TestStreamCaptureSource:

    def test_enumerates_single_source(self):
        source = StreamCaptureSource(io.StringIO(""))
        [info] = source.enumerate_sources()
        assert info.source_id == "stdin"

    def test_closed_stream_has_no_sources(self):
        stream = io.StringIO("")
        stream.close()
        assert StreamCaptureSource(stream).enumerate_sources() == []

    def test_lines_become_identifiers(self):
        source, session, events = _session("A1\nB2\r\n")
        session.start()

        while source.poll():
            pass

        assert [e.text for e in events] == ["A1", "B2"]
        assert all(e.format == KEYBOARD_WEDGE_FORMAT for e in events)

    def test_blank_lines_are_noise(self):
        source, session, events = _session("\n   \nA1\n\x1b[A\n")
        session.start()

        while source.poll():
            pass

        assert [e.text for e in events] == ["A1"]
        assert session.noise_count == 3

    def test_poll_before_start_reads_nothing(self):
        stream = io.StringIO("A1\n")
        source = StreamCaptureSource(stream)
        assert source.poll() is False
        assert stream.tell() == 0

    def test_poll_after_stop_reads_nothing(self):
        source, session, events = _session("A1\nB2\n")
        session.start()
        source.poll()
        session.stop()

        assert source.poll() is False
        assert [e.text for e in events] == ["A1"]

    def test_unknown_source_id_is_rejected(self):
        source = StreamCaptureSource(io.StringIO(""))
        with pytest.raises(FileNotFoundError):
            source.start("camera-9", CaptureConfig(), lambda t, f: None, lambda m: None)

    def test_second_start_reports_busy(self):
        source = StreamCaptureSource(io.StringIO(""))
        first = CaptureSession(source)
        second = CaptureSession(source)
        assert first.start() is True
        assert second.start() is False
        assert second.last_failure.kind is AcquisitionFailure.SOURCE_BUSY
