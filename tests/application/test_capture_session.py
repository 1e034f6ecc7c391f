"""Tests for the CaptureSession state machine, driven by a fake collaborator."""

from scanreg.application.capture_session import CaptureSession
from scanreg.domain.exceptions import AcquisitionError, AcquisitionFailure
from scanreg.domain.model.capture import CaptureState, SourceInfo
from tests.fakes import FakeCaptureSource, FakeClock


class _Recorder:

    def __init__(self) -> None:
        self.events = []
        self.results = []

    def on_identifier(self, event):
        self.events.append(event)

    def on_result(self, failure):
        self.results.append(failure)


def _session(source: FakeCaptureSource, **kwargs) -> tuple[CaptureSession, _Recorder]:
    recorder = _Recorder()
    session = CaptureSession(
        source,
        on_identifier=recorder.on_identifier,
        on_acquisition_result=recorder.on_result,
        clock=FakeClock(),
        **kwargs,
    )
    return session, recorder


class TestStart:

    def test_start_activates_session(self):
        source = FakeCaptureSource()
        session, recorder = _session(source)

        assert session.start() is True
        assert session.state is CaptureState.ACTIVE
        assert source.started_with == "cam-0"
        assert recorder.results == [None]

    def test_start_uses_preferred_source(self):
        source = FakeCaptureSource(
            sources=[SourceInfo("f", "Front Camera"), SourceInfo("b", "Back Camera")]
        )
        session, _ = _session(source)
        session.start()
        assert source.started_with == "b"
        assert session.active_source.label == "Back Camera"

    def test_start_passes_capture_config(self):
        source = FakeCaptureSource()
        session, _ = _session(source)
        session.start()
        assert source.config.fps == 10
        assert source.config.facing_mode == "environment"
        assert source.config.width.ideal == 1920

    def test_no_sources_stays_idle(self):
        source = FakeCaptureSource(sources=[])
        session, recorder = _session(source)

        assert session.start() is False
        assert session.state is CaptureState.IDLE
        assert session.last_failure.kind is AcquisitionFailure.NO_SOURCE
        assert recorder.results == [session.last_failure]
        assert source.start_calls == 0

    def test_collaborator_failure_is_normalized(self):
        source = FakeCaptureSource(start_error=PermissionError("denied by user"))
        session, recorder = _session(source)

        assert session.start() is False
        assert session.state is CaptureState.IDLE
        failure = recorder.results[-1]
        assert isinstance(failure, AcquisitionError)
        assert failure.kind is AcquisitionFailure.PERMISSION_DENIED
        assert failure.detail == "denied by user"

    def test_start_when_active_is_noop(self):
        source = FakeCaptureSource()
        session, recorder = _session(source)
        session.start()

        assert session.start() is True
        assert source.start_calls == 1
        assert recorder.results == [None]

    def test_successful_start_clears_previous_failure(self):
        source = FakeCaptureSource(start_error=RuntimeError("boom"))
        session, _ = _session(source)
        session.start()
        assert session.last_failure is not None

        source.start_error = None
        session.start()
        assert session.last_failure is None


class TestStop:

    def test_stop_returns_to_idle(self):
        source = FakeCaptureSource()
        session, _ = _session(source)
        session.start()

        assert session.stop() is True
        assert session.state is CaptureState.IDLE
        assert source.stop_calls == 1

    def test_failed_stop_still_goes_idle(self):
        source = FakeCaptureSource(stop_error=RuntimeError("device hung"))
        session, _ = _session(source)
        session.start()

        assert session.stop() is False
        assert session.state is CaptureState.IDLE
        assert session.active_source is None

    def test_stop_when_idle_is_noop(self):
        source = FakeCaptureSource()
        session, _ = _session(source)
        assert session.stop() is False
        assert source.stop_calls == 0

    def test_can_restart_after_stop(self):
        source = FakeCaptureSource()
        session, _ = _session(source)
        session.start()
        session.stop()
        assert session.start() is True
        assert source.start_calls == 2


class TestEvents:

    def test_identifier_forwarded_unmodified(self):
        source = FakeCaptureSource()
        session, recorder = _session(source)
        session.start()

        source.emit(" 7501055363056 ", "EAN_13")

        assert len(recorder.events) == 1
        assert recorder.events[0].text == " 7501055363056 "
        assert recorder.events[0].format == "EAN_13"
        assert session.state is CaptureState.ACTIVE

    def test_noise_is_suppressed(self):
        source = FakeCaptureSource()
        session, recorder = _session(source)
        session.start()

        for _ in range(100):
            source.emit_noise()

        assert recorder.events == []
        assert recorder.results == [None]
        assert session.state is CaptureState.ACTIVE
        assert session.noise_count == 100

    def test_event_after_stop_is_dropped(self):
        source = FakeCaptureSource()
        session, recorder = _session(source)
        session.start()
        session.stop()

        source.emit("A1")

        assert recorder.events == []
        assert session.scan_count == 0

    def test_scan_count_and_history(self):
        source = FakeCaptureSource()
        session, _ = _session(source, history_size=3)
        session.start()

        for code in ["A1", "B2", "C3", "D4"]:
            source.emit(code, "CODE_128")

        assert session.scan_count == 4
        assert [e.text for e in session.history] == ["D4", "C3", "B2"]
        assert [e.sequence for e in session.history] == [4, 3, 2]

    def test_missing_format_is_reported_as_unknown(self):
        source = FakeCaptureSource()
        session, recorder = _session(source)
        session.start()
        source.emit("A1", "")
        assert recorder.events[0].format == "UNKNOWN"


class TestAcquisitionLost:

    def test_lost_source_goes_idle_and_reports(self):
        source = FakeCaptureSource()
        session, recorder = _session(source)
        session.start()

        session.acquisition_lost("USB unplugged")

        assert session.state is CaptureState.IDLE
        assert recorder.results[-1].kind is AcquisitionFailure.LOST
        assert recorder.results[-1].detail == "USB unplugged"

    def test_lost_when_idle_is_ignored(self):
        source = FakeCaptureSource()
        session, recorder = _session(source)
        session.acquisition_lost("late")
        assert recorder.results == []
