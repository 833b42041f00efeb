#!filepath: tests/observability/test_instrumentation.py

import time

from loguru import logger

from election.observability.instrumentation import Instrumentation


def test_instrumentation_timer():
    inst = Instrumentation(enabled=True)

    with inst.timer("elections") as span:
        time.sleep(0.01)

    assert span.elapsed >= 0.01
    assert inst.timeline["elections"] == span.elapsed


def test_disabled_timer_still_measures_span():
    inst = Instrumentation(enabled=False)

    with inst.timer("elections") as span:
        time.sleep(0.005)

    assert span.elapsed > 0
    assert inst.timeline == {}


def test_instrumentation_disabled_records_nothing():
    inst = Instrumentation(enabled=False)

    with inst.timer("elections"):
        pass
    inst.record("runs", 10)

    assert inst.timeline == {}
    assert inst.metrics == {}


def test_instrumentation_record():
    inst = Instrumentation(enabled=True)
    inst.record("runs", 123)

    assert inst.metrics["runs"] == 123


def test_report_lists_timeline():
    inst = Instrumentation(enabled=True)
    with inst.timer("phase_X"):
        time.sleep(0.005)

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))
    inst.report("uniform_200")
    logger.remove(sink_id)

    output = "\n".join(captured)
    assert "phase_X" in output
    assert "uniform_200" in output
