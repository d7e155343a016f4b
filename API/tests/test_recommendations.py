import pytest

from cost_dashboard.domain.optimization import NotOptimizable, Optimizable
from cost_dashboard.services.recommendations import recommend


def test_completely_idle_is_high_priority_stop():
    rec = recommend(3, 3, "running")
    assert isinstance(rec, Optimizable)
    assert rec.should_optimize
    assert rec.action == "stop"
    assert rec.priority == "high"
    assert "completely idle" in rec.reason
    assert "CPU 3%, Memory 3%" in rec.reason


def test_very_low_usage_is_medium_priority_stop():
    rec = recommend(8, 8, "running")
    assert rec.action == "stop"
    assert rec.priority == "medium"
    assert "Consider stopping or consolidating" in rec.reason


def test_low_usage_is_monitored():
    rec = recommend(12, 12, "running")
    assert rec.action == "monitor"
    assert rec.priority == "low"
    assert "Monitor for potential optimization" in rec.reason


def test_first_matching_band_wins():
    # cpu qualifies for "completely idle" but memory only for "very low"
    rec = recommend(1, 7.5, "running")
    assert rec.priority == "medium"
    assert "CPU 1%, Memory 7.5%" in rec.reason


def test_normal_usage_interpolates_values():
    rec = recommend(42.17, 13, "running")
    assert isinstance(rec, NotOptimizable)
    assert not rec.should_optimize
    assert rec.action == "none"
    assert rec.reason == "Normal resource usage: CPU 42.17%, Memory 13%"


@pytest.mark.parametrize("status", ["exited", "paused", "created", "stopped"])
@pytest.mark.parametrize("cpu,memory", [(0, 0), (3, 3), (50, 50)])
def test_not_running_is_never_optimizable(status, cpu, memory):
    rec = recommend(cpu, memory, status)
    assert rec == NotOptimizable(reason="Container is not running")
    assert rec.action == "none"
    assert not hasattr(rec, "priority")
