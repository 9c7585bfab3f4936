import csv

import pytest
import numpy as np
from launch_sim import main
from launch_sim.config import create_test_config

from designs import make_basic_rocket, make_cockpit_rocket


def test_run_flight_completes(config):
    body, log, reason = main.run_flight(make_basic_rocket(), angle=0.0, speed=10.0,
                                        config=config)
    assert reason == "Out of bounds"
    assert 0 < len(log) < config.max_frames
    assert body.is_out_of_bounds()
    assert log.separation_frame is None
    # Every column has one entry per frame
    assert len(log.position_y) == len(log.cockpit_x) == len(log.mass) == len(log)
    assert log.frame == list(range(len(log)))


def test_frame_limit():
    config = create_test_config(max_frames=5)
    body, log, reason = main.run_flight(make_basic_rocket(), angle=-np.pi / 2,
                                        speed=30.0, config=config)
    assert reason == "Frame limit reached"
    assert len(log) == 5
    assert body.stats.max_altitude > 0
    assert np.all(np.isnan(log.cockpit_x))


def test_drag_logged_while_moving(config):
    _, log, _ = main.run_flight(make_basic_rocket(), angle=0.0, speed=10.0, config=config)
    assert all(d > 0 for d in log.drag_magnitude)
    assert all(g == config.gravity for g in log.gravity)


def test_aerodynamics_can_be_disabled():
    config = create_test_config(max_frames=10, enable_aerodynamics=False)
    _, log, _ = main.run_flight(make_basic_rocket(), config=config)
    assert all(d == 0.0 for d in log.drag_magnitude)
    assert all(t == 0.0 for t in log.stability_torque)


def test_separation_switches_gravity_and_tracks_cockpit(config):
    body, log, reason = main.run_flight(make_cockpit_rocket(), angle=0.0, speed=10.0,
                                        config=config, separate_at_frame=2, charge=100.0)
    assert reason == "Cockpit out of bounds"
    assert log.separation_frame == 2
    assert log.separation is not None
    assert log.gravity[:2] == [config.gravity] * 2
    assert log.gravity[2] == config.post_separation_gravity
    assert np.isnan(log.cockpit_x[1])
    assert np.isfinite(log.cockpit_x[2])
    assert not body.has_cockpit()
    assert log.mass[0] == pytest.approx(5.0)
    assert log.mass[-1] == pytest.approx(3.5)


def test_separation_too_weak_is_ignored(config):
    body, log, _ = main.run_flight(make_cockpit_rocket(), angle=0.0, speed=10.0,
                                   config=config, separate_at_frame=2, charge=10.0)
    assert log.separation_frame is None
    assert body.has_cockpit()


def test_verbose_prints_table(capsys):
    config = create_test_config(max_frames=3)
    main.run_flight(make_basic_rocket(), config=config, verbose=True)
    out = capsys.readouterr().out
    assert "ROCKET FLIGHT" in out
    assert "FLIGHT COMPLETED" in out


def test_to_csv(tmp_path):
    config = create_test_config(max_frames=4)
    _, log, _ = main.run_flight(make_basic_rocket(), config=config)
    path = tmp_path / "out" / "flight.csv"
    log.to_csv(str(path))

    with open(path, newline='') as fh:
        rows = list(csv.reader(fh))
    assert rows[0][:3] == ['frame', 'time', 'position_x']
    assert len(rows) == 5
    assert rows[1][0] == '0'


def test_summarize_flight(config):
    body, log, reason = main.run_flight(make_cockpit_rocket(), angle=-np.pi / 4,
                                        config=config, separate_at_frame=0)
    summary = main.summarize_flight(body, log, reason)
    assert summary['frames'] == len(log)
    assert summary['reason'] == reason
    assert summary['separated'] is True
    assert summary['max_speed_kmh'] == pytest.approx(summary['max_speed'] * 3.6)
    assert summary['max_altitude'] > 0
