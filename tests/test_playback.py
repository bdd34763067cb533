"""Tests for playback.py."""

from playback import MIN_INTERVAL_MS, SPEED_PRESETS, Playback


class TestLifecycle:
    def test_defaults(self):
        pb = Playback(total_steps=10)
        assert pb.step == 0
        assert pb.running is False
        assert pb.speed_ms == SPEED_PRESETS["medium"] == 400

    def test_start_rewinds(self):
        pb = Playback(total_steps=10, step=7)
        pb.start()
        assert pb.step == 0
        assert pb.running is True

    def test_start_empty_trace_does_not_run(self):
        pb = Playback(total_steps=0)
        pb.start()
        assert pb.running is False
        assert pb.finished is True

    def test_pause_resume(self):
        pb = Playback(total_steps=10)
        pb.start()
        pb.pause()
        assert pb.running is False
        assert pb.tick(5000) == range(0, 0)
        pb.resume()
        assert pb.running is True

    def test_resume_when_finished_is_noop(self):
        pb = Playback(total_steps=3)
        pb.seek(3)
        pb.resume()
        assert pb.running is False


class TestTick:
    def test_one_step_per_interval(self):
        pb = Playback(total_steps=10, speed_ms=400)
        pb.start()
        assert pb.tick(400) == range(0, 1)
        assert pb.tick(399) == range(1, 1)
        assert pb.tick(1) == range(1, 2)

    def test_carries_remainder(self):
        pb = Playback(total_steps=10, speed_ms=400)
        pb.start()
        assert pb.tick(1000) == range(0, 2)
        assert pb.tick(200) == range(2, 3)

    def test_never_passes_end(self):
        pb = Playback(total_steps=3, speed_ms=100)
        pb.start()
        assert pb.tick(10_000) == range(0, 3)
        assert pb.step == 3
        assert pb.running is False
        assert pb.finished is True

    def test_reveals_every_index(self):
        pb = Playback(total_steps=20, speed_ms=50)
        pb.start()
        seen = []
        for elapsed in [70, 10, 180, 0, 500, 1000]:
            seen.extend(pb.tick(elapsed))
        assert seen == list(range(20))

    def test_minimum_interval(self):
        pb = Playback(total_steps=10)
        pb.set_speed(10)
        assert pb.interval_ms == MIN_INTERVAL_MS
        pb.start()
        assert pb.tick(50) == range(0, 1)

    def test_speed_change_mid_play(self):
        pb = Playback(total_steps=10, speed_ms=800)
        pb.start()
        assert pb.tick(700) == range(0, 0)
        pb.set_speed(SPEED_PRESETS["fast"])
        assert pb.tick(0) == range(0, 0)
        assert pb.tick(50) == range(0, 1)
        assert pb.tick(50) == range(1, 2)


class TestManual:
    def test_advance(self):
        pb = Playback(total_steps=5)
        assert pb.advance() == range(0, 1)
        assert pb.advance(3) == range(1, 4)
        assert pb.advance(10) == range(4, 5)
        assert pb.finished

    def test_advance_negative_is_noop(self):
        pb = Playback(total_steps=5)
        assert pb.advance(-2) == range(0, 0)

    def test_seek_clamps(self):
        pb = Playback(total_steps=5)
        pb.seek(-3)
        assert pb.step == 0
        pb.seek(99)
        assert pb.step == 5

    def test_seek_forward_returns_skipped_indices(self):
        pb = Playback(total_steps=10)
        assert pb.seek(4) == range(0, 4)
        assert pb.seek(99) == range(4, 10)
        assert pb.finished

    def test_seek_backward_returns_nothing(self):
        pb = Playback(total_steps=10, step=6)
        assert len(pb.seek(2)) == 0
        assert pb.step == 2

    def test_seek_then_tick_covers_every_index(self):
        pb = Playback(total_steps=8, speed_ms=100)
        pb.start()
        seen = list(pb.tick(250))
        seen.extend(pb.seek(5))
        seen.extend(pb.tick(1000))
        assert seen == list(range(8))
