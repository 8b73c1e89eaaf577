from catalyst.timing import MAX_DELTA, FrameClock


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_fresh_clock_reports_zero():
    clock = FrameClock(FakeClock())
    clock.start()
    assert clock.delta_time == 0.0
    assert clock.app_time == 0.0
    assert clock.fps == 0


def test_delta_time_follows_clock():
    fake = FakeClock(1.0)
    clock = FrameClock(fake)
    clock.start()
    fake.now = 1.0625
    assert clock.tick() is True
    assert clock.delta_time == 0.0625
    assert clock.app_time == 1.0625


def test_delta_time_is_capped():
    fake = FakeClock()
    clock = FrameClock(fake)
    clock.start()
    fake.now = 5.0
    clock.tick()
    assert clock.delta_time == MAX_DELTA


def test_fps_updates_after_one_second():
    fake = FakeClock()
    clock = FrameClock(fake)
    clock.start()
    for step in range(1, 12):
        fake.now = step * 0.09375
        clock.tick()
        if step < 11:
            assert clock.fps == 0
    assert clock.fps == 11


def test_fps_counts_frames_with_exact_steps():
    fake = FakeClock()
    clock = FrameClock(fake)
    clock.start()
    for step in range(1, 17):
        fake.now = step * 0.0625
        clock.tick()
    assert clock.fps == 16


def test_iconified_frame_not_counted():
    fake = FakeClock()
    clock = FrameClock(fake)
    clock.start()
    fake.now = 0.0625
    assert clock.tick(iconified=True) is False
    assert clock.delta_time == 0.0625
    for step in range(2, 18):
        fake.now = step * 0.0625
        clock.tick()
    assert clock.fps == 16