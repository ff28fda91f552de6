import unittest

from core.frame_loop import FrameLoop


class ManualScheduler:
    """Collects scheduled callbacks; run them one frame at a time."""

    def __init__(self):
        self.queue = []

    def __call__(self, callback):
        self.queue.append(callback)

    def run(self, frames=1):
        for _ in range(frames):
            self.queue.pop(0)()


class TestFrameLoop(unittest.TestCase):
    """Tests for the self-rescheduling frame loop."""

    def setUp(self):
        self.scheduler = ManualScheduler()
        self.steps = []
        self.loop = FrameLoop(self.scheduler, lambda: self.steps.append(len(self.steps)))

    def test_start_schedules_one_tick(self):
        """start() queues the first tick without running it."""
        self.loop.start()
        self.assertTrue(self.loop.running)
        self.assertEqual(len(self.scheduler.queue), 1)
        self.assertEqual(self.steps, [])

    def test_each_tick_reschedules(self):
        """Every tick runs the step once and queues the next tick."""
        self.loop.start()
        self.scheduler.run(5)
        self.assertEqual(self.steps, [0, 1, 2, 3, 4])
        self.assertEqual(self.loop.frames, 5)
        self.assertEqual(len(self.scheduler.queue), 1)

    def test_start_twice_does_not_double_schedule(self):
        """A second start() does not queue a second tick."""
        self.loop.start()
        self.loop.start()
        self.assertEqual(len(self.scheduler.queue), 1)

    def test_stop_turns_queued_tick_into_noop(self):
        """A tick queued before stop() neither steps nor reschedules."""
        self.loop.start()
        self.scheduler.run(2)
        self.loop.stop()
        self.scheduler.run(1)
        self.assertEqual(self.loop.frames, 2)
        self.assertEqual(self.scheduler.queue, [])
        self.assertFalse(self.loop.running)

    def test_stop_from_inside_step(self):
        """Stopping inside the step ends the loop after that frame."""
        loop = FrameLoop(self.scheduler, lambda: loop.stop())
        loop.start()
        self.scheduler.run(1)
        self.assertEqual(loop.frames, 1)
        self.assertEqual(self.scheduler.queue, [])


if __name__ == "__main__":
    unittest.main()
