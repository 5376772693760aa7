"""Fake Tk root so timer and clock can be driven without a display."""

import pytest


class FakeRoot:
    """Minimal after/after_cancel queue; advance() fires due jobs in order."""

    def __init__(self):
        self.now_ms = 0
        self._jobs = {}
        self._next_id = 0
        self.cancelled = []
        self.bells = 0

    def after(self, ms, func):
        self._next_id += 1
        job_id = f"after#{self._next_id}"
        self._jobs[job_id] = (self.now_ms + ms, self._next_id, func)
        return job_id

    def after_cancel(self, job_id):
        self.cancelled.append(job_id)
        self._jobs.pop(job_id, None)

    def bell(self):
        self.bells += 1

    @property
    def pending(self):
        return len(self._jobs)

    def advance(self, ms):
        target = self.now_ms + ms
        while True:
            due = [(t, seq, jid) for jid, (t, seq, _f) in self._jobs.items() if t <= target]
            if not due:
                break
            t, _seq, jid = min(due)
            _t, _s, func = self._jobs.pop(jid)
            self.now_ms = t
            func()
        self.now_ms = target

    def advance_seconds(self, n):
        self.advance(n * 1000)


@pytest.fixture
def root():
    return FakeRoot()
