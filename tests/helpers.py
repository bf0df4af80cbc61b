"""
Shared fakes for deterministic tests
"""
from datetime import datetime, timedelta
from decimal import Decimal

from models.menu import MenuItem, MenuCategory


class FakeClock:
    """Clock that only moves when told to"""

    def __init__(self, now=None):
        self.now = now or datetime(2024, 5, 17, 12, 0, 0)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)
        return self.now


class ScheduledCall:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        # Runs the callback even if cancelled, like a timer that already started
        self.fired = True
        self.callback()


class ManualScheduler:
    """Scheduler whose callbacks run only when a test fires them"""

    def __init__(self):
        self.calls = []

    def schedule(self, delay, callback):
        call = ScheduledCall(delay, callback)
        self.calls.append(call)
        return call

    def pending(self):
        return [call for call in self.calls if not call.cancelled and not call.fired]

    def fire_next(self):
        pending = self.pending()
        if not pending:
            raise AssertionError("no pending timers")
        pending[0].fire()


def make_item(item_id="main-1", price="10.00", category=MenuCategory.MAINS,
              is_available=True, name=None):
    return MenuItem(
        id=item_id,
        name=name or item_id.title(),
        description="",
        price=Decimal(price),
        category=category,
        is_available=is_available
    )
