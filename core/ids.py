"""
Order identifier generation
"""
import itertools
import random
from datetime import datetime
from threading import Lock
from typing import Callable, Optional

BASE36_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Shared by every generator so ids stay unique for the whole process
_sequence = itertools.count()
_sequence_lock = Lock()


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


class OrderIdGenerator:
    """Builds ids like ORD-<millis>-<sequence><salt>, all base-36.

    The process-wide sequence keeps ids distinct even when many orders
    share one millisecond, whichever generator built them; the salt is two
    random characters.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 clock: Callable[[], datetime] = datetime.now,
                 prefix: str = "ORD-"):
        self.rng = rng or random.Random()
        self.clock = clock
        self.prefix = prefix

    def next_id(self) -> str:
        with _sequence_lock:
            sequence = next(_sequence)
            salt = "".join(self.rng.choice(BASE36_DIGITS) for _ in range(2))
        millis = int(self.clock().timestamp() * 1000)
        return f"{self.prefix}{to_base36(millis)}-{to_base36(sequence)}{salt}"
