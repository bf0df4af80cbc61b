"""
Domain errors for the ordering core

Every error here is a rejected operation: no state was changed and the
caller decides how to report it.
"""


class InvalidOperation(ValueError):
    """Base class for operations the core refuses to apply"""


class EmptyCartError(InvalidOperation):
    pass


class ItemUnavailableError(InvalidOperation):
    pass


class UnknownItemError(InvalidOperation):
    pass


class OrderNotFoundError(InvalidOperation):
    pass


class DuplicateOrderError(InvalidOperation):
    pass


class IllegalTransitionError(InvalidOperation):
    pass
