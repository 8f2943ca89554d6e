"""Per-field request ordering for awaitable validation.

Every change request for a field takes a ticket when it is made. A
result may be applied only if no newer ticket for that field has been
applied yet, so the last-submitted value wins whatever order the
validations finish in::

    ticket = order.issue("age")
    result = await validate(...)
    if order.accept("age", ticket):
        state = state.apply(result)
"""

import logging

logger = logging.getLogger("loginkit.adapters")


class RequestOrder:
    """Ticket counters per field: issued requests and the newest applied one."""

    __slots__ = ("_applied", "_issued")

    def __init__(self) -> None:
        self._issued: dict[str, int] = {}
        self._applied: dict[str, int] = {}

    def issue(self, field: str) -> int:
        ticket = self._issued.get(field, 0) + 1
        self._issued[field] = ticket
        return ticket

    def accept(self, field: str, ticket: int) -> bool:
        """Record *ticket* as applied, or return False if it is stale."""
        if ticket <= self._applied.get(field, 0):
            logger.debug("discarding stale result for %s (request %d)", field, ticket)
            return False
        self._applied[field] = ticket
        return True

    def drop_pending(self) -> None:
        """Make every request issued so far stale."""
        self._applied = dict(self._issued)
