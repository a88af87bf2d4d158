"""A two-line waiting queue: elderly clients first, but never more than two in a row."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from itertools import chain


class Priority(IntEnum):
    """Service priority of a client."""

    GENERAL = 0
    ELDERLY = 1


_LABELS = {Priority.GENERAL: "Geral", Priority.ELDERLY: "Idoso"}

# How many elderly clients are served before the general line gets a turn.
_ELDERLY_STREAK = 2


@dataclass(frozen=True)
class Client:
    """A client waiting to be served; names are expected to be unique."""

    name: str
    priority: Priority = Priority.GENERAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", Priority(self.priority))

    def describe(self) -> str:
        """Return the client's name and priority as an indented report."""
        return f"  * Nome: {self.name}\n  * Prioridade: {_LABELS[self.priority]}"


class EmptyQueueError(LookupError):
    """Raised when a client is requested from an empty queue."""


class ClientNotFoundError(LookupError):
    """Raised when no client with the given name is waiting."""


class WaitingQueue:
    """Elderly and general lines served with a bounded elderly preference.

    While fewer than two elderly clients have been served in a row, the
    elderly line goes first; after that, the next general client is served
    and the streak starts again.
    """

    def __init__(self) -> None:
        self._elderly: deque[Client] = deque()
        self._general: deque[Client] = deque()
        self._elderly_attended = 0

    def __len__(self) -> int:
        return len(self._elderly) + len(self._general)

    def _line_for(self, client: Client) -> deque[Client]:
        return self._elderly if client.priority is Priority.ELDERLY else self._general

    def _next_line(self) -> deque[Client]:
        if not self:
            raise EmptyQueueError("the queue is empty")
        if self._elderly_attended < _ELDERLY_STREAK:
            return self._elderly if self._elderly else self._general
        return self._general if self._general else self._elderly

    def enqueue(self, client: Client) -> None:
        """Add a client to the end of the line matching its priority."""
        if not isinstance(client, Client):
            raise TypeError("only Client instances can be enqueued")
        self._line_for(client).append(client)

    def peek(self) -> Client:
        """Return the next client to be served without changing the queue."""
        return self._next_line()[0]

    def dequeue(self) -> Client:
        """Remove and return the next client to be served."""
        line = self._next_line()
        client = line.popleft()
        if line is self._elderly:
            if self._elderly_attended < _ELDERLY_STREAK:
                self._elderly_attended += 1
        elif self._elderly_attended >= _ELDERLY_STREAK:
            self._elderly_attended = 0
        return client

    def remove(self, name: str) -> Client:
        """Remove and return the client called ``name`` from whichever line holds it."""
        if not self:
            raise EmptyQueueError("the queue is empty")
        for line in (self._elderly, self._general):
            for client in line:
                if client.name == name:
                    line.remove(client)
                    return client
        raise ClientNotFoundError(name)

    def order(self) -> list[Client]:
        """Return the order in which the waiting clients would be served.

        The simulation starts from a fresh elderly streak and leaves this
        queue untouched.
        """
        copy = WaitingQueue()
        for client in chain(self._elderly, self._general):
            copy.enqueue(client)
        return [copy.dequeue() for _ in range(len(copy))]

    def clear(self) -> None:
        """Drop every waiting client and reset the elderly streak."""
        self._elderly.clear()
        self._general.clear()
        self._elderly_attended = 0