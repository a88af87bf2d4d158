"""A growable array of patients, served by severity and then arrival time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

INITIAL_CAPACITY = 4
_GROW_THRESHOLD = 0.75
_SHRINK_THRESHOLD = 0.25


@dataclass(frozen=True)
class Patient:
    """A patient waiting for care.

    ``severity`` is a non-negative number; the larger it is, the more urgent
    the case. ``arrival_time`` uses the ``"XXhYY"`` format.
    """

    name: str
    severity: int
    arrival_time: str

    def __post_init__(self) -> None:
        if self.severity < 0:
            raise ValueError("severity must be non-negative")


class NoPatientsError(LookupError):
    """Raised when a patient is requested from an empty array."""


def _urgency_key(patient: Patient) -> tuple[int, str]:
    return (-patient.severity, patient.arrival_time)


def compare_patients(p1: Patient, p2: Patient) -> int:
    """Return -1 if ``p1`` is more urgent, 1 if ``p2`` is, 0 if they tie.

    Higher severity wins; on equal severity the earlier arrival wins.
    """
    k1, k2 = _urgency_key(p1), _urgency_key(p2)
    if k1 < k2:
        return -1
    if k1 > k2:
        return 1
    return 0


class PatientArray:
    """Patients in insertion order, with a capacity that doubles and halves."""

    def __init__(self) -> None:
        self._patients: list[Patient] = []
        self._capacity = INITIAL_CAPACITY

    @property
    def capacity(self) -> int:
        """The current capacity of the array."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._patients)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)

    def __getitem__(self, index):
        return self._patients[index]

    def insert(self, patient: Patient) -> None:
        """Append a patient, doubling capacity once it is 75% full."""
        if not isinstance(patient, Patient):
            raise TypeError("only Patient instances can be inserted")
        self._patients.append(patient)
        if len(self._patients) >= _GROW_THRESHOLD * self._capacity:
            self._capacity *= 2

    def find_next(self) -> int:
        """Return the index of the most urgent patient (the first on ties)."""
        if not self._patients:
            raise NoPatientsError("there are no patients")
        return min(
            range(len(self._patients)),
            key=lambda i: _urgency_key(self._patients[i]),
        )

    def remove(self, index: int) -> None:
        """Remove the patient at ``index``, halving capacity when 25% full.

        The capacity never drops below the initial capacity.
        """
        if not 0 <= index < len(self._patients):
            raise IndexError("invalid patient index")
        del self._patients[index]
        if (
            len(self._patients) <= _SHRINK_THRESHOLD * self._capacity
            and self._capacity >= INITIAL_CAPACITY
        ):
            self._capacity //= 2
        self._capacity = max(self._capacity, INITIAL_CAPACITY)

    def pop_next(self) -> Patient:
        """Remove and return the most urgent patient."""
        if not self._patients:
            raise NoPatientsError("there are no patients to attend")
        index = self.find_next()
        patient = self._patients[index]
        self.remove(index)
        return patient

    def describe(self) -> str:
        """Return a text report of capacity, size and patients."""
        lines = [
            f"Capacity: {self._capacity}",
            f"Current size: {len(self._patients)}",
            "",
            "Patients:",
        ]
        lines.extend(
            f"*  {p.arrival_time} | {p.severity} | {p.name}" for p in self._patients
        )
        return "\n".join(lines)