import pytest

from clinicqueue.patient_array import (
    NoPatientsError,
    Patient,
    PatientArray,
    compare_patients,
)


def _sample():
    return [
        Patient("Alice", 3, "10h30"),
        Patient("Bob", 5, "09h15"),
        Patient("Charlie", 5, "08h45"),
        Patient("David", 2, "11h00"),
        Patient("Eve", 4, "07h30"),
    ]


def _filled(patients=None):
    pa = PatientArray()
    for p in patients if patients is not None else _sample():
        pa.insert(p)
    return pa


def test_new_array_is_empty_with_initial_capacity():
    pa = PatientArray()
    assert len(pa) == 0
    assert pa.capacity == 4
    assert list(pa) == []


def test_insert_preserves_order():
    patients = _sample()
    pa = _filled(patients)
    assert list(pa) == patients
    assert pa[0] == patients[0]
    assert pa[-1] == patients[-1]


def test_capacity_doubles_at_three_quarters():
    pa = _filled(_sample()[:2])
    assert pa.capacity == 4
    pa.insert(Patient("X", 1, "12h00"))
    assert pa.capacity == 8


def test_capacity_stays_above_load_factor():
    pa = PatientArray()
    for i in range(40):
        previous = pa.capacity
        pa.insert(Patient(f"P{i}", i % 7, f"{i % 24:02d}h00"))
        assert len(pa) < 0.75 * pa.capacity
        assert pa.capacity in (previous, previous * 2)


def test_insert_rejects_non_patient():
    pa = PatientArray()
    with pytest.raises(TypeError):
        pa.insert(("Alice", 3, "10h30"))


def test_negative_severity_rejected():
    with pytest.raises(ValueError):
        Patient("Alice", -1, "10h30")


@pytest.mark.parametrize(
    "p1, p2, expected",
    [
        (Patient("A", 5, "10h00"), Patient("B", 3, "08h00"), -1),
        (Patient("A", 2, "07h00"), Patient("B", 3, "08h00"), 1),
        (Patient("A", 3, "07h00"), Patient("B", 3, "08h00"), -1),
        (Patient("A", 3, "09h00"), Patient("B", 3, "08h00"), 1),
        (Patient("A", 3, "08h00"), Patient("B", 3, "08h00"), 0),
    ],
)
def test_compare_patients(p1, p2, expected):
    assert compare_patients(p1, p2) == expected


def test_compare_is_antisymmetric():
    for a in _sample():
        for b in _sample():
            assert compare_patients(a, b) == -compare_patients(b, a)


def test_find_next_picks_highest_severity_earliest_arrival():
    pa = _filled()
    assert pa[pa.find_next()].name == "Charlie"


def test_find_next_prefers_first_on_full_tie():
    first = Patient("First", 4, "08h00")
    second = Patient("Second", 4, "08h00")
    pa = _filled([Patient("Low", 1, "07h00"), first, second])
    assert pa.find_next() == 1


def test_find_next_empty_raises():
    with pytest.raises(NoPatientsError):
        PatientArray().find_next()


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_remove_invalid_index_raises(index):
    pa = _filled()
    with pytest.raises(IndexError):
        pa.remove(index)
    assert len(pa) == 5


def test_remove_shifts_following_patients():
    patients = _sample()
    pa = _filled(patients)
    pa.remove(3)
    assert list(pa) == patients[:3] + patients[4:]


def test_capacity_never_below_initial():
    pa = _filled()
    while len(pa):
        pa.remove(0)
        assert pa.capacity >= 4
    assert pa.capacity == 4


def test_pop_next_returns_and_removes_most_urgent():
    pa = _filled()
    patient = pa.pop_next()
    assert patient.name == "Charlie"
    assert patient not in list(pa)
    assert len(pa) == 4


def test_pop_next_yields_urgency_order():
    pa = _filled()
    popped = [pa.pop_next() for _ in range(5)]
    for a, b in zip(popped, popped[1:]):
        assert compare_patients(a, b) == -1
    assert len(pa) == 0


def test_pop_next_empty_raises():
    with pytest.raises(NoPatientsError):
        PatientArray().pop_next()


def test_describe_lists_state_and_patients():
    pa = _filled(_sample()[:1])
    lines = pa.describe().splitlines()
    assert lines[0] == f"Capacity: {pa.capacity}"
    assert lines[1] == "Current size: 1"
    assert lines[3] == "Patients:"
    assert lines[4] == "*  10h30 | 3 | Alice"


def test_describe_empty_has_no_patient_lines():
    text = PatientArray().describe()
    assert text.endswith("Patients:")
    assert "*" not in text