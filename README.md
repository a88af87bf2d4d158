# clinicqueue

Two small data structures for deciding who is seen next.

- `clinicqueue.patient_array.PatientArray`: a growable array of patients for
  triage. The next patient is the one with the highest severity; ties go to
  whoever arrived first (arrival times written as `"HHhMM"`, e.g. `"09h15"`).
  Capacity starts at 4. It doubles when the array is three-quarters full and
  halves when it is a quarter full, but never goes below 4.
- `clinicqueue.waiting_queue.WaitingQueue`: a waiting line with two lanes,
  elderly and general. Elderly clients are served first. After two elderly
  clients in a row, one general client is served.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Triage array

```python
from clinicqueue.patient_array import Patient, PatientArray, NoPatientsError

ward = PatientArray()
ward.insert(Patient("Alice", 3, "10h30"))
ward.insert(Patient("Bob", 5, "09h15"))
ward.insert(Patient("Charlie", 5, "08h45"))

print(ward.find_next())        # 2, the index of Charlie
print(ward.pop_next().name)    # Charlie
print(ward.describe())         # capacity, size and the patients left
```

`compare_patients(p1, p2)` returns `-1` when `p1` is more urgent, `1` when
`p2` is, and `0` when they tie. `pop_next()` on an empty array raises
`NoPatientsError`. `remove(index)` with an index out of range raises
`IndexError`.

## Waiting queue

```python
from clinicqueue.waiting_queue import Client, Priority, WaitingQueue

queue = WaitingQueue()
queue.enqueue(Client("Joao", Priority.ELDERLY))
queue.enqueue(Client("Pedro", Priority.GENERAL))

print(queue.peek().name)                   # Joao
print([c.name for c in queue.order()])     # full service order, queue unchanged
served = queue.dequeue()
queue.remove("Pedro")
```

`peek()` and `dequeue()` on an empty queue raise `EmptyQueueError`.
`remove(name)` raises `ClientNotFoundError` if no client has that name.
`clear()` empties both lanes.

## Demonstrations

Two commands run a short demonstration of each structure and print what
happens:

```
clinicqueue-patients
clinicqueue-queue
```