"""Demonstration of the patient array: insert, inspect, remove and attend."""

from __future__ import annotations

import argparse

from clinicqueue.patient_array import Patient, PatientArray


def run_demo() -> str:
    """Run the demonstration scenario and return its report."""
    out: list[str] = []
    pa = PatientArray()
    out.append("PatientArray inicializado!")

    for patient in (
        Patient("Alice", 3, "10h30"),
        Patient("Bob", 5, "09h15"),
        Patient("Charlie", 5, "08h45"),
        Patient("David", 2, "11h00"),
        Patient("Eve", 4, "07h30"),
    ):
        pa.insert(patient)

    out.append(pa.describe())

    next_patient = pa[pa.find_next()]
    out.append(f"\nProximo paciente a ser atendido: {next_patient.name}")

    out.append("\nRemovendo paciente menos urgente...")
    pa.remove(3)
    out.append(pa.describe())

    out.append("\nAtendendo paciente mais urgente...")
    attended = pa.pop_next()
    out.append(
        f"Paciente atendido: {attended.name} "
        f"(Gravidade: {attended.severity}, Hora: {attended.arrival_time})"
    )

    out.append("\nLista apos atendimento:")
    out.append(pa.describe())

    out.append("\nAtendimento finalizado!")
    return "\n".join(out)


def main(argv=None) -> int:
    """Print the demonstration report."""
    parser = argparse.ArgumentParser(
        description="Demonstrate the patient array operations."
    )
    parser.parse_args(argv)
    print(run_demo())
    return 0