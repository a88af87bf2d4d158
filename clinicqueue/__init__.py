"""Triage array and two-lane priority waiting queue."""

__version__ = "0.1.0"
__all__ = ["patient_array", "patient_demo", "waiting_queue", "queue_demo"]