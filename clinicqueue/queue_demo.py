"""Demonstration of the waiting queue: enqueue, peek, serve, remove and order."""

from __future__ import annotations

import argparse

from clinicqueue.waiting_queue import Client, ClientNotFoundError, EmptyQueueError, WaitingQueue


def run_demo() -> str:
    """Run the demonstration scenario and return its report."""
    out: list[str] = []
    queue = WaitingQueue()
    out.append("Fila criada com sucesso!")

    out.append("\nAdicionando clientes a fila")
    for client in (
        Client("Joao", 1),
        Client("Maria", 1),
        Client("Pedro", 0),
        Client("Ana", 0),
    ):
        queue.enqueue(client)

    out.append("\nConsultando o proximo cliente (peek):")
    out.append("Proximo atendimento:\n" + queue.peek().describe())

    out.append("\nAtendendo clientes com dequeue:")
    for _ in range(3):
        out.append("Cliente atendido:\n" + queue.dequeue().describe())

    out.append("\nRemovendo cliente 'Ana' da fila:")
    try:
        removed = queue.remove("Ana")
    except (ClientNotFoundError, EmptyQueueError):
        out.append("Falha na remocao.")
    else:
        out.append("Cliente removido com sucesso:\n" + removed.describe())
        out.append("Remocao realizada com sucesso.")

    out.append("\nAdicionando mais clientes")
    queue.enqueue(Client("Carlos", 1))
    queue.enqueue(Client("Beatriz", 0))

    out.append("\nObtendo a ordem da fila:")
    order = queue.order()
    if order:
        labels = {1: "Idoso", 0: "Geral"}
        out.extend(
            f"Cliente {position}: {client.name} (Prioridade: {labels[client.priority]})"
            for position, client in enumerate(order, start=1)
        )
    else:
        out.append("Falha ao obter a ordem da fila.")

    out.append("\nLiberando a fila e encerrando o atendimento")
    queue.clear()
    return "\n".join(out)


def main(argv=None) -> int:
    """Print the demonstration report."""
    parser = argparse.ArgumentParser(
        description="Demonstrate the waiting queue operations."
    )
    parser.parse_args(argv)
    print(run_demo())
    return 0