"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/mensajes en `orb` y `doctor`.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text


def print_error(console: Console, message: str) -> None:
    """Imprime `Error: <mensaje>` sin interpretar markup en el mensaje.

    Los mensajes del servidor pueden contener corchetes (`[...]`) que Rich
    tomaría como estilos.
    """

    console.print(Text.assemble(("Error: ", "bold red"), message), soft_wrap=True)


def print_success(console: Console, message: str) -> None:
    console.print(Text(message, style="green"), soft_wrap=True)


def build_doctor_table() -> Table:
    table = Table(title="orbctl doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
