from __future__ import annotations

from typing import Any, Mapping


class ScriptedTransport:
    """Fake `QueryTransport`: devuelve respuestas en orden y registra llamadas.

    Un elemento `Exception` en el guion se lanza en lugar de devolverse.
    """

    def __init__(self, responses: list[Any]) -> None:
        self._responses = list(responses)
        self.calls: list[tuple[str, dict[str, str], str]] = []

    def execute(self, query: str, variables: Mapping[str, str], endpoint: str) -> dict[str, Any]:
        self.calls.append((query, dict(variables), endpoint))
        if not self._responses:
            raise AssertionError("transport called more times than scripted")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def orbs_page(names_and_cursors: list[tuple[str, str]], *, has_next: bool, total: int = 0) -> dict[str, Any]:
    return {
        "orbs": {
            "totalCount": total,
            "edges": [{"cursor": cursor, "node": {"name": name}} for name, cursor in names_and_cursors],
            "pageInfo": {"hasNextPage": has_next},
        }
    }


def orb_config(*, valid: bool, errors: list[str] | None = None, output: str | None = None) -> dict[str, Any]:
    return {
        "orbConfig": {
            "valid": valid,
            "errors": [{"message": m} for m in errors or []],
            "sourceYaml": "src: 1",
            "outputYaml": output,
        }
    }
