"""Queries GraphQL y self-test de forma.

Por qué un self-test:
- El texto de la query y el modelo Pydantic que decodifica su respuesta
  viven separados; si alguien renombra un campo en uno solo, el fallo
  aparecería tarde como "respuesta malformada".
- `verify_query_shapes` lo detecta al arrancar el grupo `orb` (y en
  `doctor run`), antes de tocar la red.
"""

from __future__ import annotations

import re
from typing import Any, get_args, get_origin

from pydantic import BaseModel

from core.domain.errors import QueryShapeError
from core.domain.models import ListOrbsResponse, ValidateOrbResponse


LIST_ORBS_QUERY = """
query ListOrbs ($after: String!) {
  orbs(first: 20, after: $after) {
    totalCount,
    edges {
      cursor,
      node {
        name
      }
    }
    pageInfo {
      hasNextPage
    }
  }
}
"""

VALIDATE_ORB_QUERY = """
query ValidateOrb ($orb: String!) {
  orbConfig(orbYaml: $orb) {
    valid,
    errors { message },
    sourceYaml,
    outputYaml
  }
}
"""

_ARGUMENTS_RE = re.compile(r"\([^)]*\)")
_TOKEN_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*|[{}]")

# Árbol de selección: campo -> subselección ({} para escalares).
Selection = dict[str, "Selection"]


def selection_tree(query: str) -> Selection:
    """Selection set de la query como árbol anidado (sin cabecera ni argumentos)."""

    start = query.find("{")
    if start < 0:
        return {}
    tokens = _TOKEN_RE.findall(_ARGUMENTS_RE.sub("", query[start + 1 :]))

    root: Selection = {}
    stack: list[Selection] = [root]
    last: str | None = None
    for token in tokens:
        if token == "{":
            if last is None:
                raise QueryShapeError("selection set opened without a field")
            stack.append(stack[-1][last])
            last = None
        elif token == "}":
            stack.pop()
            last = None
            if not stack:
                break
        else:
            stack[-1].setdefault(token, {})
            last = token
    return root


def _nested_models(annotation: Any) -> list[type[BaseModel]]:
    if get_origin(annotation) is None and isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return [annotation]
    out: list[type[BaseModel]] = []
    for arg in get_args(annotation):
        out.extend(_nested_models(arg))
    return out


def model_tree(model: type[BaseModel]) -> Selection:
    """Árbol de nombres "wire" (alias) de un modelo, con sus modelos anidados."""

    tree: Selection = {}
    for name, field in model.model_fields.items():
        subtree: Selection = {}
        for nested in _nested_models(field.annotation):
            subtree.update(model_tree(nested))
        tree[field.alias or name] = subtree
    return tree


def _shape_mismatches(expected: Selection, selected: Selection, prefix: str = "") -> list[str]:
    problems: list[str] = []
    for name, subtree in expected.items():
        path = prefix + name
        if name not in selected:
            problems.append(f"{path} is not selected")
        elif subtree and not selected[name]:
            problems.append(f"{path} has no sub-selection")
        elif not subtree and selected[name]:
            problems.append(f"{path} is a scalar but has a sub-selection")
        else:
            problems.extend(_shape_mismatches(subtree, selected[name], path + "."))
    return problems


def verify_query_shape(query: str, model: type[BaseModel]) -> None:
    problems = _shape_mismatches(model_tree(model), selection_tree(query))
    if problems:
        raise QueryShapeError(
            f"query does not match {model.__name__}: " + "; ".join(problems)
        )


def verify_query_shapes() -> None:
    verify_query_shape(LIST_ORBS_QUERY, ListOrbsResponse)
    verify_query_shape(VALIDATE_ORB_QUERY, ValidateOrbResponse)
