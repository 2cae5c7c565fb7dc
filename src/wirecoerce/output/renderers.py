"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from wirecoerce.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from wirecoerce.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to text via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="wire.ok"), Text(f"  {result.op}", style="wire.op"))


def _dumps(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_decode(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    data = result.data
    if verbose:
        _status_line(console, result)
        console.print(Text(f"model: {data['model']}", style="wire.key"))
        if "set_fields" in data:
            console.print(Text(f"set: {', '.join(data['set_fields']) or '-'}", style="wire.key"))
    payload = data["records"] if "records" in data else data["record"]
    console.print(_dumps(payload), markup=False, emoji=False, soft_wrap=True)


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    data = result.data
    root = Text(data["model"], style="wire.model")
    root.append(f" ({data['descriptor']['model']})", style="wire.key")
    tree = Tree(root)
    _add_fields(tree, data["descriptor"])
    console.print(tree)


def _add_fields(node: Tree, descriptor: dict[str, Any]) -> None:
    for key, child in descriptor.get("fields", {}).items():
        branch = node.add(_label(key, child))
        _add_children(branch, child)


def _add_children(node: Tree, descriptor: dict[str, Any]) -> None:
    kind = descriptor["kind"]
    if kind == "Object":
        _add_fields(node, descriptor)
    elif kind in ("List", "Mapping"):
        inner = descriptor["item"] if kind == "List" else descriptor["value"]
        if inner["kind"] in ("Object", "List", "Mapping"):
            branch = node.add(_label("[]" if kind == "List" else "{}", inner))
            _add_children(branch, inner)


def _label(key: str, descriptor: dict[str, Any]) -> Text:
    label = Text(f"{key}: ")
    label.append(_kind_text(descriptor), style=style_for_kind(descriptor["kind"]))
    return label


def _kind_text(descriptor: dict[str, Any]) -> str:
    kind = descriptor["kind"]
    if kind == "List":
        return f"List[{_kind_text(descriptor['item'])}]"
    if kind == "Mapping":
        return f"Mapping[{_kind_text(descriptor['value'])}]"
    if kind == "Object":
        return descriptor["model"]
    return kind


def _render_list_models(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Model", style="wire.model")
    table.add_column("Fields", justify="right")
    for item in result.data.get("items", []):
        table.add_row(item["name"], str(item["fields"]))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        rendered = _dumps(value) if isinstance(value, (dict, list)) else str(value)
        console.print(Text(f"  {key}: ", style="wire.key") + Text(rendered))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    line = Text("ERROR", style="wire.error")
    line.append(f"  {result.op}", style="wire.op")
    line.append(f": {message}")
    console.print(line)
    if error is not None and verbose:
        console.print(Text(f"  code: {error.code}", style="wire.key"))
        for key, value in error.detail.items():
            console.print(Text(f"  {key}: {value}", style="wire.key"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "decode": _render_decode,
    "describe": _render_describe,
    "list_models": _render_list_models,
}
