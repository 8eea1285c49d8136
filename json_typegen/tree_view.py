"""Rich tree rendering of an inferred type tree."""

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .codegen.core.naming import NameBinding
from .codegen.core.schema import (
    ITEM,
    ArrayOf,
    Path,
    Primitive,
    Record,
    TypeNode,
)


def _describe(node: TypeNode) -> str:
    if isinstance(node, Primitive):
        return f"[green]{node.kind.value}[/green]"
    if isinstance(node, ArrayOf):
        return "[yellow]array[/yellow]"
    if isinstance(node, Record):
        return f"[blue]object[/blue] [dim]({len(node.fields)} fields)[/dim]"
    return "[red]unknown[/red]"


def build_type_tree(
    node: TypeNode, binding: NameBinding | None = None, label: str = "Root"
) -> Tree:
    """Build a rich Tree for a type tree.

    Args:
        node: Root of the inferred type tree.
        binding: Optional names to show next to records.
        label: Label of the root node.

    Returns:
        rich Tree ready to print.
    """

    def title(node: TypeNode, path: Path, label: str) -> str:
        text = f"[cyan]{escape(label)}[/cyan]: {_describe(node)}"
        if binding is not None and path in binding.type_names:
            text += f" [magenta]→ {binding.type_names[path]}[/magenta]"
        return text

    def add_children(branch: Tree, node: TypeNode, path: Path):
        if isinstance(node, Record):
            for record_field in node.fields:
                child_path = path + (record_field.key,)
                child = branch.add(title(record_field.type, child_path, record_field.key))
                add_children(child, record_field.type, child_path)
        elif isinstance(node, ArrayOf):
            child_path = path + (ITEM,)
            child = branch.add(title(node.element, child_path, "<item>"))
            add_children(child, node.element, child_path)

    tree = Tree(title(node, (), label))
    add_children(tree, node, ())
    return tree


def print_type_tree(
    node: TypeNode,
    binding: NameBinding | None = None,
    label: str = "Root",
    console: Console | None = None,
) -> None:
    """Print the type tree to the console."""
    (console or Console()).print(build_type_tree(node, binding, label))
