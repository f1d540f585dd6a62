from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator, List, NamedTuple, Optional

from rainbowjson._core.schema import RichEnum


class NodeType(RichEnum):
    OBJECT = 'OBJECT'
    ARRAY = 'ARRAY'
    SCALAR = 'SCALAR'


class Position(NamedTuple):
    """A single character offset of the source document."""

    line: Optional[int]
    column: int


@dataclass
class RainbowJsonNode:
    """
    One node of the tree built for a parsed record.

    Containers (``OBJECT``/``ARRAY``) own their ``children`` in order of
    appearance. Scalars carry the raw literal text in ``value``. A node that
    sits inside an object remembers the key it was attached to, a node that
    sits inside an array remembers its index; the root has neither.

    ``relative_depth`` is only set on roots returned by ``parse_json_objects``
    and tells how many enclosing brackets were cut off by the parse window.
    """

    node_type: NodeType
    start_position: Position
    parent_key: Optional[str] = None
    parent_key_position: Optional[Position] = None
    parent_array_index: Optional[int] = None
    end_position: Optional[Position] = None
    children: List[RainbowJsonNode] = field(default_factory=list)
    value: Optional[str] = None
    relative_depth: Optional[int] = None

    @property
    def is_container(self) -> bool:
        return self.node_type != NodeType.SCALAR

    @property
    def is_closed(self) -> bool:
        return self.end_position is not None

    def iter_nodes(self) -> Iterator[RainbowJsonNode]:
        """Pre-order walk over this node and all of its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def _shell_value(self) -> Any:
        if self.node_type == NodeType.SCALAR:
            return json.loads(self.value)
        return [] if self.node_type == NodeType.ARRAY else {}

    def to_python(self) -> Any:
        """
        Rebuild the Python value described by this tree.

        Keys keep the last occurrence when an object repeats a key, the same
        as ``json.loads``. Containers are filled from an explicit stack, so
        trees of any depth convert.

        Raises:
            json.JSONDecodeError: A string holds an escape sequence that is
                balanced, so it tokenizes, but is not valid JSON (e.g. ``"\\q"``).
        """
        root = self._shell_value()
        stack = [(self, root)]
        while stack:
            node, value = stack.pop()
            for child in node.children:
                child_value = child._shell_value()
                if node.node_type == NodeType.ARRAY:
                    value.append(child_value)
                else:
                    value[json.loads(child.parent_key)] = child_value
                if child.is_container:
                    stack.append((child, child_value))
        return root

    def __str__(self) -> str:
        label = self.parent_key if self.parent_key is not None else self.parent_array_index
        if self.node_type == NodeType.SCALAR:
            return f'{self.node_type}[{label}] = {self.value}'
        return f'{self.node_type}[{label}] ({len(self.children)} children)'
