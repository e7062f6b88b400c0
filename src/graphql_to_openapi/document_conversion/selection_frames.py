"""Selection frames tracking which fragment nested fields attach into."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from graphql import Node

from graphql_to_openapi.type_mapping.mapping_faults import SelectionStackError
from graphql_to_openapi.type_mapping.openapi_fragments import Fragment, opens_selection

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionFrame:
    """An open document node and the fragment its selections populate."""

    node: Node
    fragment: Fragment

    def attach(self, response_key: str, child: Fragment) -> Fragment:
        """Attach a child fragment under ``response_key`` and return the attached one.

        Array frames only ever wrap an object, so children go to
        ``items.properties``. A key selected more than once with a
        sub-selection keeps its first fragment, so both selections merge into it.
        """
        if self.fragment["type"] == "object":
            properties = self.fragment["properties"]
        elif self.fragment["type"] == "array":
            properties = self.fragment["items"]["properties"]
        else:
            raise SelectionStackError(
                f"Cannot attach '{response_key}' into a {self.fragment['type']} fragment."
            )
        existing = properties.get(response_key)
        if existing is not None and opens_selection(existing) and opens_selection(child):
            return existing
        properties[response_key] = child
        return child


class SelectionStack:
    """Stack of open selection frames keyed by node identity.

    graphql-core AST nodes compare by content, and sibling selections can be
    structurally identical, so frames match on ``is`` only.
    """

    def __init__(self) -> None:
        self._frames: list[SelectionFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    def push(self, node: Node, fragment: Fragment) -> None:
        self._frames.append(SelectionFrame(node=node, fragment=fragment))
        _LOGGER.debug("Opened %s selection frame at depth %d", node.kind, len(self._frames))

    @property
    def top(self) -> SelectionFrame:
        if not self._frames:
            raise SelectionStackError("No open selection to attach a field into.")
        return self._frames[-1]

    def pop_if_open(self, node: Node) -> SelectionFrame | None:
        """Pop the top frame when it belongs to ``node``."""
        if self._frames and self._frames[-1].node is node:
            frame = self._frames.pop()
            _LOGGER.debug("Closed %s selection frame at depth %d", node.kind, len(self._frames) + 1)
            return frame
        return None
