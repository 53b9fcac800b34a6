"""Type aliases for the generic element tree."""

from typing import TypeAlias, Any, Dict, List, Mapping, Union

# A node is a dict holding optional "_attributes" and "_text" entries plus
# child tags; a child is either a single node or a list of sibling nodes.
Node: TypeAlias = Dict[str, Any]
Child: TypeAlias = Union[Node, List[Node]]
Fragment: TypeAlias = Dict[str, Child]  # {tag: node}
Attributes: TypeAlias = Mapping[str, Union[str, int, float, None]]

ATTRIBUTES = "_attributes"
TEXT = "_text"
DECLARATION = "_declaration"
