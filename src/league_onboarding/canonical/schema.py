from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from league_onboarding.inference.type_inference import InferredType


@dataclass(frozen=True)
class LeafNode:
    """
    Scalar field of an inferred schema.
    """
    name: str
    type: InferredType
    example: Any = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        node = {"name": self.name, "type": self.type.value}
        if self.description:
            node["description"] = self.description
        node["example"] = self.example
        return node


@dataclass(frozen=True)
class ObjectNode:
    """
    Object with named child nodes, in first-seen order.
    """
    name: str
    properties: Dict[str, "SchemaNode"] = field(default_factory=dict)
    required: Tuple[str, ...] = ()
    description: Optional[str] = None

    @property
    def type(self) -> InferredType:
        return InferredType.OBJECT

    def to_dict(self) -> Dict[str, Any]:
        node = {"name": self.name, "type": self.type.value}
        if self.description:
            node["description"] = self.description
        node["properties"] = {
            key: child.to_dict() for key, child in self.properties.items()
        }
        node["required"] = list(self.required)
        return node


@dataclass(frozen=True)
class ArrayNode:
    """
    Array whose elements are all described by a single item node.
    """
    name: str
    items: "SchemaNode"
    description: Optional[str] = None

    @property
    def type(self) -> InferredType:
        return InferredType.ARRAY

    def to_dict(self) -> Dict[str, Any]:
        node = {"name": self.name, "type": self.type.value}
        if self.description:
            node["description"] = self.description
        node["items"] = self.items.to_dict()
        return node


SchemaNode = Union[LeafNode, ObjectNode, ArrayNode]
