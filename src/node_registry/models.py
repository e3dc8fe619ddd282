"""
Node Registry Models - Metadata structures for nodes, credentials and node packs.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from node_sdk.basenode import BaseNode


class NodeDefinition(BaseModel):
    """
    Metadata about a registered node.

    Built from the node class's ``description`` and ``properties`` dicts.
    """
    model_config = ConfigDict(extra="allow")

    node_type: str = Field(..., description="Unique node type identifier")
    version: int = Field(1, description="Node version")

    display_name: str = Field(..., description="Human-readable name")
    description: str = Field("", description="Node description")
    group: List[str] = Field(default_factory=list, description="Categories")

    node_class: Optional[str] = Field(None, description="Fully qualified class name")
    node_pack: Optional[str] = Field(None, description="Source node pack")

    inputs: List[str] = Field(default_factory=lambda: ["main"])
    outputs: List[str] = Field(default_factory=lambda: ["main"])
    credentials: List[Dict[str, Any]] = Field(default_factory=list)
    parameters: List[Dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_node_class(cls, node_class: Type["BaseNode"]) -> "NodeDefinition":
        """Create definition from a BaseNode class."""
        description = node_class.description
        properties = node_class.properties

        return cls(
            node_type=node_class.type,
            version=node_class.version,
            display_name=description.get("displayName", node_class.type),
            description=description.get("description", ""),
            group=description.get("group", []),
            node_class=f"{node_class.__module__}.{node_class.__name__}",
            inputs=description.get("inputs", ["main"]),
            outputs=description.get("outputs", ["main"]),
            credentials=properties.get("credentials") or description.get("credentials", []),
            parameters=properties.get("parameters", []),
        )


class CredentialDefinition(BaseModel):
    """Definition of a credential type (fields shown to the user)."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Credential type name")
    display_name: str = Field(..., description="Human-readable name")
    documentation_url: str = Field("", description="Where to read about the credential")
    properties: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Credential properties/fields"
    )
    auth_type: str = Field("generic", description="Auth type: generic, oauth2, etc.")


class NodePackManifest(BaseModel):
    """
    Manifest for a node pack (collection of nodes).

    Used for discovery and registration of bundled nodes.
    """
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Pack name")
    version: str = Field("1.0.0", description="Pack version")
    description: str = Field("", description="Pack description")

    author: str = Field("", description="Author name")
    license: str = Field("MIT", description="License type")

    nodes: List[str] = Field(
        default_factory=list,
        description="List of node types in this pack"
    )
    credentials: List[CredentialDefinition] = Field(
        default_factory=list,
        description="Credential types shipped with this pack"
    )

    entry_point: str = Field(
        "",
        description="Module path for node discovery (e.g., 'nodepacks.datev_connect')"
    )


__all__ = [
    "NodeDefinition",
    "NodePackManifest",
    "CredentialDefinition",
]
