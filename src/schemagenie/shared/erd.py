import base64
import binascii
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

ERD_DATA_URI_PREFIX = "data:text/plain;base64,"

# Mermaid cardinality markers
ONE_TO_ONE = "||--||"
ONE_TO_MANY = "||--o{"

MERMAID_THEME: Dict[str, Any] = {
    "theme": "base",
    "themeVariables": {
        "primaryColor": "#6366f1",
        "primaryTextColor": "#374151",
        "primaryBorderColor": "#6366f1",
        "lineColor": "#6b7280",
        "sectionBkgColor": "#f9fafb",
        "altSectionBkgColor": "#ffffff",
        "gridColor": "#e5e7eb",
        "c0": "#f9fafb",
        "c1": "#f3f4f6",
        "c2": "#e5e7eb",
        "c3": "#d1d5db",
    },
}

MERMAID_JS_URL = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.esm.min.mjs"


@dataclass
class Attribute:
    name: str
    type: str
    key: Optional[str] = None  # PK, FK or UK


@dataclass
class Entity:
    name: str
    attributes: List[Attribute] = field(default_factory=list)


@dataclass
class Relationship:
    from_entity: str
    to_entity: str
    cardinality: str
    label: str


CANNED_ENTITIES: List[Entity] = [
    Entity(
        "USER",
        [
            Attribute("id", "string", "PK"),
            Attribute("email", "string", "UK"),
            Attribute("name", "string"),
            Attribute("created_at", "datetime"),
            Attribute("updated_at", "datetime"),
        ],
    ),
    Entity(
        "PROFILE",
        [
            Attribute("id", "string", "PK"),
            Attribute("bio", "string"),
            Attribute("avatar", "string"),
            Attribute("user_id", "string", "FK"),
        ],
    ),
    Entity(
        "POST",
        [
            Attribute("id", "string", "PK"),
            Attribute("title", "string"),
            Attribute("content", "string"),
            Attribute("published", "boolean"),
            Attribute("author_id", "string", "FK"),
            Attribute("created_at", "datetime"),
            Attribute("updated_at", "datetime"),
        ],
    ),
]

CANNED_RELATIONSHIPS: List[Relationship] = [
    Relationship("USER", "POST", ONE_TO_MANY, "creates"),
    Relationship("USER", "PROFILE", ONE_TO_ONE, "has"),
]


def _render_entity(entity: Entity) -> str:
    lines = [f"    {entity.name} {{"]
    for attribute in entity.attributes:
        line = f"        {attribute.type} {attribute.name}"
        if attribute.key:
            line += f" {attribute.key}"
        lines.append(line)
    lines.append("    }")
    return "\n".join(lines)


def _render_relationship(relationship: Relationship) -> str:
    return (
        f"    {relationship.from_entity} {relationship.cardinality} "
        f'{relationship.to_entity} : "{relationship.label}"'
    )


def render_erd(entities: List[Entity], relationships: List[Relationship]) -> str:
    """Render entities and relationships as Mermaid ``erDiagram`` text.

    Args:
        entities (List[Entity]): Entity blocks, rendered in order
        relationships (List[Relationship]): Relationship lines, rendered after the entities

    Returns:
        str: Mermaid diagram source
    """
    blocks = [_render_entity(entity) for entity in entities]
    lines = [_render_relationship(rel) for rel in relationships]
    return "erDiagram\n" + "\n\n".join(blocks) + "\n\n" + "\n".join(lines) + "\n"


def build_erd_diagram(output_format: str, database_type: str) -> str:
    """Build the ERD for a generation request.

    Both arguments are accepted for the day relationships are inferred from
    the submitted code; the diagram is currently the same for every request.
    """
    return render_erd(CANNED_ENTITIES, CANNED_RELATIONSHIPS)


def encode_erd_payload(diagram: str) -> str:
    """Wrap diagram text in a base64 ``data:`` URI."""
    encoded = base64.b64encode(diagram.encode("utf-8")).decode("ascii")
    return f"{ERD_DATA_URI_PREFIX}{encoded}"


def decode_erd_payload(value: str) -> str:
    """Recover diagram text from an ``erdImageUrl`` value.

    Values starting with ``data:`` have their scheme and encoding marker
    stripped and are base64 decoded. Anything else is treated as raw diagram
    source and returned as is.

    Raises:
        ValueError: if a ``data:`` value does not carry valid base64 text.
    """
    if not value.startswith("data:"):
        return value
    _, _, payload = value.partition(",")
    try:
        return base64.b64decode(payload, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.error(f"Invalid ERD payload: {str(e)}")
        raise ValueError(f"Invalid ERD payload: {str(e)}") from e


def render_mermaid_html(diagram: str, theme: Optional[Dict[str, Any]] = None) -> str:
    """Return an HTML page that renders ``diagram`` with mermaid.js."""
    config = dict(theme or MERMAID_THEME)
    config["startOnLoad"] = False
    # "</" would end the script element early
    source = json.dumps(diagram).replace("</", "<\\/")
    return f"""
<div id="erd"></div>
<script type="module">
  import mermaid from "{MERMAID_JS_URL}";
  mermaid.initialize({json.dumps(config)});
  const {{ svg }} = await mermaid.render("erd-diagram", {source});
  document.getElementById("erd").innerHTML = svg;
</script>
"""
