"""Persisted document content: schema validation and JSON helpers."""
from __future__ import annotations

import json
from typing import Any, Dict

from jsonschema import Draft202012Validator, ValidationError as SchemaValidationError
from pydantic import ValidationError

from gradiol.graph.model import Document, RoutingType

CONTENT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["nodes", "edges"],
    "properties": {
        "nodes": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "type", "position", "label"],
                "properties": {
                    "id": {"type": "string"},
                    "type": {"type": "string"},
                    "position": {
                        "type": "object",
                        "required": ["x", "y"],
                        "properties": {
                            "x": {"type": "number"},
                            "y": {"type": "number"},
                        },
                    },
                    "width": {"type": "number", "minimum": 0},
                    "height": {"type": "number", "minimum": 0},
                    "label": {"type": "string"},
                    "attributes": {"type": "array", "items": {"type": "string"}},
                },
                "additionalProperties": True,
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "source", "target"],
                "properties": {
                    "id": {"type": "string"},
                    "source": {"type": "string"},
                    "target": {"type": "string"},
                    "label": {"type": ["string", "null"]},
                    "routingType": {"type": "string"},
                },
                "additionalProperties": True,
            },
        },
    },
    "additionalProperties": True,
}

_VALIDATOR = Draft202012Validator(CONTENT_SCHEMA)
_ROUTING_TYPES = {t.value for t in RoutingType}


class DocumentContentError(ValueError):
    pass


def validate_content(payload: Dict[str, Any]) -> None:
    try:
        _VALIDATOR.validate(payload)
    except SchemaValidationError as exc:
        raise DocumentContentError(f"Document content validation failed: {exc.message}") from exc


def document_from_content(payload: Dict[str, Any]) -> Document:
    validate_content(payload)
    # older documents keep attributes under data.attributes and routing under type
    nodes = []
    for node in payload["nodes"]:
        if "attributes" not in node and isinstance(node.get("data"), dict):
            node = {**node, "attributes": node["data"].get("attributes") or []}
        nodes.append(node)
    edges = []
    for edge in payload["edges"]:
        if "routingType" not in edge and edge.get("type") in _ROUTING_TYPES:
            edge = {**edge, "routingType": edge["type"]}
        edges.append(edge)
    try:
        return Document.model_validate({"nodes": nodes, "edges": edges})
    except ValidationError as exc:
        raise DocumentContentError(f"Document content validation failed: {exc}") from exc


def document_from_json(text: str) -> Document:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentContentError(f"Document content is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise DocumentContentError("Document content must be a JSON object")
    return document_from_content(payload)


def document_to_json(document: Document) -> str:
    return json.dumps(document.to_content(), indent=2)
