"""
Tool input schema management

Collects the JSON Schema definitions the automation client sees for every
tool. The schemas are generated from the pydantic input models so the
published surface and the validation rules cannot drift apart.
"""

from typing import Dict, Any, Type
from pydantic import BaseModel


def _inline_refs(obj: Any, defs: Dict[str, Any]) -> Any:
    """
    Recursively replace local $ref pointers with the referenced definition.
    Tool clients expect a single self-contained object schema.

    Args:
        obj: schema node to process
        defs: the model's $defs table
    """
    if isinstance(obj, dict):
        all_of = obj.get("allOf")
        if isinstance(all_of, list) and len(all_of) == 1:
            obj = {**all_of[0], **{k: v for k, v in obj.items() if k != "allOf"}}
        ref = obj.get("$ref")
        if isinstance(ref, str) and ref.startswith("#/$defs/"):
            target = dict(defs[ref.split("/")[-1]])
            extra = {k: v for k, v in obj.items() if k != "$ref"}
            target.update(extra)
            return _inline_refs(target, defs)
        return {k: _inline_refs(v, defs) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_inline_refs(item, defs) for item in obj]
    return obj


def create_input_schema(model_class: Type[BaseModel]) -> Dict[str, Any]:
    """
    Generic input schema creator

    Args:
        model_class: pydantic input model

    Returns:
        A self-contained JSON Schema object (no $defs, no title noise)
    """
    schema = model_class.model_json_schema(by_alias=True)
    defs = schema.pop("$defs", {})
    schema = _inline_refs(schema, defs)
    schema.pop("title", None)
    schema.pop("description", None)
    return schema


def create_tool_schema(name: str, description: str, model_class: Type[BaseModel]) -> Dict[str, Any]:
    """
    Describe one tool for the client

    Returns:
        {"name", "description", "input_schema"}
    """
    return {
        "name": name,
        "description": description,
        "input_schema": create_input_schema(model_class),
    }
