"""
JSON Patch (RFC 6902) 应用到领域实体
"""
import dataclasses
from functools import lru_cache
from typing import Any, Dict, List, Type, TypeVar

import jsonpatch
from pydantic import TypeAdapter, ValidationError

from bookstore.exceptions import InvalidPatchError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter_for(entity_type: Type[Any]) -> TypeAdapter:
    return TypeAdapter(entity_type)


def load_patch(patch_document: Any) -> jsonpatch.JsonPatch:
    """解析补丁文档，结构不合法时抛出InvalidPatchError"""
    if not isinstance(patch_document, list):
        raise InvalidPatchError("Patch document must be an array of operations")
    try:
        return jsonpatch.JsonPatch(patch_document)
    except (jsonpatch.JsonPatchException, jsonpatch.JsonPointerException, TypeError) as e:
        raise InvalidPatchError(f"Invalid patch document: {e}")


def apply_patch(entity: T, patch_document: List[Dict[str, Any]], id_field: str = "id") -> T:
    """
    在实体的副本上应用补丁并校验结果

    原实体不会被修改；补丁不能改动主键，也不能引入实体没有的字段。
    """
    patch = load_patch(patch_document)
    original = dataclasses.asdict(entity)

    try:
        patched = patch.apply(original)
    except (jsonpatch.JsonPatchException, jsonpatch.JsonPointerException) as e:
        raise InvalidPatchError(str(e))

    if not isinstance(patched, dict):
        raise InvalidPatchError("Patch must not replace the whole document")

    unknown = sorted(set(patched) - set(original))
    if unknown:
        raise InvalidPatchError(f"Unknown member: {unknown[0]}", path=f"/{unknown[0]}")

    if patched.get(id_field) != original.get(id_field):
        raise InvalidPatchError(f"'{id_field}' is immutable", path=f"/{id_field}")

    try:
        return _adapter_for(type(entity)).validate_python(patched)
    except ValidationError as e:
        first = e.errors()[0]
        location = "/".join(str(part) for part in first["loc"])
        raise InvalidPatchError(first["msg"], path=f"/{location}")
