"""XML element codec for records holding enumeration identifiers.

Fields map to child elements named by their alias (or field name). Identifier
fields use their own XML codec, so strict identifiers reject unknown element
text while capturing identifiers keep it. Decoding goes through pydantic
validation, which applies the same rules as the JSON path.
"""

import types
from typing import Any, Optional, TypeVar, Union, get_args, get_origin
from xml.etree import ElementTree

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


def _element_text(value: Any) -> str:
    marshal_xml = getattr(value, "marshal_xml", None)
    if callable(marshal_xml):
        return marshal_xml()

    if isinstance(value, bool):
        return "true" if value else "false"

    return str(value)


def _append(parent: ElementTree.Element, tag: str, value: Any) -> None:
    if isinstance(value, BaseModel):
        parent.append(model_to_xml(value, tag))
    elif isinstance(value, (list, tuple, set, frozenset)):
        for entry in value:
            _append(parent, tag, entry)
    else:
        ElementTree.SubElement(parent, tag).text = _element_text(value)


def model_to_xml(model: BaseModel, tag: Optional[str] = None) -> ElementTree.Element:
    """Encode a model as an element; fields holding None are omitted.

    Raises:
        MarshalInvalidIDError: If a strict identifier field holds an unknown id
    """
    element = ElementTree.Element(tag or type(model).__name__)
    for name, field_info in type(model).model_fields.items():
        value = getattr(model, name)
        if value is None:
            continue
        _append(element, field_info.alias or name, value)

    return element


def model_to_xml_string(model: BaseModel, tag: Optional[str] = None) -> str:
    return ElementTree.tostring(model_to_xml(model, tag), encoding="unicode")


def _unwrap(annotation: Any) -> tuple[Optional[type[BaseModel]], bool]:
    """Return the nested model type (if any) and whether the field repeats."""
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        for arg in get_args(annotation):
            if arg is type(None):
                continue
            return _unwrap(arg)
        return None, False

    if origin in _SEQUENCE_ORIGINS:
        args = get_args(annotation)
        nested, _ = _unwrap(args[0]) if args else (None, False)
        return nested, True

    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation, False

    return None, False


def _element_data(model_type: type[BaseModel], element: ElementTree.Element) -> dict:
    data: dict[str, Any] = {}
    for name, field_info in model_type.model_fields.items():
        tag = field_info.alias or name
        children = element.findall(tag)
        if not children:
            continue

        nested, repeated = _unwrap(field_info.annotation)
        values = [
            _element_data(nested, child) if nested else (child.text or "")
            for child in children
        ]
        data[tag] = values if repeated else values[0]

    return data


def model_from_xml(
    model_type: type[ModelT], xml: Union[str, bytes, ElementTree.Element]
) -> ModelT:
    """Decode an element (or XML text) into ``model_type``.

    Raises:
        xml.etree.ElementTree.ParseError: If the text is not well-formed XML
        pydantic.ValidationError: If a strict identifier names no item
    """
    element = xml if isinstance(xml, ElementTree.Element) else ElementTree.fromstring(xml)
    return model_type.model_validate(_element_data(model_type, element))
