"""XML mapping between pydantic models and the carrier's pickup documents.

Outbound: PickupRequest -> `<Create>` document with every element present,
in declared field order, empty optional fields written as empty elements.
Inbound: any root element whose children match PickupResponse aliases by
local name. Missing or empty elements keep the model's zero value.
"""
import math
import re
import xml.etree.ElementTree as ET

from pydantic import BaseModel, SecretStr, ValidationError

from saia_pickup.core.errors import DecodingError, EncodingError
from saia_pickup.core.pickup_request import PickupRequest
from saia_pickup.core.pickup_response import PickupResponse

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
REQUEST_ROOT = "Create"

# Elements nested one level deeper than their model field.
_WRAPPERS = {"DetailItem": "Details"}

_CREDENTIALS = re.compile(r"<(UserID|Password)>.*?</\1>", re.DOTALL)

# Characters outside the XML 1.0 Char production are written as U+FFFD.
_INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _format_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, SecretStr):
        return _INVALID_XML_CHARS.sub("\ufffd", value.get_secret_value())
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"cannot encode non-finite number {value}")
        return str(int(value)) if value.is_integer() else repr(value)
    return _INVALID_XML_CHARS.sub("\ufffd", str(value))


def _append_fields(parent: ET.Element, model: BaseModel) -> None:
    for name, field in type(model).model_fields.items():
        tag = field.alias or name
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            container = parent
            if tag in _WRAPPERS:
                container = ET.SubElement(parent, _WRAPPERS[tag])
            _append_fields(ET.SubElement(container, tag), value)
            continue
        ET.SubElement(parent, tag).text = _format_value(value)


def encode_request(request: PickupRequest) -> str:
    """Serialize a request to the `Create` document, prefixed with the XML declaration."""
    try:
        root = ET.Element(REQUEST_ROOT)
        _append_fields(root, request)
        body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"could not marshal pickup request: {e}") from e
    return XML_HEADER + body


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _collect(element: ET.Element) -> dict:
    data: dict = {}
    for child in element:
        tag = _local_name(child.tag)
        if len(child):
            data[tag] = _collect(child)
            continue
        text = (child.text or "").strip()
        if text:
            data[tag] = text
    return data


def _unwrap_envelope(root: ET.Element) -> ET.Element:
    """Return the payload element when the reply arrives inside a SOAP envelope."""
    if _local_name(root.tag) != "Envelope":
        return root
    for child in root:
        if _local_name(child.tag) == "Body" and len(child):
            return child[0]
    return root


def decode_response(body: bytes | str) -> PickupResponse:
    """Parse the carrier reply into a PickupResponse."""
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise DecodingError(f"could not parse pickup response: {e}") from e

    data = _collect(_unwrap_envelope(root))
    try:
        return PickupResponse.model_validate(data)
    except ValidationError as e:
        raise DecodingError(f"unexpected pickup response content: {e}") from e


def redact_credentials(xml_text: str) -> str:
    """Mask the UserID and Password element contents for logging."""
    return _CREDENTIALS.sub(r"<\1>***</\1>", xml_text)
