"""Resources exposing the MIME maps and database records."""

import json

from mime_scout.services import get_mime_types


async def types_resource() -> str:
    """Extension -> MIME type map as JSON, sorted by extension."""
    types = get_mime_types().types
    return json.dumps(dict(sorted(types.items())), indent=2)


async def extensions_resource() -> str:
    """MIME type -> extensions map as JSON, in database order."""
    extensions = get_mime_types().extensions
    return json.dumps({mime: list(exts) for mime, exts in extensions.items()}, indent=2)


async def type_record_resource(kind: str, subtype: str) -> str:
    """Database record for one MIME type.

    Args:
        kind: Top-level type, e.g. "text".
        subtype: Subtype, e.g. "html".

    Returns:
        JSON record with the resolved defaults, or a not-found message.
    """
    mime_types = get_mime_types()
    mime_type = f"{kind}/{subtype}".lower()
    record = mime_types.db.get(mime_type)

    if record is None:
        return f"Unknown MIME type: {mime_type}"

    return json.dumps(
        {
            "type": mime_type,
            "source": record.source,
            "extensions": list(record.extensions),
            "charset": record.charset,
            "default_extension": mime_types.extension(mime_type),
            "default_charset": mime_types.charset(mime_type),
            "content_type": mime_types.content_type(mime_type),
        },
        indent=2,
    )
