from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

JsonPointer = str


def escape_token(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def unescape_token(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def join_pointer(base: Optional[JsonPointer], token: Any) -> JsonPointer:
    """Append one reference token to a pointer."""
    escaped = escape_token(str(token))
    if not base:
        return f"/{escaped}"
    return f"{base}/{escaped}"


def split_pointer(pointer: JsonPointer) -> List[str]:
    if not pointer:
        return []
    if not pointer.startswith("/"):
        raise ValueError(f"Invalid JSON Pointer '{pointer}': must be empty or start with '/'")
    return [unescape_token(t) for t in pointer[1:].split("/")]


def resolve_pointer(document: Any, pointer: JsonPointer) -> Any:
    """Return the value *pointer* designates inside *document*.

    Raises:
        KeyError: If a token does not designate an existing member or index.
    """
    node = document
    for token in split_pointer(pointer):
        if isinstance(node, Mapping):
            if token not in node:
                raise KeyError(f"No member '{token}' at '{pointer}'")
            node = node[token]
        elif isinstance(node, (list, tuple)):
            if not token.isdigit() or int(token) >= len(node):
                raise KeyError(f"No index '{token}' at '{pointer}'")
            node = node[int(token)]
        else:
            raise KeyError(f"Cannot descend into scalar with token '{token}' at '{pointer}'")
    return node
