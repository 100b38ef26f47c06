"""Path helpers."""

import posixpath


def extname(path: str) -> str:
    """Return the extension of the last path segment, including the dot.

    Trailing slashes are ignored. A dot in first position does not start an
    extension, so ``".bashrc"`` gives ``""`` while ``"..html"`` gives ``".html"``.
    """
    base = posixpath.basename(path.rstrip("/"))
    index = base.rfind(".")
    if index <= 0 or base == "..":
        return ""
    return base[index:]
