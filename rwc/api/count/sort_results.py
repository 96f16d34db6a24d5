from .CountResult import CountResult

# Component kinds in ascending order; named components compare after the rest.
_ROOT, _CURRENT, _PARENT, _NAMED = range(4)


def _path_key(path: str) -> list[tuple[int, str]]:
    """Split a path into ordered components.

    A leading root and a leading ``.`` are kept as components of their own and
    sort before any named component. Interior ``.`` and empty components from
    repeated or trailing separators are dropped.
    """
    key: list[tuple[int, str]] = []
    if path.startswith("/"):
        key.append((_ROOT, ""))
    elif path == "." or path.startswith("./"):
        key.append((_CURRENT, ""))
    for part in path.split("/"):
        if part == "..":
            key.append((_PARENT, ""))
        elif part and part != ".":
            key.append((_NAMED, part))
    return key


def sort_results(results: list[CountResult]) -> list[CountResult]:
    """Sort entries by path, component by component; equal paths keep their order."""
    return sorted(results, key=lambda result: _path_key(result.path))
