"""
Target scope resolution
"""
from typing import Iterable, List


def is_local_host(name: str, local_host: str) -> bool:
    """
    Check if a target refers to the current machine.
    
    Matching is a case-insensitive substring test, so ``WS01`` also
    excludes ``ws01.corp.example``.
    """
    if not local_host:
        return False
    return local_host.casefold() in name.casefold()


def resolve_scope(targets: Iterable[str], local_host: str) -> List[str]:
    """
    Build the sorted target list.
    
    Blank names are dropped, duplicates are removed case-insensitively
    (first spelling wins) and the local host is excluded.
    """
    seen = {}
    for raw in targets:
        name = raw.strip()
        if not name or is_local_host(name, local_host):
            continue
        seen.setdefault(name.casefold(), name)
    return [seen[key] for key in sorted(seen)]
