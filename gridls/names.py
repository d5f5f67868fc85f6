"""Owner and group name lookups backed by the passwd and group databases."""

from __future__ import annotations

import functools
import grp
import pwd


@functools.lru_cache(maxsize=256)
def _owner_name(uid: int) -> str | None:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


@functools.lru_cache(maxsize=256)
def _group_name(gid: int) -> str | None:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


class NameResolver:
    """Resolve numeric ids to names; ``None`` means the id is unknown."""

    def resolve_owner(self, uid: int) -> str | None:
        return _owner_name(uid)

    def resolve_group(self, gid: int) -> str | None:
        return _group_name(gid)


__all__ = ["NameResolver"]
