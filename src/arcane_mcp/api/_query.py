"""
Shared helpers for building list query strings.
"""

from typing import Optional
from urllib.parse import urlencode

from arcane_mcp.models import ListOptions


def with_query(
    path: str, opts: Optional[ListOptions], *, include_limit: bool = True
) -> str:
    """
    Append ``search``/``limit`` to path. Empty values are dropped and no
    ``?`` is emitted when nothing remains.
    """
    params = {}
    if opts is not None:
        if opts.search:
            params["search"] = opts.search
        if include_limit and opts.limit:
            params["limit"] = str(opts.limit)
    query = urlencode(params)
    return f"{path}?{query}" if query else path
