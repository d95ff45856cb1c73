"""
fields_repo.py
- Infers field names per collection from one sampled document.
- Only the first document returned by an unfiltered find is inspected, so
  collections with mixed document shapes are reported from that sample alone.
"""

from __future__ import annotations

from typing import Dict, List


async def list_fields(db) -> Dict[str, List[str]]:
    names = sorted(await db.list_collection_names())
    fields: Dict[str, List[str]] = {}
    for name in names:
        cur = db[name].find({})
        try:
            async for d in cur:
                fields[name] = list(d.keys())
                break
        finally:
            await cur.close()
    return fields
