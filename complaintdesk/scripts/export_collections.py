"""Dump the users and complaints collections to ``<DATA_DIR>/<name>.json``.

    DATA_DIR=./backup python -m complaintdesk.scripts.export_collections
"""

import asyncio
import json
import os
from pathlib import Path

from complaintdesk.core.db import AsyncSessionLocal, init_models
from complaintdesk.core.store import COLLECTIONS, read_all


async def export_collections(data_dir: Path) -> dict[str, int]:
    data_dir.mkdir(parents=True, exist_ok=True)
    counts = {}

    await init_models()

    async with AsyncSessionLocal() as session:
        for name in COLLECTIONS:
            records = await read_all(session, name)
            (data_dir / f"{name}.json").write_text(
                json.dumps(records, indent=2), encoding="utf-8"
            )
            counts[name] = len(records)

    return counts


if __name__ == "__main__":
    target = Path(os.getenv("DATA_DIR", "./data/export"))
    for name, count in asyncio.run(export_collections(target)).items():
        print(f"{name}: {count} records -> {target / (name + '.json')}")
