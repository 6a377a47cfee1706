"""Replace the users and complaints collections from ``<DATA_DIR>/<name>.json``.

Existing records are discarded. A missing file loads as an empty collection.

    DATA_DIR=./backup python -m complaintdesk.scripts.import_collections
"""

import asyncio
import json
import os
from pathlib import Path

from complaintdesk.core.db import AsyncSessionLocal, init_models
from complaintdesk.core.store import write_all


def _load(path: Path) -> list[dict]:
    if not path.exists():
        return []
    return json.loads(path.read_text(encoding="utf-8"))


async def import_collections(data_dir: Path) -> dict[str, int]:
    users = _load(data_dir / "users.json")
    complaints = _load(data_dir / "complaints.json")

    await init_models()

    async with AsyncSessionLocal() as session:
        # the incoming users may not include owners of the current complaints
        await write_all(session, "complaints", [])
        await write_all(session, "users", users)
        await write_all(session, "complaints", complaints)

    return {"users": len(users), "complaints": len(complaints)}


if __name__ == "__main__":
    source = Path(os.getenv("DATA_DIR", "./data/export"))
    for name, count in asyncio.run(import_collections(source)).items():
        print(f"{name}: {count} records loaded")
