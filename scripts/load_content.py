"""Load FAQs and pregnancy-week content from a JSON file.

Usage: python -m scripts.load_content content.json
"""

import asyncio
import json
import sys
from pathlib import Path

from app.db.base import close_db, get_session_factory, init_db
from app.db.content import load_content


async def main(path: Path) -> None:
    document = json.loads(path.read_text(encoding="utf-8"))

    await init_db()
    try:
        async with get_session_factory()() as session:
            report = await load_content(session, document)
    finally:
        await close_db()

    print(
        f"FAQs: {report.faqs_created} created, {report.faqs_updated} updated\n"
        f"Weeks: {report.weeks_created} created, {report.weeks_updated} updated"
    )


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python -m scripts.load_content <content.json>")
    asyncio.run(main(Path(sys.argv[1])))
