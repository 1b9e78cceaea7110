import asyncio
import logging
from pathlib import Path
from typing import Dict, Iterable, List

import aiofiles
import orjson

from models.extracted_file import ExtractedFile
from utils.aio import gather_or_cancel
from utils.config import resolve_concurrency
from utils.log import ExtractLogger, post_extract_message

logger = logging.getLogger(__name__)


def format_content(entry: ExtractedFile) -> bytes:
    if entry.file_type == "json":
        return orjson.dumps(orjson.loads(entry.content), option=orjson.OPT_INDENT_2)
    return entry.content.encode("utf-8")


async def aiowrite_file(dst: Path, content: bytes) -> None:
    async with aiofiles.open(dst, "wb") as out:
        await out.write(content)


async def write_files(
    files: Iterable[ExtractedFile],
    save_path: Path | str,
    header: str,
    *,
    log: ExtractLogger | None = None,
    max_concurrency: int | None = None,
) -> List[Path]:
    log = log or post_extract_message
    save_path = Path(save_path)
    semaphore = asyncio.Semaphore(resolve_concurrency(max_concurrency))
    entries = list(files)

    # entries sharing a destination are written one after another, last one wins
    by_destination: Dict[Path, List[int]] = {}
    for index, entry in enumerate(entries):
        by_destination.setdefault(save_path / entry.full_name, []).append(index)

    written = [False] * len(entries)
    next_to_log = 0

    def mark_written(index: int) -> None:
        nonlocal next_to_log
        written[index] = True
        while next_to_log < len(entries) and written[next_to_log]:
            log(entries[next_to_log].full_name, False)
            next_to_log += 1

    async def write(file_path: Path, indexes: List[int]) -> None:
        for index in indexes:
            async with semaphore:
                await aiowrite_file(file_path, format_content(entries[index]))
            logger.debug("Wrote %s", file_path)
            mark_written(index)

    log(header, True)
    await gather_or_cancel(write(path, indexes) for path, indexes in by_destination.items())
    return [save_path / entry.full_name for entry in entries]
