import asyncio
import io
import logging
import zipfile
from functools import partial
from typing import List

import httpx

from models.extracted_file import ExtractedFile
from utils.aio import gather_or_cancel, run_in_thread
from utils.config import config, resolve_concurrency
from utils.path import is_directory_entry

logger = logging.getLogger(__name__)

Blob = bytes | bytearray | memoryview


def _read_entry(zf: zipfile.ZipFile, info: zipfile.ZipInfo, encoding: str) -> str:
    return zf.read(info).decode(encoding, errors="replace")


async def get_content_from_zip(
    blob: Blob,
    *,
    max_concurrency: int | None = None,
    encoding: str = "utf-8",
) -> List[ExtractedFile]:
    semaphore = asyncio.Semaphore(resolve_concurrency(max_concurrency))

    with zipfile.ZipFile(io.BytesIO(blob)) as zf:
        entries = [info for info in zf.infolist() if not is_directory_entry(info.filename)]
        logger.debug("Reading %d file entries from archive", len(entries))

        async def read(info: zipfile.ZipInfo) -> str:
            async with semaphore:
                return await run_in_thread(partial(_read_entry, zf, info, encoding))

        # results keep input order, so contents line up with entries by index
        contents = await gather_or_cancel(read(info) for info in entries)

    return [
        ExtractedFile.from_entry(info.filename, content)
        for info, content in zip(entries, contents)
    ]


async def get_file_from_url(url: str, *, client: httpx.AsyncClient | None = None) -> bytes:
    logger.debug("Fetching archive from %s", url)

    if client is not None:
        response = await client.get(url)
        response.raise_for_status()
        return response.content

    async with httpx.AsyncClient(timeout=config["http_timeout"], follow_redirects=True) as own_client:
        response = await own_client.get(url)
        response.raise_for_status()
        return response.content


async def get_zip_content_from_url(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    max_concurrency: int | None = None,
) -> List[ExtractedFile]:
    blob = await get_file_from_url(url, client=client)
    return await get_content_from_zip(blob, max_concurrency=max_concurrency)
