import logging
import zipfile
from contextlib import asynccontextmanager
from typing import Any, Dict, List

import httpx
import uvicorn
from fastapi import FastAPI, UploadFile, File, Query
from fastapi import HTTPException, status
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel

from functions.extract import get_content_from_zip, get_zip_content_from_url
from models.extracted_file import ExtractedFile
from utils.config import config
from utils.file import write_files

logger = logging.getLogger(__name__)


class UrlRequest(BaseModel):
    url: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    config["output_dir"].mkdir(parents=True, exist_ok=True)
    yield


app = FastAPI(debug=False, lifespan=lifespan, default_response_class=ORJSONResponse)


async def build_response(files: List[ExtractedFile], save: bool, header: str) -> ORJSONResponse:
    response: Dict[str, Any] = {"files": [f.to_dict() for f in files]}

    if save:
        try:
            written = await write_files(files, config["output_dir"], header)
        except ValueError as exc:
            raise HTTPException(status.HTTP_422_UNPROCESSABLE_ENTITY, f"Invalid JSON content: {exc}")
        response["saved"] = [p.name for p in written]

    return ORJSONResponse(response)


@app.post("/extract")
async def extract(file: UploadFile = File(...), save: bool = Query(False)) -> ORJSONResponse:
    filename = file.filename or ""
    is_zip = file.content_type in ("application/zip", "application/x-zip-compressed") or filename.lower().endswith(".zip")

    if not is_zip:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="This file type is not supported. Supported extensions: zip."
        )

    blob = await file.read()
    await file.close()
    if not blob:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Empty upload")

    try:
        files = await get_content_from_zip(blob)
    except zipfile.BadZipFile:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Invalid zip archive")

    return await build_response(files, save, f"Extracting {filename}")


@app.post("/extract/url")
async def extract_url(body: UrlRequest, save: bool = Query(False)) -> ORJSONResponse:
    try:
        files = await get_zip_content_from_url(body.url)
    except httpx.HTTPStatusError as exc:
        raise HTTPException(
            status.HTTP_502_BAD_GATEWAY,
            f"Upstream responded with {exc.response.status_code}"
        )
    except httpx.HTTPError as exc:
        logger.warning("Fetching %s failed: %s", body.url, exc)
        raise HTTPException(status.HTTP_502_BAD_GATEWAY, "Could not fetch archive")
    except zipfile.BadZipFile:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Invalid zip archive")

    return await build_response(files, save, f"Extracting {body.url}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=config["host"], port=config["port"])
