#trifix\services\storage.py
import os, shutil, time
from urllib.parse import quote
from fastapi import UploadFile
from trifix.core.config import settings

PUBLIC_PREFIX = "uploads"

def make_stored_name(filename: str | None) -> str:
    """Millisecond timestamp + original basename; same name in the same ms collides."""
    base = os.path.basename((filename or "").replace("\\", "/")) or "upload"
    return f"{int(time.time() * 1000)}-{base}"

def save_upload(upload: UploadFile, upload_dir: str | None = None) -> str:
    """Writes the part to disk; returns the server-relative path served under /uploads.

    The name is percent-encoded in the returned path (spaces, `#`, `?`), so it
    can be requested as-is; the file on disk keeps the raw name.
    """
    upload_dir = upload_dir or settings.upload_dir
    os.makedirs(upload_dir, exist_ok=True)
    name = make_stored_name(upload.filename)
    with open(os.path.join(upload_dir, name), "wb") as out:
        shutil.copyfileobj(upload.file, out)
    return f"{PUBLIC_PREFIX}/{quote(name)}"
