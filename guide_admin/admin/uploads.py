"""Conversion of browser uploads into backend multipart parts."""

from fastapi import UploadFile

from guide_admin.core.api.client import FileField


async def to_file_fields(name: str, uploads: list[UploadFile] | None) -> list[FileField]:
    """
    Read uploads into (field, (filename, content, type)) parts.

    Empty file inputs (no filename) are skipped, so an update form
    submitted without a new file leaves the stored file untouched.
    """
    fields: list[FileField] = []
    for upload in uploads or []:
        if not upload.filename:
            continue
        content = await upload.read()
        fields.append(
            (name, (upload.filename, content, upload.content_type or "application/octet-stream"))
        )
    return fields
