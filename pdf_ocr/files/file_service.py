"""Asynchronous filesystem access used by the pipeline components.

Blocking calls run in a worker thread via ``asyncio.to_thread()`` so the
event loop stays responsive while large PDFs are read.
"""

import asyncio
import os
from pathlib import Path

from pdf_ocr.exceptions import FileServiceError
from pdf_ocr.utils.logger import get_logger

logger = get_logger(__name__)


class FileService:
    """Reads, writes, and inspects files on the local filesystem."""

    async def read_file(self, file_path: str | Path) -> bytes:
        """Read a file's raw bytes.

        Args:
            file_path: Path to the file.

        Returns:
            File content.

        Raises:
            FileServiceError: If the file cannot be read.
        """
        try:
            return await asyncio.to_thread(Path(file_path).read_bytes)
        except OSError as exc:
            raise FileServiceError(f"Failed to read file {file_path}: {exc}") from exc

    async def write_file(self, file_path: str | Path, data: str | bytes) -> None:
        """Write text (UTF-8) or bytes to a file, replacing existing content.

        Raises:
            FileServiceError: If the file cannot be written.
        """
        path = Path(file_path)
        try:
            if isinstance(data, bytes):
                await asyncio.to_thread(path.write_bytes, data)
            else:
                await asyncio.to_thread(path.write_text, data, encoding="utf-8")
        except OSError as exc:
            raise FileServiceError(f"Failed to write file {file_path}: {exc}") from exc
        logger.debug("Wrote %s", path)

    async def exists(self, file_path: str | Path) -> bool:
        return await asyncio.to_thread(os.path.exists, file_path)

    async def ensure_directory(self, dir_path: str | Path) -> None:
        """Create a directory and any missing parents.

        Raises:
            FileServiceError: If the directory cannot be created.
        """
        try:
            await asyncio.to_thread(Path(dir_path).mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise FileServiceError(
                f"Failed to create directory {dir_path}: {exc}"
            ) from exc

    def get_file_name(self, file_path: str | Path) -> str:
        return os.path.basename(file_path)
