"""Expansion of user-supplied paths and glob patterns into PDF file lists."""

import asyncio
import glob
import os

from pdf_ocr.files.file_service import FileService
from pdf_ocr.utils.logger import get_logger

logger = get_logger(__name__)

PDF_EXTENSION = ".pdf"
_GLOB_CHARS = ("*", "?", "[")


class PatternMatcher:
    """Resolves patterns into an ordered, de-duplicated list of documents.

    Matches of each glob pattern are sorted on their own and appended in
    pattern order, so the output is grouped by pattern rather than sorted
    globally. Literal paths are kept as given.

    Args:
        file_service: Filesystem collaborator used for existence checks.
        extension: Recognized document extension, matched case-insensitively.
    """

    def __init__(
        self, file_service: FileService, extension: str = PDF_EXTENSION
    ) -> None:
        self.file_service = file_service
        self.extension = extension.lower()

    async def expand_patterns(self, patterns: list[str]) -> list[str]:
        """Expand patterns into document paths.

        Missing or non-PDF literal paths are skipped with a warning. A path
        already produced by an earlier pattern is never produced again.

        Args:
            patterns: Literal paths and/or glob expressions, in order.

        Returns:
            Document paths grouped by pattern.
        """
        expanded: list[str] = []
        seen: set[tuple[int, int] | str] = set()

        for pattern in patterns:
            if self.is_glob_pattern(pattern):
                matches = await self._glob(pattern)
                if not matches:
                    logger.warning("Pattern %s did not match any PDF files.", pattern)
                for match in sorted(matches):
                    key = self._dedupe_key(match)
                    if key not in seen:
                        seen.add(key)
                        expanded.append(match)
                continue

            if not await self.file_service.exists(pattern):
                logger.warning("File %s not found.", pattern)
            elif not self._has_extension(pattern):
                logger.warning("%s is not a PDF file and will be skipped.", pattern)
            else:
                key = self._dedupe_key(pattern)
                if key not in seen:
                    seen.add(key)
                    expanded.append(pattern)

        logger.debug("Expanded %d pattern(s) into %d file(s)", len(patterns), len(expanded))
        return expanded

    @staticmethod
    def is_glob_pattern(pattern: str) -> bool:
        return any(char in pattern for char in _GLOB_CHARS)

    async def _glob(self, pattern: str) -> list[str]:
        """Return non-directory matches of a glob that carry the extension."""

        def _expand() -> list[str]:
            return [
                match
                for match in glob.glob(pattern, recursive=True)
                if not os.path.isdir(match) and self._has_extension(match)
            ]

        return await asyncio.to_thread(_expand)

    def _has_extension(self, path: str) -> bool:
        return path.lower().endswith(self.extension)

    @staticmethod
    def _dedupe_key(path: str) -> tuple[int, int] | str:
        """Identify the file behind ``path``.

        Spellings of one file (``a.pdf``, ``./a.pdf``, or ``A.PDF`` on a
        case-insensitive filesystem) share a device/inode pair, while
        distinct files whose names differ only in case do not.
        """
        try:
            st = os.stat(path)
        except OSError:
            return os.path.normcase(os.path.realpath(path))
        return (st.st_dev, st.st_ino)
