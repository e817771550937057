import logging
import os
import shutil
from typing import List, Optional

from PIL import Image, UnidentifiedImageError

from core.configuration.configuration import artwork_folder_name, working_dir

logger = logging.getLogger(__name__)


class ArtworkStorage:
    """Local folder holding the cover artwork served under ``/game-images``.

    Records reference artwork either by absolute URL or by a path relative to
    this folder. Without an explicit root the folder is resolved from
    ``WORKING_DIR`` and ``ARTWORK_FOLDER`` on every access so tests can point
    it somewhere else through the environment.
    """

    ALLOWED_EXTS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}
    MAX_SIZE = 5 * 1024 * 1024  # 5MB

    def __init__(self, root: Optional[str] = None) -> None:
        self._root = root

    @property
    def root(self) -> str:
        if self._root:
            return os.path.abspath(self._root)
        folder = artwork_folder_name()
        if os.path.isabs(folder):
            return folder
        return os.path.abspath(os.path.join(working_dir(), folder))

    @staticmethod
    def normalize(relative_path: str) -> str:
        cleaned = relative_path.replace("\\", "/")
        segments = [segment for segment in cleaned.split("/") if segment and segment != "."]
        if ".." in segments:
            raise ValueError(f"Artwork path escapes the artwork folder: {relative_path}")
        return "/".join(segments)

    def path_for(self, relative_path: str) -> str:
        return os.path.join(self.root, self.normalize(relative_path))

    def exists(self, relative_path: str) -> bool:
        return os.path.isfile(self.path_for(relative_path))

    def validate_image(self, src_path: str) -> None:
        _, ext = os.path.splitext(src_path)
        if ext.lower() not in self.ALLOWED_EXTS:
            raise ValueError("Invalid artwork format. Allowed: png, jpg, jpeg, gif, webp.")
        if os.path.getsize(src_path) > self.MAX_SIZE:
            raise ValueError("Artwork file is too large (max 5MB).")
        try:
            with Image.open(src_path) as img:
                img.verify()
        except (UnidentifiedImageError, OSError) as exc:
            raise ValueError(f"Invalid image file: {src_path}") from exc

    def save_artwork(self, src_path: str, relative_dest: str) -> str:
        """Validate an image from disk and copy it into the artwork folder."""
        self.validate_image(src_path)
        dest_abs = self.path_for(relative_dest)
        os.makedirs(os.path.dirname(dest_abs), exist_ok=True)
        shutil.copy2(src_path, dest_abs)
        logger.info("Stored artwork %s", dest_abs)
        return self.normalize(relative_dest)

    def list_files(self) -> List[str]:
        results: List[str] = []
        base = self.root
        if not os.path.isdir(base):
            return []
        for root, _, files in os.walk(base):
            for filename in files:
                rel = os.path.relpath(os.path.join(root, filename), base)
                results.append(rel.replace("\\", "/"))
        return sorted(results)

    def clear(self) -> int:
        removed = 0
        for relative_path in self.list_files():
            os.remove(self.path_for(relative_path))
            removed += 1
        return removed

