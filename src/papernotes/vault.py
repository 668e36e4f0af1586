from pathlib import Path
from typing import Callable

from loguru import logger

from papernotes.errors import StorageError


class Vault:
    """A folder of notes addressed by ``/``-separated relative paths.

    ``opener`` is called with the absolute path of a note to show it to the
    user; without one, :meth:`open_file` does nothing.
    """

    def __init__(self, root: Path, opener: Callable[[str], object] = None):
        self.root = Path(root)
        self.opener = opener

    def resolve(self, path: str) -> Path:
        return self.root.joinpath(*path.split("/"))

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def create_folder(self, path: str) -> None:
        try:
            self.resolve(path).mkdir(parents=True)
        except OSError as e:
            raise StorageError(f"Cannot create folder {path}: {e}") from e
        logger.debug("Created folder {}", path)

    def ensure_folder(self, path: str) -> None:
        # check-then-create; a concurrent creation surfaces as StorageError
        if not self.exists(path):
            self.create_folder(path)

    def create_binary(self, path: str, data: bytes) -> None:
        try:
            with open(self.resolve(path), "xb") as f:
                f.write(data)
        except OSError as e:
            raise StorageError(f"Cannot create file {path}: {e}") from e
        logger.debug("Wrote {} bytes to {}", len(data), path)

    def create(self, path: str, text: str) -> None:
        try:
            with open(self.resolve(path), "x", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise StorageError(f"Cannot create file {path}: {e}") from e
        logger.debug("Wrote note {}", path)

    def open_file(self, path: str) -> None:
        if self.opener is None:
            return
        self.opener(str(self.resolve(path)))
