import errno
import fnmatch
from contextlib import closing
from pathlib import Path

from rawsync.services.pipeline.listing import OsDirectoryLister

MEMORY_ROOT = Path("/photos")


class MemoryLister:
    """Directory lister over a dict tree with deterministic listing order.

    Keys are directories relative to ``MEMORY_ROOT`` (``"."`` for the root). Entries
    ending in ``/`` are subdirectories. ``faults`` maps a key to the error raised
    when that directory is first listed; ``interrupts`` maps a key to the error
    raised after its first entry has been read.
    """

    def __init__(
        self,
        tree: dict[str, list[str]],
        faults: dict[str, OSError] | None = None,
        interrupts: dict[str, OSError] | None = None,
    ):
        self.tree = tree
        self.faults = faults or {}
        self.interrupts = interrupts or {}
        self.open_cursors = 0
        self.listed: list[Path] = []

    def iter_files(self, directory: Path, pattern: str):
        with closing(self._entries(directory)) as entries:
            for name in entries:
                if not name.endswith("/") and fnmatch.fnmatchcase(name, pattern):
                    yield directory / name

    def iter_directories(self, directory: Path):
        with closing(self._entries(directory)) as entries:
            for name in entries:
                if name.endswith("/"):
                    yield directory / name.rstrip("/")

    def _entries(self, directory: Path):
        key = directory.relative_to(MEMORY_ROOT).as_posix()
        if key in self.faults:
            raise self.faults[key]
        if key not in self.tree:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(directory))
        self.listed.append(directory)
        self.open_cursors += 1
        try:
            for index, name in enumerate(self.tree[key]):
                if index and key in self.interrupts:
                    raise self.interrupts[key]
                yield name
        finally:
            self.open_cursors -= 1


class DenyingLister(OsDirectoryLister):
    """Real file-system lister that refuses to open the ``denied`` directories."""

    def __init__(self, denied=()):
        super().__init__()
        self.denied = {Path(path) for path in denied}

    def iter_files(self, directory, pattern):
        self._check(directory)
        return super().iter_files(directory, pattern)

    def iter_directories(self, directory):
        self._check(directory)
        return super().iter_directories(directory)

    def _check(self, directory) -> None:
        if Path(directory) in self.denied:
            raise PermissionError(errno.EACCES, "Permission denied", str(directory))


def touch(path: Path, size: int = 0) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as handle:
        handle.truncate(size)
    return path
