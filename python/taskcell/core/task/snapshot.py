"""Snapshot encoding for task stores.

A snapshot is a JSON document holding every task plus the ID counter::

    {"version": 1, "next_id": 3, "tasks": [{"id": 3, "name": "c", "status": 0}]}

Snapshots are written to a temporary file next to the target and moved into
place with ``os.replace`` so an interrupted write never clobbers the previous
snapshot.
"""

import contextlib
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from .errors import SnapshotError
from .models import Task

SNAPSHOT_VERSION = 1

PathLike = Union[str, os.PathLike]


class TaskSnapshot(BaseModel):
    """Point-in-time copy of a store's tasks and ID counter"""

    version: int = Field(default=SNAPSHOT_VERSION, description="Format version")
    next_id: int = Field(default=0, ge=0, description="Last ID handed out")
    tasks: List[Task] = Field(default_factory=list, description="All tasks")

    @model_validator(mode="after")
    def _check_consistency(self) -> "TaskSnapshot":
        if self.version != SNAPSHOT_VERSION:
            raise ValueError(f"unsupported snapshot version {self.version}")

        ids = [task.id for task in self.tasks]
        if len(ids) != len(set(ids)):
            raise ValueError("snapshot contains duplicate task ids")
        if ids and self.next_id < max(ids):
            raise ValueError(
                f"next_id {self.next_id} is behind the largest task id {max(ids)}"
            )
        return self


def encode_snapshot(snapshot: TaskSnapshot) -> bytes:
    return snapshot.model_dump_json(indent=2).encode("utf-8")


def decode_snapshot(data: Union[bytes, str]) -> TaskSnapshot:
    """Parse and validate snapshot bytes.

    Raises:
        SnapshotError: the document is not valid JSON or fails validation.
    """
    try:
        return TaskSnapshot.model_validate_json(data)
    except ValidationError as e:
        raise SnapshotError(f"Invalid task snapshot: {e}") from e


def _snapshot_mode(target: Path) -> int:
    """Permission bits for a new snapshot file.

    An existing snapshot keeps its mode; a new one gets the usual
    ``0o666 & ~umask`` instead of the ``0o600`` that ``mkstemp`` uses.
    """
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_snapshot(path: PathLike, snapshot: TaskSnapshot) -> Path:
    """Atomically write a snapshot to ``path`` and return the resolved path."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    data = encode_snapshot(snapshot)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, _snapshot_mode(target))
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise

    return target


def read_snapshot(path: PathLike) -> TaskSnapshot:
    """Read a snapshot from ``path``.

    Raises:
        OSError: the file is missing or unreadable.
        SnapshotError: the file content is not a valid snapshot.
    """
    return decode_snapshot(Path(path).read_bytes())
