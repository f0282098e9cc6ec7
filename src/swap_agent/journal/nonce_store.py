# src/swap_agent/journal/nonce_store.py
"""Persisted nonce high-water mark."""
import json
import os
from datetime import datetime
from pathlib import Path

import aiofiles
import aiofiles.os


_fsync = aiofiles.os.wrap(os.fsync)


class NonceStore:
    """Stores the highest nonce ever handed out.

    Writes go to a temp file and are swapped in with an atomic rename, so a
    crash mid-write leaves the previous mark intact.
    """

    def __init__(self, path: str | Path, signer: str | None = None) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._signer = signer

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> int:
        """Return the stored mark, 0 if nothing was stored yet.

        Raises:
            ValueError: If the file belongs to a different signer or is malformed.
        """
        if not self._path.exists():
            return 0

        async with aiofiles.open(self._path, "r") as f:
            data = json.loads(await f.read())

        stored_signer = data.get("signer")
        if self._signer and stored_signer and stored_signer.lower() != self._signer.lower():
            raise ValueError(f"Nonce file {self._path} belongs to signer {stored_signer}, not {self._signer}")

        value = data.get("high_water_mark")
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"Invalid high_water_mark in {self._path}: {value!r}")
        return value

    async def save(self, value: int) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        payload = {
            "signer": self._signer,
            "high_water_mark": value,
            "updated_at": datetime.now().isoformat(),
        }
        async with aiofiles.open(tmp_path, "w") as f:
            await f.write(json.dumps(payload, indent=2))
            await f.flush()
            await _fsync(f.fileno())
        await aiofiles.os.replace(tmp_path, self._path)
        await self._fsync_parent()

    async def _fsync_parent(self) -> None:
        # Makes the rename itself durable
        if os.name != "posix":
            return
        fd = os.open(self._path.parent, os.O_RDONLY)
        try:
            await _fsync(fd)
        finally:
            os.close(fd)
