# tests/journal/test_nonce_store.py
"""Tests for NonceStore."""

import json
import os
from unittest.mock import AsyncMock, patch

import pytest

from swap_agent.journal import NonceStore

SIGNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class TestNonceStore:
    @pytest.mark.asyncio
    async def test_missing_file_loads_zero(self, tmp_path) -> None:
        store = NonceStore(tmp_path / "nonce.json")
        assert await store.load() == 0

    @pytest.mark.asyncio
    async def test_save_and_load(self, tmp_path) -> None:
        store = NonceStore(tmp_path / "nonce.json", signer=SIGNER)

        await store.save(12)

        assert await store.load() == 12
        data = json.loads((tmp_path / "nonce.json").read_text())
        assert data["signer"] == SIGNER
        assert data["high_water_mark"] == 12

    @pytest.mark.asyncio
    @pytest.mark.skipif(os.name != "posix", reason="directory fsync is POSIX only")
    async def test_save_fsyncs_file_and_directory_off_the_loop(self, tmp_path) -> None:
        store = NonceStore(tmp_path / "nonce.json")

        with patch("swap_agent.journal.nonce_store._fsync", new=AsyncMock()) as fsync:
            await store.save(3)

        assert fsync.await_count == 2
        assert await store.load() == 3

    @pytest.mark.asyncio
    async def test_no_temp_file_left_behind(self, tmp_path) -> None:
        store = NonceStore(tmp_path / "nonce.json")
        await store.save(1)
        assert [p.name for p in tmp_path.iterdir()] == ["nonce.json"]

    @pytest.mark.asyncio
    async def test_creates_parent_directory(self, tmp_path) -> None:
        store = NonceStore(tmp_path / "data" / "nonce.json")
        await store.save(1)
        assert store.path.exists()

    @pytest.mark.asyncio
    async def test_signer_mismatch_rejected(self, tmp_path) -> None:
        await NonceStore(tmp_path / "nonce.json", signer=SIGNER).save(4)
        other = NonceStore(tmp_path / "nonce.json", signer="0x70997970C51812dc3A010C7d01b50e0d17dc79C8")

        with pytest.raises(ValueError, match="belongs to signer"):
            await other.load()

    @pytest.mark.asyncio
    async def test_signer_match_is_case_insensitive(self, tmp_path) -> None:
        await NonceStore(tmp_path / "nonce.json", signer=SIGNER).save(4)
        assert await NonceStore(tmp_path / "nonce.json", signer=SIGNER.lower()).load() == 4

    @pytest.mark.asyncio
    async def test_malformed_value_rejected(self, tmp_path) -> None:
        (tmp_path / "nonce.json").write_text(json.dumps({"high_water_mark": "seven"}))

        with pytest.raises(ValueError, match="Invalid high_water_mark"):
            await NonceStore(tmp_path / "nonce.json").load()
