"""FileBlobStoreAdapter unit tests"""

import pytest

from libs.correlating.src.adapters.driven.file.file_blob_store_adapter import (
    FileBlobStoreAdapter,
)
from libs.shared.src.errors.cache_error import CacheError


class TestFileBlobStoreAdapter:
    """Test local file blob storage"""

    def test_round_trip(self, tmp_path) -> None:
        store = FileBlobStoreAdapter(base_dir=str(tmp_path))
        store.put_object("correlations/AAPL,MSFT", b'{"a": 1}')

        assert store.get_object("correlations/AAPL,MSFT") == b'{"a": 1}'
        assert (tmp_path / "correlations" / "AAPL,MSFT.json").exists()

    def test_missing_key_returns_none(self, tmp_path) -> None:
        store = FileBlobStoreAdapter(base_dir=str(tmp_path))
        assert store.get_object("correlations/NOPE") is None
        assert not store.exists("correlations/NOPE")

    def test_overwrite(self, tmp_path) -> None:
        store = FileBlobStoreAdapter(base_dir=str(tmp_path))
        store.put_object("k", b"old")
        store.put_object("k", b"new")

        assert store.get_object("k") == b"new"
        assert not (tmp_path / "k.json.tmp").exists()

    def test_delete(self, tmp_path) -> None:
        store = FileBlobStoreAdapter(base_dir=str(tmp_path))
        store.put_object("k", b"x")

        assert store.delete_object("k") is True
        assert store.delete_object("k") is False

    @pytest.mark.parametrize("key", ["../escape", "/abs/path", ""])
    def test_rejects_escaping_keys(self, tmp_path, key) -> None:
        store = FileBlobStoreAdapter(base_dir=str(tmp_path))
        with pytest.raises(CacheError):
            store.put_object(key, b"x")

    def test_write_failure_raises_cache_error(self, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = FileBlobStoreAdapter(base_dir=str(blocker))

        with pytest.raises(CacheError):
            store.put_object("k", b"x")
