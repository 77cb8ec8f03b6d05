"""File Blob Store Adapter — 本地檔案儲存實作

儲存格式: {base_dir}/{key}.json
"""

import logging
from pathlib import Path

from libs.correlating.src.ports.blob_store_port import BlobStorePort
from libs.shared.src.errors.cache_error import CacheError


class FileBlobStoreAdapter(BlobStorePort):
    """本地 blob 儲存器 (無物件儲存時的開發用後端)"""

    def __init__(self, base_dir: str = "data/cache") -> None:
        """初始化

        Args:
            base_dir: 基礎目錄路徑
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._base_dir = Path(base_dir)

    def _get_file_path(self, key: str) -> Path:
        """取得 key 對應的檔案路徑"""
        if not key or ".." in Path(key).parts or key.startswith("/"):
            raise CacheError(key, "key escapes the cache directory")
        return self._base_dir / f"{key}.json"

    def put_object(self, key: str, data: bytes) -> None:
        file_path = self._get_file_path(key)
        tmp_path = file_path.with_name(file_path.name + ".tmp")
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            # rename 為原子覆寫
            tmp_path.replace(file_path)
        except OSError as e:
            raise CacheError(key, str(e)) from e

    def get_object(self, key: str) -> bytes | None:
        file_path = self._get_file_path(key)
        if not file_path.exists():
            return None
        try:
            return file_path.read_bytes()
        except OSError as e:
            raise CacheError(key, str(e)) from e

    def delete_object(self, key: str) -> bool:
        file_path = self._get_file_path(key)
        if not file_path.exists():
            return False
        try:
            file_path.unlink()
        except OSError as e:
            raise CacheError(key, str(e)) from e
        return True

    def exists(self, key: str) -> bool:
        return self._get_file_path(key).exists()
