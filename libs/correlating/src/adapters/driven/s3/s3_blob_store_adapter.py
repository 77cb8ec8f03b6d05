"""S3 Blob Store Adapter

以 boto3 實作 BlobStorePort，JSON 內容以 application/json 存放
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from libs.correlating.src.ports.blob_store_port import BlobStorePort
from libs.shared.src.errors.cache_error import CacheError

_NOT_FOUND_CODES = {"NoSuchKey", "NotFound", "404"}


class S3BlobStoreAdapter(BlobStorePort):
    """S3 物件儲存"""

    def __init__(
        self,
        bucket: str,
        region: str | None = None,
        client: Any | None = None,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._bucket = bucket
        self._client = client or boto3.client("s3", region_name=region)

    def put_object(self, key: str, data: bytes) -> None:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType="application/json",
            )
        except (ClientError, BotoCoreError) as e:
            raise CacheError(key, str(e)) from e
        self._logger.info(f"Saved to S3: {key}")

    def get_object(self, key: str) -> bytes | None:
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=key)
            data = response["Body"].read()
        except ClientError as e:
            if _error_code(e) in _NOT_FOUND_CODES:
                self._logger.info(f"Not found in S3: {key}")
                return None
            raise CacheError(key, str(e)) from e
        except BotoCoreError as e:
            raise CacheError(key, str(e)) from e

        self._logger.info(f"Loaded from S3: {key}")
        return data

    def delete_object(self, key: str) -> bool:
        if not self.exists(key):
            return False
        try:
            self._client.delete_object(Bucket=self._bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise CacheError(key, str(e)) from e
        self._logger.info(f"Deleted from S3: {key}")
        return True

    def exists(self, key: str) -> bool:
        try:
            self._client.head_object(Bucket=self._bucket, Key=key)
        except ClientError as e:
            if _error_code(e) in _NOT_FOUND_CODES:
                return False
            raise CacheError(key, str(e)) from e
        except BotoCoreError as e:
            raise CacheError(key, str(e)) from e
        return True


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))
