"""
S3 Image Storage

Movie poster uploads. boto3 is blocking, so every call runs in a worker
thread through anyio.
"""

from pathlib import PurePosixPath
from typing import Any, Optional
import uuid

import anyio
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import SecretStr

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import InvalidInputError, UnexpectedError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_image_storage import IImageStorage


KEY_PREFIX = 'movies'
_S3_HOST_MARKER = '.amazonaws.com/'


class S3ImageStorageImpl(IImageStorage):
    def __init__(
        self,
        *,
        bucket: str,
        region: str,
        access_key_id: str = '',
        secret_access_key: SecretStr = SecretStr(''),
        max_size_bytes: int = settings.IMAGE_MAX_SIZE_BYTES,
        allowed_content_types: Optional[list[str]] = None,
        client: Any = None,
    ) -> None:
        self.bucket = bucket
        self.region = region
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.max_size_bytes = max_size_bytes
        self.allowed_content_types = allowed_content_types or settings.IMAGE_ALLOWED_CONTENT_TYPES
        self._client = client

    @property
    def client(self) -> Any:
        # Created lazily so the app starts without AWS credentials
        if self._client is None:
            credentials = {}
            if self.access_key_id:
                credentials = {
                    'aws_access_key_id': self.access_key_id,
                    'aws_secret_access_key': self.secret_access_key.get_secret_value(),
                }
            self._client = boto3.client('s3', region_name=self.region, **credentials)
        return self._client

    def _validate(self, *, content_type: str, content: bytes) -> None:
        if not content:
            raise InvalidInputError('File cannot be empty')
        if len(content) > self.max_size_bytes:
            raise InvalidInputError(
                f'File size exceeds the maximum of {self.max_size_bytes // (1024 * 1024)}MB'
            )
        if (content_type or '').lower() not in self.allowed_content_types:
            raise InvalidInputError(
                f'Invalid file type. Allowed types: {", ".join(self.allowed_content_types)}'
            )

    def _build_key(self, filename: str) -> str:
        extension = PurePosixPath(filename or '').suffix.lower()
        return f'{KEY_PREFIX}/{uuid.uuid4()}{extension}'

    def _public_url(self, key: str) -> str:
        return f'https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}'

    @staticmethod
    def _extract_key(url: str) -> str:
        _, marker, key = url.partition(_S3_HOST_MARKER)
        if not marker or not key:
            raise InvalidInputError('Invalid S3 URL')
        return key

    @Logger.io
    async def upload(self, *, filename: str, content_type: str, content: bytes) -> str:
        self._validate(content_type=content_type, content=content)
        key = self._build_key(filename)

        try:
            await anyio.to_thread.run_sync(
                lambda: self.client.put_object(
                    Bucket=self.bucket, Key=key, Body=content, ContentType=content_type
                )
            )
        except (ClientError, BotoCoreError) as e:
            raise UnexpectedError(f'Failed to upload image: {e}') from e

        url = self._public_url(key)
        Logger.base.info(f'🖼️ [S3] Uploaded {filename} to {url}')
        return url

    @Logger.io
    async def delete(self, *, url: str) -> None:
        if not url or not url.strip():
            Logger.base.warning('[S3] Empty image url, nothing to delete')
            return

        key = self._extract_key(url.strip())
        try:
            await anyio.to_thread.run_sync(
                lambda: self.client.delete_object(Bucket=self.bucket, Key=key)
            )
        except (ClientError, BotoCoreError) as e:
            raise UnexpectedError(f'Failed to delete image: {e}') from e

        Logger.base.info(f'🗑️ [S3] Deleted {key}')
