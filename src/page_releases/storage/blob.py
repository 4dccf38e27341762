"""Azure Blob Storage backend — objects named ``<prefix>/<slug>/<version>.json``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.identity.aio import DefaultAzureCredential
from azure.storage.blob import ContentSettings
from azure.storage.blob.aio import ContainerClient

from page_releases.errors import SnapshotNotFoundError, StoreUnavailableError

if TYPE_CHECKING:
    from page_releases.config import StorageConfig

logger = logging.getLogger(__name__)

_SUFFIX = ".json"


class BlobSnapshotBackend:
    """Stores snapshots as blobs; conditional create uses ``overwrite=False``."""

    def __init__(
        self,
        container: ContainerClient,
        *,
        prefix: str = "releases",
        credential: DefaultAzureCredential | None = None,
    ) -> None:
        self._container = container
        self._prefix = prefix.strip("/")
        self._credential = credential

    @classmethod
    def from_config(cls, config: StorageConfig) -> BlobSnapshotBackend:
        """Build from a connection string, or an account URL with ``DefaultAzureCredential``."""
        if config.connection_string:
            container = ContainerClient.from_connection_string(
                config.connection_string, container_name=config.container
            )
            return cls(container, prefix=config.prefix)
        if not config.account_url:
            raise ValueError(
                "Blob backend requires AZURE_STORAGE_CONNECTION_STRING or AZURE_STORAGE_ACCOUNT_URL"
            )
        credential = DefaultAzureCredential()
        container = ContainerClient(config.account_url, config.container, credential=credential)
        return cls(container, prefix=config.prefix, credential=credential)

    def _slug_prefix(self, slug: str) -> str:
        return "/".join(filter(None, (self._prefix, slug))) + "/"

    def _blob_name(self, slug: str, version: str) -> str:
        return f"{self._slug_prefix(slug)}{version}{_SUFFIX}"

    async def initialize(self) -> None:
        """Create the container if it does not exist yet."""
        try:
            await self._container.create_container()
            logger.info("Blob container created — container=%s", self._container.container_name)
        except ResourceExistsError:
            pass
        except AzureError as exc:
            raise StoreUnavailableError(f"Cannot initialize blob container: {exc}") from exc

    async def list_versions(self, slug: str) -> list[str]:
        prefix = self._slug_prefix(slug)
        names: list[str] = []
        try:
            async for blob in self._container.list_blobs(name_starts_with=prefix):
                name = blob.name[len(prefix) :]
                if "/" in name or not name.endswith(_SUFFIX):
                    continue
                names.append(name[: -len(_SUFFIX)])
        except AzureError as exc:
            raise StoreUnavailableError(f"Cannot list blobs under {prefix}: {exc}") from exc
        return names

    async def read(self, slug: str, version: str) -> bytes:
        name = self._blob_name(slug, version)
        try:
            downloader = await self._container.download_blob(name)
            return await downloader.readall()
        except ResourceNotFoundError as exc:
            raise SnapshotNotFoundError(slug, version) from exc
        except AzureError as exc:
            raise StoreUnavailableError(f"Cannot read blob {name}: {exc}") from exc

    async def create_if_absent(self, slug: str, version: str, data: bytes) -> bool:
        name = self._blob_name(slug, version)
        try:
            await self._container.upload_blob(
                name,
                data,
                overwrite=False,
                content_settings=ContentSettings(content_type="application/json"),
            )
        except ResourceExistsError:
            logger.info("Snapshot blob already exists — blob=%s", name)
            return False
        except AzureError as exc:
            raise StoreUnavailableError(f"Cannot write blob {name}: {exc}") from exc
        logger.debug("Snapshot blob uploaded — blob=%s bytes=%d", name, len(data))
        return True

    async def close(self) -> None:
        await self._container.close()
        if self._credential is not None:
            await self._credential.close()
