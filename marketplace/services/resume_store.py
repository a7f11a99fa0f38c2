"""Resume object storage with time-limited signed links."""

import asyncio
import hashlib
import hmac
import logging
import time
from datetime import UTC, datetime
from pathlib import Path, PurePath
from urllib.parse import quote, urlencode

from marketplace.core.config import settings
from marketplace.core.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)


class ResumeStore:
    """Stores resumes under per-user keys and signs download links."""

    def __init__(
        self,
        root_dir: str | Path,
        secret: str,
        ttl_seconds: int = 60,
        base_url: str = "",
    ):
        self.root = Path(root_dir).resolve()
        self.secret = secret.encode()
        self.ttl_seconds = ttl_seconds
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def build_key(user_id: str, job_id: str, filename: str) -> str:
        extension = PurePath(filename).suffix.lower().lstrip(".")
        return f"{user_id}/{job_id}-{int(time.time() * 1000)}.{extension}"

    def path_for(self, key: str) -> Path:
        """Resolve a storage key to a path inside the store root."""
        path = (self.root / key).resolve()
        if not path.is_relative_to(self.root):
            raise StorageError(f"Invalid storage key: {key}")
        return path

    async def save(self, key: str, data: bytes) -> str:
        """Write an object and return its key."""
        path = self.path_for(key)
        try:
            await asyncio.to_thread(self._write, path, data)
        except OSError as e:
            logger.error(f"Failed to store resume {key}: {e}")
            raise StorageError(f"Failed to store resume: {e}") from e
        logger.info(f"Stored resume {key} ({len(data)} bytes)")
        return key

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def open_path(self, key: str) -> Path:
        path = self.path_for(key)
        if not path.is_file():
            raise NotFoundError("Resume", key)
        return path

    def _signature(self, key: str, expires: int) -> str:
        message = f"{key}:{expires}".encode()
        return hmac.new(self.secret, message, hashlib.sha256).hexdigest()

    def signed_url(self, key: str, now: float | None = None) -> tuple[str, datetime]:
        """Return a download URL valid for ``ttl_seconds`` and its expiry."""
        issued = time.time() if now is None else now
        expires = int(issued) + self.ttl_seconds
        query = urlencode({"expires": expires, "signature": self._signature(key, expires)})
        url = f"{self.base_url}/resumes/{quote(key)}?{query}"
        return url, datetime.fromtimestamp(expires, UTC)

    def verify(
        self, key: str, expires: int, signature: str, now: float | None = None
    ) -> bool:
        """Check a link's signature and that it has not expired."""
        current = time.time() if now is None else now
        if expires < current:
            return False
        return hmac.compare_digest(self._signature(key, expires), signature)


def get_resume_store() -> ResumeStore:
    """Dependency for the configured resume store."""
    return ResumeStore(
        root_dir=settings.resume_storage_dir,
        secret=settings.signed_url_secret,
        ttl_seconds=settings.signed_url_ttl_seconds,
        base_url=settings.public_base_url,
    )
