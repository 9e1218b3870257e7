"""Object storage backends.

Stored objects are addressed by ``<folder_key>/<millis>_<sanitized name>``
inside a bucket; the returned public URL is an opaque string to the rest of
the package.
"""

import logging
import shutil
from abc import ABC, abstractmethod
from pathlib import Path

from ..errors import UploadError
from ..utils import timestamped_name

class ObjectStorage(ABC):
    """Abstract object storage."""
    
    @abstractmethod
    def upload(self, file: Path, folder_key: str) -> str:
        """Store a file under a folder and return its public URL.
        
        Raises:
            UploadError: If the file cannot be stored
        """
        pass
    
    @staticmethod
    def object_key(file: Path, folder_key: str) -> str:
        """Build the storage key for a file.
        
        Raises:
            UploadError: If the folder key is empty or is not a single path segment
        """
        folder = folder_key.strip()
        if folder in ('', '.', '..') or '/' in folder or '\\' in folder:
            raise UploadError(Path(file).name, f"invalid storage folder {folder_key!r}")
        return f"{folder}/{timestamped_name(Path(file).name)}"

class LocalObjectStorage(ObjectStorage):
    """Stores objects in a local directory served under a public base URL."""
    
    def __init__(self, root: Path, public_base_url: str, bucket: str = 'product'):
        """Initialize storage.
        
        Args:
            root: Directory holding the buckets
            public_base_url: URL prefix the root directory is served under
            bucket: Bucket (sub-directory) name
        """
        self.root = Path(root)
        self.public_base_url = public_base_url.rstrip('/')
        self.bucket = bucket
        self.logger = logging.getLogger(self.__class__.__name__)
    
    def upload(self, file: Path, folder_key: str) -> str:
        file = Path(file)
        if not file.is_file():
            raise UploadError(file.name, "file not found")
        
        key = self.object_key(file, folder_key)
        bucket_dir = (self.root / self.bucket).resolve()
        target = (bucket_dir / key).resolve()
        if bucket_dir not in target.parents:
            raise UploadError(file.name, f"storage key {key!r} leaves the bucket")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(file, target)
        except OSError as e:
            raise UploadError(file.name, str(e)) from e
        
        url = f"{self.public_base_url}/{self.bucket}/{key}"
        self.logger.debug(f"Uploaded {file} -> {url}")
        return url
