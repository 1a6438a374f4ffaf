# -*- coding: utf-8 -*-
"""Durable storage of the sealed manifest blob."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from abc import ABC
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from ..constant import MANIFEST_KEY, STORE_DIR
from ..exceptions import (
    ManifestCorruptError,
    ManifestNotFoundError,
    ManifestWriteError,
)
from .models import Manifest

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Blob stores
# ---------------------------------------------------------------------------


class ManifestStore(ABC):
    """Key-value blob store: raw bytes in, raw bytes out."""

    def get(self, key: str) -> Optional[bytes]:
        """Return the stored bytes, or None if nothing is stored."""
        raise NotImplementedError

    def put(self, key: str, data: bytes) -> None:
        """Store *data* under *key*, replacing any previous value whole."""
        raise NotImplementedError


class MemoryManifestStore(ManifestStore):
    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._blobs: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._blobs.get(key)

    def put(self, key: str, data: bytes) -> None:
        self._blobs[key] = bytes(data)


class FileManifestStore(ManifestStore):
    """One ``<key>.json`` file per key inside *directory*.

    Writes go to a temp file in the same directory and are moved into
    place with ``os.replace``, so readers see the old blob or the new one,
    never a partial write.
    """

    def __init__(self, directory: Optional[Path] = None):
        self.directory = Path(directory) if directory is not None else STORE_DIR

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[bytes]:
        path = self.path_for(key)
        if not path.is_file():
            return None
        logger.debug("Reading %s", path)
        return path.read_bytes()

    def put(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        try:
            self._write(key, path, data)
        except OSError as exc:
            raise ManifestWriteError(key, str(exc)) from exc
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def _write(self, key: str, path: Path, data: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory,
            prefix=f".{key}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------


def load_manifest(
    store: ManifestStore,
    key: str = MANIFEST_KEY,
) -> Manifest:
    """Load and validate the stored manifest.

    Raises ``ManifestNotFoundError`` when nothing is stored and
    ``ManifestCorruptError`` when the bytes do not form a valid manifest.
    """
    raw = store.get(key)
    if raw is None:
        raise ManifestNotFoundError(key)
    try:
        return Manifest.model_validate(json.loads(raw))
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as exc:
        raise ManifestCorruptError(key, str(exc)) from exc


def dump_manifest(manifest: Manifest) -> bytes:
    """Serialize a manifest to the JSON bytes that are stored and served."""
    return json.dumps(
        manifest.to_json_dict(),
        ensure_ascii=False,
    ).encode("utf-8")


def save_manifest(
    store: ManifestStore,
    manifest: Manifest,
    key: str = MANIFEST_KEY,
) -> None:
    """Publish *manifest* under *key*."""
    store.put(key, dump_manifest(manifest))
