# repositories/json_file.py
"""Whole-file JSON documents with atomic replace.

Every mutation reads the full document, changes it in memory, writes the
result to a temporary file in the same directory and renames it over the
original. Readers therefore always see either the old or the new document.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from typing import Any, Callable, Generator, TypeVar

from utils.exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _fsync_dir(directory: str) -> None:
    """rename 之后同步目录项；不支持目录 fd 的平台（Windows）跳过。"""
    if not hasattr(os, "O_DIRECTORY"):
        return
    try:
        fd = os.open(directory, os.O_RDONLY | os.O_DIRECTORY)
    except OSError as e:
        logger.warning("cannot open %s for fsync: %s", directory, e)
        return
    try:
        os.fsync(fd)
    except OSError as e:
        # 文件已完整替换，目录同步失败只影响断电后的持久性
        logger.warning("directory fsync failed for %s: %s", directory, e)
    finally:
        os.close(fd)


class JsonFileStore:

    def __init__(self, path: str, default_factory: Callable[[], Any]):
        self.path = os.path.abspath(path)
        self._default_factory = default_factory
        self._expected_type = type(default_factory())
        # 同一进程内串行化读-改-写，不覆盖多进程场景
        self._lock = threading.RLock()

    def ensure(self) -> None:
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with self._lock:
            if not os.path.exists(self.path):
                self.write(self._default_factory())

    def read(self) -> Any:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            return self._default_factory()
        except OSError as e:
            logger.error("failed to read %s: %s", self.path, e)
            raise StorageError(f"Unable to read {os.path.basename(self.path)}") from e

        if not raw.strip():
            return self._default_factory()
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.error("corrupt store file %s: %s", self.path, e)
            raise StorageError(f"Corrupt data file {os.path.basename(self.path)}") from e
        if not isinstance(data, self._expected_type):
            logger.error("unexpected document type in %s: %s", self.path, type(data).__name__)
            raise StorageError(f"Corrupt data file {os.path.basename(self.path)}")
        return data

    def write(self, data: Any) -> None:
        directory = os.path.dirname(self.path)
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=os.path.basename(self.path) + ".", suffix=".tmp", dir=directory
            )
        except OSError as e:
            logger.error("failed to create temp file for %s: %s", self.path, e)
            raise StorageError(f"Unable to write {os.path.basename(self.path)}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            logger.error("failed to write %s: %s", self.path, e)
            raise StorageError(f"Unable to write {os.path.basename(self.path)}") from e
        _fsync_dir(directory)

    @contextmanager
    def locked(self) -> Generator["JsonFileStore", None, None]:
        with self._lock:
            yield self

    def update(self, fn: Callable[[Any], T]) -> T:
        """fn 原地修改文档并返回结果；修改后的文档整体写回。"""
        with self._lock:
            data = self.read()
            result = fn(data)
            self.write(data)
            return result
