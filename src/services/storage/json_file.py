"""
JSON File Storage Implementation

DESIGN DECISION: The store is a single JSON array on local disk.
Every command reads the whole file and, if it mutates anything,
rewrites the whole file.

TRADEOFFS:
- No locking: two processes racing on the same file can lose an update
  (acceptable for a single-user tool)
- Whole-file rewrite on every change (we're fine for personal use)

Writes go to a temporary sibling file which then replaces the store,
so readers never see a half-written array.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from pydantic import TypeAdapter, ValidationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt

from src.audit import AuditLogger
from src.models.expense import Expense
from src.services.storage.interface import (
    ExpenseStorageInterface,
    StoreUnreadableError,
    StoreUnwritableError,
)


_EXPENSE_LIST = TypeAdapter(list[Expense])


class JsonFileExpenseStorage(ExpenseStorageInterface):
    """
    File-backed expense storage.

    The path is fixed for the lifetime of the instance; the CLI resolves it
    once from settings and passes it in.
    """

    def __init__(
        self,
        path: Path,
        indent: int = 2,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._path = Path(path)
        self._indent = indent
        self._audit_logger = audit_logger

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> list[Expense]:
        """
        Load all expenses.

        A missing file is not an error: it is created holding an empty
        array and an empty list is returned. Blank content also reads
        as empty.

        Raises:
            StoreUnreadableError: If the file cannot be read or decoded, or
                is missing and cannot be created
        """
        try:
            content = self._path.read_bytes()
        except FileNotFoundError:
            try:
                self.write([])
            except StoreUnwritableError as e:
                raise StoreUnreadableError(
                    f"Expense store {self._path} is missing and could not be created: {e}"
                ) from e
            if self._audit_logger:
                self._audit_logger.log_store_created(str(self._path))
            return []
        except OSError as e:
            raise StoreUnreadableError(
                f"Unable to read expense store {self._path}: {e}"
            ) from e

        if not content.strip():
            return []

        try:
            return _EXPENSE_LIST.validate_json(content)
        except ValidationError as e:
            raise StoreUnreadableError(
                f"Expense store {self._path} is corrupt: "
                f"{e.error_count()} invalid value(s)"
            ) from e

    def write(self, expenses: Sequence[Expense]) -> None:
        """Serialize the full sequence and replace the store file."""
        payload = _EXPENSE_LIST.dump_json(list(expenses), indent=self._indent)
        try:
            self._replace_file(payload + b"\n")
        except OSError as e:
            raise StoreUnwritableError(
                f"Unable to write expense store {self._path}: {e}"
            ) from e

    @retry(
        retry=retry_if_exception_type(FileNotFoundError),
        stop=stop_after_attempt(2),
        reraise=True,
    )
    def _replace_file(self, payload: bytes) -> None:
        """
        Write `payload` to a temp file beside the store, then swap it in.

        If the parent directory is missing it is created and the write is
        attempted once more.
        """
        directory = self._path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=directory,
            )
        except FileNotFoundError:
            directory.mkdir(parents=True, exist_ok=True)
            raise

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.chmod(tmp_name, self._target_mode())
            os.replace(tmp_name, self._path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

    def _target_mode(self) -> int:
        """Permission bits for the store: the existing file's, else 0o666 minus umask."""
        try:
            return stat.S_IMODE(os.stat(self._path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
