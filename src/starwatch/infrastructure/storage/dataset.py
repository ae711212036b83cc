"""JSON dataset storage.

Each track persists its records as one pretty-printed JSON array. The file
is the only state carried between runs and is also what the display layer
reads, so its shape must stay stable.
"""

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from starwatch.core.exceptions import StorageError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class DatasetStorage(Generic[RecordT]):
    """Load and overwrite a JSON array of tracked records."""

    def __init__(self, path: Path | str, record_model: type[RecordT]):
        self.path = Path(path)
        self.record_model = record_model

    def load(self) -> list[RecordT]:
        """Load the stored records.

        A missing file is the normal first-run state. An unreadable or
        corrupt file is treated the same way (logged, not raised): the run
        starts from an empty dataset. Individual records that fail
        validation are skipped so the rest of the history survives.
        """
        if not self.path.exists():
            logger.info("No existing dataset at %s, starting fresh", self.path)
            return []

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not read dataset %s (%s), starting fresh", self.path, exc)
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Dataset %s is not valid JSON (%s), starting fresh", self.path, exc)
            return []

        if not isinstance(data, list):
            logger.warning("Dataset %s is not a JSON array, starting fresh", self.path)
            return []

        records: list[RecordT] = []
        for index, entry in enumerate(data):
            try:
                records.append(self.record_model.model_validate(entry))
            except ValidationError as exc:
                logger.warning(
                    "Skipping invalid record #%d in %s (%d error(s))",
                    index,
                    self.path,
                    exc.error_count(),
                )

        logger.debug("Loaded %d records from %s", len(records), self.path)
        return records

    def save(self, records: Sequence[RecordT]) -> None:
        """Overwrite the dataset with ``records``.

        Writes a sibling temporary file and renames it over the target, so
        readers never observe a partially written array.

        Raises:
            StorageError: If the file cannot be written.
        """
        payload = [record.model_dump(mode="json") for record in records]
        text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(text)
                # mkstemp creates 0600; published files follow the umask
                os.chmod(tmp_name, 0o666 & ~_current_umask())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Failed to write dataset {self.path}: {exc}") from exc

        logger.debug("Saved %d records to %s", len(payload), self.path)


__all__ = ["DatasetStorage"]
