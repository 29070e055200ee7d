import asyncio
import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from task_tracker.core.application.ports import TaskStorePort
from task_tracker.core.domain.task import Task, TaskDraft
from task_tracker.core.exceptions import StoreError, StoreUnavailableError
from task_tracker.infrastructure.observability.logger_factory_service import get_logger
from task_tracker.infrastructure.observability.metrics_service import time_store_call
from task_tracker.infrastructure.repositories.clock import Clock, new_task_id, utc_now
from task_tracker.infrastructure.repositories.task_document_mapper import TaskDocumentMapper

logger = get_logger(__name__)

Document = dict[str, Any]


class FileTaskStoreAdapter(TaskStorePort):
    """
    Keeps every task in a single JSON document: {"tasks": [...]}.
    Blocking file I/O runs in a worker thread; a lock serialises
    read-modify-write cycles so concurrent requests cannot lose updates.
    """

    def __init__(self, file_path: Path, clock: Clock = utc_now) -> None:
        self.file_path = file_path
        self.store_dir = file_path.parent
        self._clock = clock
        self._lock = threading.Lock()

    async def connect(self) -> None:
        try:
            await asyncio.to_thread(self._ensure_store)
        except (OSError, StoreError) as e:
            raise StoreUnavailableError(f"Cannot open task store at {self.file_path}: {e}") from e

    async def insert(self, draft: TaskDraft) -> Task:
        with time_store_call("insert"):
            return await asyncio.to_thread(self._insert, draft)

    async def list_all(self) -> list[Task]:
        with time_store_call("list_all"):
            return await asyncio.to_thread(self._list_all)

    async def delete_by_id(self, task_id: str) -> bool:
        with time_store_call("delete_by_id"):
            return await asyncio.to_thread(self._delete_by_id, task_id)

    async def mark_completed(self, task_id: str) -> Task | None:
        with time_store_call("mark_completed"):
            return await asyncio.to_thread(self._mark_completed, task_id)

    def _ensure_store(self) -> None:
        with self._lock:
            self.store_dir.mkdir(parents=True, exist_ok=True)
            if not self.file_path.exists():
                self._write_documents([])
            else:
                self._read_documents()

    def _insert(self, draft: TaskDraft) -> Task:
        now = self._clock()
        task = Task(
            id=new_task_id(),
            title=draft.title or "",
            description=draft.description or "",
            time_spent=draft.time_spent or "",
            completed=False,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            documents = self._read_documents()
            documents.append(TaskDocumentMapper.to_document(task))
            self._write_documents(documents)
        return task

    def _list_all(self) -> list[Task]:
        with self._lock:
            documents = self._read_documents()
        return [self._to_domain(doc) for doc in documents]

    def _delete_by_id(self, task_id: str) -> bool:
        with self._lock:
            documents = self._read_documents()
            remaining = [doc for doc in documents if doc.get("id") != task_id]
            if len(remaining) == len(documents):
                return False
            self._write_documents(remaining)
        return True

    def _mark_completed(self, task_id: str) -> Task | None:
        with self._lock:
            documents = self._read_documents()
            for index, doc in enumerate(documents):
                if doc.get("id") == task_id:
                    updated = self._to_domain(doc).mark_completed(self._clock())
                    documents[index] = TaskDocumentMapper.to_document(updated)
                    self._write_documents(documents)
                    return updated
        return None

    def _to_domain(self, document: Document) -> Task:
        try:
            return TaskDocumentMapper.to_domain(document)
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"Malformed task document in {self.file_path}: {e}") from e

    def _read_documents(self) -> list[Document]:
        try:
            with open(self.file_path, encoding="utf-8") as f:
                content = f.read().strip()
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Failed to read task store: {e}") from e
        if not content:
            return []
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StoreError(f"Task store is not valid JSON: {e}") from e
        tasks = data.get("tasks") if isinstance(data, dict) else None
        if not isinstance(tasks, list):
            raise StoreError("Task store document has no 'tasks' list")
        if not all(isinstance(doc, dict) for doc in tasks):
            raise StoreError(
                f"Malformed task document in {self.file_path}: entries must be objects"
            )
        return tasks

    def _write_documents(self, documents: list[Document]) -> None:
        """
        Atomic write: write to temp file then rename.
        """
        tmp_path = None
        try:
            # Temp file in the same directory so the rename stays on one filesystem
            with tempfile.NamedTemporaryFile(
                "w", dir=self.store_dir, delete=False, encoding="utf-8", suffix=".tmp"
            ) as tmp:
                tmp_path = tmp.name
                json.dump({"tasks": documents}, tmp, indent=2)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            logger.error("Failed to write task store", error_type=type(e).__name__, error_details=str(e))
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StoreError(f"Failed to write task store: {e}") from e
