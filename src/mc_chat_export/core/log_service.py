"""Log loading and the classify/extract pass.

This module is the main integration point that reads a log file and returns
extracted chat records in file order.
"""

from __future__ import annotations

import asyncio
import gzip
import logging
import os
import zlib
from collections.abc import AsyncIterator, Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .classifier import ChatClassifier, build_classifier
from .config import MAX_WORKERS_ENV
from .errors import InputError
from .extractor import ChatExtractor
from .models import ExtractedRecord

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a log file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors, newline="\n")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(
            path, encoding=encoding, errors=decode_errors, newline="\n"
        ) as f:
            yield f


def resolve_max_workers(max_workers: int | None) -> int:
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        return max_workers

    env = os.getenv(MAX_WORKERS_ENV)
    if env:
        try:
            value = int(env)
        except ValueError as exc:
            raise ValueError(f"{MAX_WORKERS_ENV} must be an integer") from exc
        if value < 1:
            raise ValueError(f"{MAX_WORKERS_ENV} must be >= 1")
        return value

    cpu_count = os.cpu_count() or 1
    return min(32, cpu_count)


def process_line(
    line_no: int,
    line: str,
    *,
    classifier: ChatClassifier,
    extractor: ChatExtractor,
) -> ExtractedRecord | None:
    """Classify one line and extract it if it is a chat message."""
    shape = classifier.classify(line)
    if shape is None:
        return None
    return extractor.extract(line, line_no=line_no, shape=shape.name)


async def _run_pipeline(
    work_iter: AsyncIterator[tuple[int, object]],
    *,
    worker_count: int,
    processor: Callable[[object], Awaitable[ExtractedRecord | None]],
) -> AsyncIterator[ExtractedRecord]:
    """Process items concurrently, yielding results in sequence order."""
    if worker_count < 1:
        raise ValueError("worker_count must be >= 1")

    queue_size = max(1, worker_count * 4)
    work_queue: asyncio.Queue[tuple[object, object]] = asyncio.Queue(maxsize=queue_size)
    result_queue: asyncio.Queue[tuple[object, ExtractedRecord | None]] = asyncio.Queue(
        maxsize=queue_size
    )
    work_sentinel = object()
    done_sentinel = object()
    errors: list[Exception] = []

    async def reader() -> None:
        try:
            async for seq, item in work_iter:
                await work_queue.put((seq, item))
        except Exception as exc:
            errors.append(exc)
        finally:
            for _ in range(worker_count):
                await work_queue.put((work_sentinel, None))

    async def worker() -> None:
        try:
            while True:
                seq, item = await work_queue.get()
                if seq is work_sentinel:
                    break
                record = await processor(item)
                await result_queue.put((seq, record))
        except Exception as exc:
            errors.append(exc)
        finally:
            await result_queue.put((done_sentinel, None))

    reader_task = asyncio.create_task(reader())
    worker_tasks = [asyncio.create_task(worker()) for _ in range(worker_count)]

    pending: dict[int, ExtractedRecord | None] = {}
    next_seq = 0
    done_workers = 0

    try:
        while True:
            seq, record = await result_queue.get()
            if seq is done_sentinel:
                done_workers += 1
                if done_workers == worker_count:
                    break
                continue

            pending[seq] = record
            while next_seq in pending:
                next_record = pending.pop(next_seq)
                if next_record is not None:
                    yield next_record
                next_seq += 1

        if errors:
            raise errors[0]
    finally:
        reader_task.cancel()
        for task in worker_tasks:
            task.cancel()
        await asyncio.gather(reader_task, *worker_tasks, return_exceptions=True)


async def iter_records(
    log_path: str | Path,
    *,
    classifier: ChatClassifier | None = None,
    extractor: ChatExtractor | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
    max_workers: int | None = None,
) -> AsyncIterator[ExtractedRecord]:
    """Yield chat records in file order.

    Raises InputError if the file is missing or unreadable and lets
    ExtractionError propagate unchanged.
    """
    path = Path(log_path)
    if not path.is_file():
        raise InputError(f"Log file not found: {path}")

    classifier = classifier or build_classifier()
    extractor = extractor or ChatExtractor()
    workers = resolve_max_workers(max_workers)
    parallel_ok = workers > 1 and path.suffix.lower() != ".gz"
    logger.debug("Reading %s (workers=%d, parallel=%s)", path, workers, parallel_ok)

    try:
        if parallel_ok:
            loop = asyncio.get_running_loop()

            async def line_work_iter() -> AsyncIterator[tuple[int, object]]:
                async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
                    async for line_no, line in _enumerate_async(f, start=1):
                        yield line_no - 1, (line_no, line.rstrip("\r\n"))

            async def process_item(item: object) -> ExtractedRecord | None:
                line_no, line = item
                return await loop.run_in_executor(
                    executor,
                    lambda: process_line(line_no, line, classifier=classifier, extractor=extractor),
                )

            executor = ThreadPoolExecutor(max_workers=workers)
            try:
                async for record in _run_pipeline(
                    line_work_iter(),
                    worker_count=workers,
                    processor=process_item,
                ):
                    yield record
            finally:
                executor.shutdown(wait=True)
            return

        async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
            async for line_no, line in _enumerate_async(f, start=1):
                record = process_line(
                    line_no, line.rstrip("\r\n"), classifier=classifier, extractor=extractor
                )
                if record is not None:
                    yield record
    except (OSError, EOFError, zlib.error) as exc:
        raise InputError(f"Unable to read {path}: {exc}") from exc


async def get_records(log_path: str | Path, **iter_kwargs) -> list[ExtractedRecord]:
    """Collect iter_records into a list."""
    records = [record async for record in iter_records(log_path, **iter_kwargs)]
    logger.debug("Extracted %d chat message(s) from %s", len(records), log_path)
    return records


async def _enumerate_async(iterable, start: int = 0):
    """Async enumerate helper for async iterators."""
    index = start
    async for item in iterable:
        yield index, item
        index += 1
