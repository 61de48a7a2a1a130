"""
Parallel execution engine
=========================
Applies one shared cipher to every segment of a text concurrently and
stitches the pieces back together.

    text --prepare--> prepared --partition--> segments
         --apply (one task per segment)--> SegmentResults
         --wait for all--> reassemble in index order --> output

The join waits on every future (concurrent.futures.wait with
ALL_COMPLETED). Output order comes from segment indices only, never from
completion order. If any task raised, all results are discarded and a
single WorkerFailure naming every failed segment is raised instead.
"""

import concurrent.futures
import logging
from dataclasses import dataclass
from typing import Iterable, List

from .ciphers import Cipher, CipherMode
from .config import DEFAULT_EXECUTOR, DEFAULT_WORKERS, EXECUTORS
from .exceptions import CipherError, WorkerFailure
from .factory import create_cipher
from .partition import Segment, partition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SegmentResult:
    index: int
    text: str


def _apply_segment(cipher: Cipher, segment: Segment, mode: CipherMode) -> SegmentResult:
    # Runs inside a worker thread or process.
    logger.debug(f"[worker {segment.index}] start @{segment.start} ({len(segment.text)} chars)")
    out = cipher.apply(segment.text, mode, segment.start)
    logger.debug(f"[worker {segment.index}] done")
    return SegmentResult(segment.index, out)


def _init_worker_logging(level: int) -> None:
    # Spawned children start with an unconfigured root logger.
    logging.basicConfig(level=level, format=' %(message)s')


def reassemble(results: Iterable[SegmentResult]) -> str:
    """Concatenate segment outputs in ascending index order."""
    return "".join(r.text for r in sorted(results, key=lambda r: r.index))


class ParallelEngine:
    """Fan a cipher out over N workers and join the results."""

    def __init__(self, workers: int = DEFAULT_WORKERS, executor: str = DEFAULT_EXECUTOR):
        if executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {EXECUTORS}, got {executor!r}")
        self._workers  = workers
        self._executor = executor

    @property
    def workers(self) -> int:
        return self._workers

    def _pool(self, size: int) -> concurrent.futures.Executor:
        if self._executor == "process":
            return concurrent.futures.ProcessPoolExecutor(
                max_workers=size,
                initializer=_init_worker_logging,
                initargs=(logger.getEffectiveLevel(),),
            )
        return concurrent.futures.ThreadPoolExecutor(
            max_workers=size, thread_name_prefix="cipher-worker"
        )

    def split(self, cipher: Cipher, text: str, mode: CipherMode) -> List[Segment]:
        """Prepare the whole text once, then partition it for `cipher`."""
        try:
            prepared = cipher.prepare(text, mode)
        except CipherError as exc:
            raise WorkerFailure([(0, exc)]) from exc
        return partition(prepared, self._workers, cipher.block_size)

    def run(self, cipher: Cipher, text: str, mode: CipherMode) -> str:
        """
        Transform `text` and return the result.

        Identical to cipher.apply(text, mode) for every worker count.
        Raises PartitionError for a worker count below one and
        WorkerFailure if any segment fails.
        """
        segments = self.split(cipher, text, mode)
        if not segments:
            return ""
        logger.info(
            f"Running {cipher!r} ({mode.value}) over {len(text)} chars "
            f"in {len(segments)} segment(s) [{self._executor}]"
        )

        with self._pool(len(segments)) as pool:
            futures = [
                pool.submit(_apply_segment, cipher, seg, mode) for seg in segments
            ]
            concurrent.futures.wait(futures, return_when=concurrent.futures.ALL_COMPLETED)

        results, errors = [], []
        for seg, fut in zip(segments, futures):
            exc = fut.exception()
            if exc is not None:
                errors.append((seg.index, exc))
            else:
                results.append(fut.result())
        if errors:
            logger.error(f"{len(errors)} of {len(segments)} worker(s) failed")
            raise WorkerFailure(errors)

        output = reassemble(results)
        logger.info(f"Reassembled {len(output)} chars")
        return output


def run_cipher(text: str, kind, key: str,
               mode: CipherMode = CipherMode.ENCRYPT,
               workers: int = DEFAULT_WORKERS,
               executor: str = DEFAULT_EXECUTOR) -> str:
    """Build the cipher for (kind, key) and run it in parallel over `text`."""
    cipher = create_cipher(kind, key)
    return ParallelEngine(workers, executor).run(cipher, text, mode)
