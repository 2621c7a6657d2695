"""TensorRT-LLM backend handle.

The router owns the executor worker process: ``start()`` spawns it and
``shutdown()`` terminates it, killing it if it does not exit in time.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from ...state import FastTokenizer
from ...config.backends import BACKEND_TRTLLM, TRT_WORKER_SHUTDOWN_TIMEOUT_S
from ..base import Backend

logger = logging.getLogger(__name__)


class TrtLlmBackend(Backend):
    """Executor-worker backed TensorRT-LLM handle.

    Args:
        tokenizer: Directly loadable tokenizer used for request validation.
        model_id: Model the worker should serve (None lets the worker decide).
        executor_worker: Path of the worker binary.
        max_concurrent_requests: Concurrency ceiling forwarded to the worker.
    """

    name = BACKEND_TRTLLM

    def __init__(
        self,
        tokenizer: FastTokenizer,
        model_id: str | None,
        executor_worker: Path,
        max_concurrent_requests: int,
    ) -> None:
        self.tokenizer = tokenizer
        self.model_id = model_id
        self.executor_worker = executor_worker
        self.max_concurrent_requests = max_concurrent_requests
        self._process: asyncio.subprocess.Process | None = None

    def worker_command(self) -> list[str]:
        command = [str(self.executor_worker)]
        if self.model_id:
            command += ["--model-id", self.model_id]
        command += ["--max-concurrent-requests", str(self.max_concurrent_requests)]
        return command

    async def start(self) -> None:
        if self._process is not None:
            return
        command = self.worker_command()
        self._process = await asyncio.create_subprocess_exec(*command)
        logger.info("TRT-LLM: executor worker started (pid=%s, cmd=%s)", self._process.pid, " ".join(command))

    async def health(self) -> bool:
        return self._process is not None and self._process.returncode is None

    async def shutdown(self) -> None:
        process = self._process
        if process is None or process.returncode is not None:
            return
        process.terminate()
        try:
            await asyncio.wait_for(process.wait(), timeout=TRT_WORKER_SHUTDOWN_TIMEOUT_S)
        except asyncio.TimeoutError:
            logger.warning("TRT-LLM: executor worker did not exit; killing pid=%s", process.pid)
            process.kill()
            await process.wait()
        logger.info("TRT-LLM: executor worker stopped (returncode=%s)", process.returncode)

    def describe(self) -> dict[str, Any]:
        return {
            "backend": self.name,
            "model_id": self.model_id,
            "executor_worker": str(self.executor_worker),
            "max_concurrent_requests": self.max_concurrent_requests,
        }


__all__ = ["TrtLlmBackend"]
