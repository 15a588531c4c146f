"""Remote sink posting error records to a collection endpoint."""

import asyncio
import atexit
import json
import threading
from functools import partial

import httpx

from ..config import ConfigError, RemoteLoggingConfig
from ..logging_config import get_logger
from ..models import DeliveryResult, ErrorRecord

logger = get_logger(__name__)

CONTENT_TYPE = "application/json;charset=UTF-8"

# Seconds the interpreter waits at exit for deliveries started off-loop
SHUTDOWN_GRACE = 5.0

Delivery = asyncio.Task | threading.Thread


def notify_callbacks(result: DeliveryResult, remote: RemoteLoggingConfig) -> None:
    """Invoke the success callback for a 2xx result, the error callback otherwise."""
    if result.ok and remote.success_callback:
        remote.success_callback()
    elif not result.ok and remote.error_callback:
        remote.error_callback()


class RemoteSink:
    """
    Fire-and-forget HTTP delivery of error records.

    Inside a running event loop, send() schedules the POST as a task and
    returns it at once; the callbacks run on the loop when it completes.
    Without a running loop (interpreter excepthook, worker threads) the POST
    runs on a daemon thread with its own loop and send() returns the thread.
    At interpreter exit those threads get `shutdown_grace` seconds to finish.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        shutdown_grace: float = SHUTDOWN_GRACE,
    ):
        self._transport = transport
        self._shutdown_grace = shutdown_grace
        self._pending: set[asyncio.Task] = set()
        self._threads: set[threading.Thread] = set()
        self._atexit_registered = False

    @property
    def pending(self) -> int:
        """Number of deliveries still in flight."""
        return len(self._pending) + len(self._threads)

    def send(
        self, record: ErrorRecord, remote: RemoteLoggingConfig
    ) -> Delivery:
        """
        Deliver `record` to `remote.url` without waiting for the response.

        Args:
            record: Enriched error.
            remote: Remote settings captured at dispatch time.

        Returns:
            The delivery task, or the delivery thread when no event loop
            is running in the calling thread.

        Raises:
            ConfigError: If no URL is configured. Raised before any request.
        """
        if not remote.url:
            raise ConfigError("Provide remote URL to log errors.")

        body = json.dumps(record.to_payload()).encode("utf-8")

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None:
            return self._start_thread(remote, body)

        task = loop.create_task(self.deliver(remote.url, body, remote.timeout))
        self._pending.add(task)
        task.add_done_callback(partial(self._on_done, remote))
        logger.debug("Remote delivery scheduled to %s", remote.url)
        return task

    async def deliver(self, url: str, body: bytes, timeout: float | None = None) -> DeliveryResult:
        """POST a JSON body; transport errors become a failed result."""
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=timeout) as client:
                response = await client.post(
                    url,
                    content=body,
                    headers={"Content-type": CONTENT_TYPE},
                )
        except httpx.HTTPError as e:
            return DeliveryResult(ok=False, error=str(e))

        return DeliveryResult(ok=response.is_success, status_code=response.status_code)

    def join_pending(self, timeout: float | None = None) -> None:
        """Wait up to `timeout` seconds for off-loop deliveries to finish."""
        for thread in list(self._threads):
            thread.join(timeout)

    def _start_thread(self, remote: RemoteLoggingConfig, body: bytes) -> threading.Thread:
        thread = threading.Thread(
            target=self._deliver_in_thread,
            args=(remote, body),
            name="error-logger-delivery",
            daemon=True,
        )
        self._threads.add(thread)
        if not self._atexit_registered:
            atexit.register(self.join_pending, self._shutdown_grace)
            self._atexit_registered = True
        thread.start()
        logger.debug("Remote delivery started on thread to %s", remote.url)
        return thread

    def _deliver_in_thread(self, remote: RemoteLoggingConfig, body: bytes) -> None:
        try:
            result = asyncio.run(self.deliver(remote.url, body, remote.timeout))
            notify_callbacks(result, remote)
        finally:
            self._threads.discard(threading.current_thread())

    def _on_done(self, remote: RemoteLoggingConfig, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        notify_callbacks(task.result(), remote)
