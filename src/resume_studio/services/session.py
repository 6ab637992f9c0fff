"""Interactive editing session.

The session owns the current :class:`ResumeDocument` value and replaces it
wholesale on every edit. Enhancement calls run on a small worker pool; when
one completes its result is applied to whatever the document is at that
moment, so the last response for a field wins.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from resume_studio.constants.defaults import INITIAL_RESUME_DATA
from resume_studio.models.document import ResumeDocument
from resume_studio.richtext import strip_markup
from resume_studio.services.enhancement import EnhancementGateway
from resume_studio.services.preview_scale import FitController
from resume_studio.templates import PageTree, render

logger = logging.getLogger(__name__)

__all__ = ["ApplyResult", "EditingSession"]

ApplyResult = Callable[[ResumeDocument, str], ResumeDocument]


class EditingSession:
    """Holds one document and its in-flight enhancement calls.

    Args:
        document: Starting document. Defaults to the sample resume.
        enhancer: Gateway used by :meth:`enhance` and :meth:`generate`.
        max_workers: Size of the enhancement worker pool.
    """

    def __init__(
        self,
        document: ResumeDocument | None = None,
        enhancer: EnhancementGateway | None = None,
        *,
        max_workers: int = 4,
    ) -> None:
        self._document = document if document is not None else INITIAL_RESUME_DATA
        self.enhancer = enhancer or EnhancementGateway()
        self.fit = FitController()
        self._lock = threading.Lock()
        self._pending: dict[str, tuple[object, Future[str]]] = {}
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="enhance")
        self._closed = False

    def __enter__(self) -> EditingSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def document(self) -> ResumeDocument:
        return self._document

    @property
    def closed(self) -> bool:
        return self._closed

    def load(self, document: ResumeDocument) -> None:
        """Replace the current document, e.g. after loading a stored version."""
        with self._lock:
            self._document = document

    def apply(self, op: Callable[..., ResumeDocument], *args: Any) -> ResumeDocument:
        """Run ``op(document, *args)`` and make its result the current document."""
        with self._lock:
            self._document = op(self._document, *args)
            return self._document

    def preview(self) -> PageTree:
        """Render the current document, scaled for the current viewport."""
        return render(self._document).with_scale(self.fit.scale)

    # -- enhancement -------------------------------------------------------

    def is_pending(self, field_id: str) -> bool:
        with self._lock:
            return field_id in self._pending

    @property
    def pending_fields(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._pending)

    def enhance(
        self, field_id: str, text: str, context: str, apply_result: ApplyResult
    ) -> Future[str]:
        """Improve *text* in the background and write the result back.

        Markup is stripped before the text is sent.
        """
        plain = strip_markup(text)
        return self._submit(field_id, apply_result, self.enhancer.improve, plain, context)

    def generate(self, field_id: str, topic: str, apply_result: ApplyResult) -> Future[str]:
        """Generate a bullet for *topic* in the background and write it back.

        An empty result leaves the document untouched.
        """
        return self._submit(field_id, apply_result, self.enhancer.generate, topic)

    def _submit(
        self,
        field_id: str,
        apply_result: ApplyResult,
        call: Callable[..., str],
        *args: str,
    ) -> Future[str]:
        if self._closed:
            raise RuntimeError("Editing session is closed")
        ticket = object()
        with self._lock:
            future = self._executor.submit(self._run, field_id, ticket, apply_result, call, *args)
            self._pending[field_id] = (ticket, future)
        return future

    def _run(
        self,
        field_id: str,
        ticket: object,
        apply_result: ApplyResult,
        call: Callable[..., str],
        *args: str,
    ) -> str:
        # Runs on a worker; the result is applied before the future resolves.
        try:
            result = call(*args)
        except Exception:
            logger.exception("Enhancement for %s failed", field_id)
            result = ""
        with self._lock:
            pending = self._pending.get(field_id)
            if pending is not None and pending[0] is ticket:
                del self._pending[field_id]
            if self._closed:
                logger.debug("Dropping enhancement result for %s: session closed", field_id)
            elif result:
                self._document = apply_result(self._document, result)
        return result

    def close(self) -> None:
        """Stop applying results. In-flight calls are left to finish."""
        with self._lock:
            self._closed = True
        self._executor.shutdown(wait=False)
