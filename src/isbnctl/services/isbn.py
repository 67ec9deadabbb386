"""IsbnService — check, convert, and describe single identifiers.

Every operation takes the raw string exactly as the user typed it and
reports domain failures as ``ServiceResult(ok=False)`` with the error
kind as code. One identifier per call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from isbnctl.config.models import Form
from isbnctl.domain.errors import BooklandError, ISBNError, RangeError
from isbnctl.domain.isbn import ISBN
from isbnctl.domain.ranges import RangeTable, default_range_table, load_range_table
from isbnctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from isbnctl.config.settings import IsbnSettings
    from isbnctl.domain.segments import RangeSegmenter

logger = logging.getLogger(__name__)

_RENDERERS: dict[Form, Callable[[ISBN], str]] = {
    Form.ISBN10: ISBN.to10,
    Form.ISBN13: ISBN.to13,
    Form.HYPHEN: ISBN.hyphen,
    Form.URN: ISBN.urn,
    Form.DOI: ISBN.doi,
}


class IsbnService:
    """ISBN operations bound to one range segmenter.

    Usage::

        svc = IsbnService()
        svc.convert("0-12-345672-X", Form.HYPHEN).data["value"]
        # "978-0-12-345672-4"
    """

    def __init__(self, segmenter: RangeSegmenter | None = None) -> None:
        self._segmenter = default_range_table() if segmenter is None else segmenter

    @classmethod
    def from_settings(cls, settings: IsbnSettings) -> IsbnService:
        """Build a service using the range table configured in *settings*.

        Raises:
            OSError, tomllib.TOMLDecodeError, pydantic.ValidationError:
                the configured table cannot be loaded.
        """
        path = settings.ranges.path
        if path is None:
            return cls()
        return cls(load_range_table(path))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self, raw: str) -> ServiceResult:
        """Validate *raw* and report its canonical ISBN13 form."""
        op = "check"
        try:
            isbn = self._parse(raw)
        except ISBNError as exc:
            return self._failure(op, exc, raw)
        return ServiceResult(ok=True, op=op, data={"input": raw, "isbn13": isbn.to13()})

    def convert(self, raw: str, form: Form | str = Form.ISBN13) -> ServiceResult:
        """Render *raw* in a single *form*.

        An unknown *form* fails with code ``FORM`` before *raw* is parsed.
        """
        op = "convert"
        try:
            form = Form(form)
        except ValueError:
            logger.debug("%s failed for %r: unknown form %r", op, raw, form)
            error = ServiceError(
                code="FORM",
                message=f"Unknown form: {form!r}",
                detail={"form": str(form), "choices": [str(f) for f in Form]},
            )
            return ServiceResult(ok=False, op=op, error=error)
        try:
            value = _RENDERERS[form](self._parse(raw))
        except ISBNError as exc:
            return self._failure(op, exc, raw)
        return ServiceResult(
            ok=True,
            op=op,
            data={"input": raw, "form": str(form), "value": value},
            meta=self._meta(),
        )

    def show(self, raw: str) -> ServiceResult:
        """Render *raw* in every form.

        Forms that don't exist for this identifier (ISBN10 of a 979 number,
        hyphenation of an unregistered one) are reported as None with a
        warning rather than failing the whole operation.
        """
        op = "show"
        try:
            isbn = self._parse(raw)
        except ISBNError as exc:
            return self._failure(op, exc, raw)

        warnings: list[str] = []
        data: dict[str, Any] = {"input": raw, "prefix": isbn.prefix}
        for form, render in _RENDERERS.items():
            try:
                data[str(form)] = render(isbn)
            except (BooklandError, RangeError) as exc:
                data[str(form)] = None
                warnings.append(f"{form}: {exc}")
        data["agency"] = self._agency(isbn)

        return ServiceResult(ok=True, op=op, data=data, warnings=warnings, meta=self._meta())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse(self, raw: str) -> ISBN:
        return ISBN(raw, segmenter=self._segmenter)

    def _agency(self, isbn: ISBN) -> str | None:
        if isinstance(self._segmenter, RangeTable):
            return self._segmenter.agency(isbn.to13())
        return None

    def _meta(self) -> dict[str, Any] | None:
        if isinstance(self._segmenter, RangeTable) and self._segmenter.serial:
            return {"ranges_serial": self._segmenter.serial}
        return None

    @staticmethod
    def _failure(op: str, exc: ISBNError, raw: Any) -> ServiceResult:
        logger.debug("%s failed for %r: %s", op, raw, exc.kind)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_isbn_error(exc, raw))
