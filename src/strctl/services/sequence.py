"""SequenceService: caller operations over one current character sequence.

Each method maps one caller action (read, show, index, slice, append,
concatenate, repeat, transform, compare) onto the domain contract.

INVARIANT: Methods return ServiceResult and never raise StringError.
Domain failures are caught by the common StringError base and reported
as ``ServiceResult(ok=False)``; the current sequence is left as it was.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, Any

from strctl.config.models import LimitsConfig
from strctl.domain import algebra
from strctl.domain.errors import InvalidRangeError, OutOfRangeError, StringError
from strctl.domain.sequence import Sequence
from strctl.domain.textio import read_token, write_text
from strctl.domain.transform import ToUpperChar, get_transformer, list_transformers
from strctl.services.result import ServiceError, ServiceResult
from strctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from typing import TextIO

    from strctl.domain.transform import Transformer

logger = logging.getLogger(__name__)


def _error_code(exc: StringError) -> str:
    if isinstance(exc, OutOfRangeError):
        return "OUT_OF_RANGE"
    if isinstance(exc, InvalidRangeError):
        return "INVALID_RANGE"
    return "STRING_ERROR"


class SequenceService:
    """Run caller actions against a single owned character sequence.

    Usage::

        svc = SequenceService(Sequence.from_text("abc"))
        svc.upper().data          # {"value": "ABC", "length": 3, "transformer": "upper"}
        svc.substring(1, 2).data  # {"value": "BC", "length": 2}
        svc.char_at(5).error      # ServiceError(code="OUT_OF_RANGE", ...)
    """

    def __init__(
        self,
        current: Sequence[str] | None = None,
        *,
        limits: LimitsConfig | None = None,
    ) -> None:
        self._current: Sequence[str] = current if current is not None else Sequence()
        self._limits = limits or LimitsConfig()

    @property
    def current(self) -> Sequence[str]:
        return self._current

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _value(self) -> dict[str, Any]:
        return {"value": self._current.c_str(), "length": self._current.size()}

    @staticmethod
    def _domain_failure(op: str, exc: StringError) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc.message)
        detail: dict[str, Any] = {}
        if isinstance(exc, OutOfRangeError):
            detail["index"] = exc.index
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=_error_code(exc), message=exc.message, detail=detail),
        )

    def _over_limit(self, op: str, requested: int) -> ServiceResult | None:
        limit = self._limits.max_length
        if requested <= limit:
            return None
        logger.debug("%s refused: %d elements exceeds limit %d", op, requested, limit)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="LIMIT_EXCEEDED",
                message=f"Result length {requested} exceeds the configured limit {limit}",
                detail={"limit": limit, "requested": requested},
            ),
        )

    # ------------------------------------------------------------------
    # Input / output
    # ------------------------------------------------------------------

    @traced
    def read(self, stream: TextIO) -> ServiceResult:
        """Replace the current sequence with the next token from *stream*."""
        warnings: list[str] = []
        if not read_token(stream, self._current):
            warnings.append("No token available; sequence cleared")
        return ServiceResult(ok=True, op="read", data=self._value(), warnings=warnings)

    @traced
    def show(self) -> ServiceResult:
        buf = write_text(io.StringIO(), self._current)
        return ServiceResult(ok=True, op="show", data={"value": buf.getvalue()})

    @traced
    def length(self) -> ServiceResult:
        return ServiceResult(ok=True, op="length", data={"length": self._current.size()})

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @traced
    def char_at(self, index: int) -> ServiceResult:
        try:
            ch = self._current.at(index)
        except StringError as exc:
            return self._domain_failure("char_at", exc)
        return ServiceResult(ok=True, op="char_at", data={"index": index, "char": ch})

    @traced
    def substring(self, start: int, length: int) -> ServiceResult:
        try:
            sub = self._current.slice(start, length)
        except StringError as exc:
            return self._domain_failure("substring", exc)
        return ServiceResult(
            ok=True,
            op="substring",
            data={"value": sub.c_str(), "length": sub.size()},
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    @traced
    def append(self, char: str) -> ServiceResult:
        """Append exactly one character to the current sequence."""
        if len(char) != 1:
            return ServiceResult(
                ok=False,
                op="append",
                error=ServiceError(
                    code="INVALID_INPUT",
                    message=f"Expected a single character, got {char!r}",
                ),
            )
        if over := self._over_limit("append", self._current.size() + 1):
            return over
        self._current.append(char)
        return ServiceResult(ok=True, op="append", data=self._value())

    @traced
    def concat(self, other_text: str) -> ServiceResult:
        other = Sequence.from_text(other_text)
        if over := self._over_limit("concat", self._current.size() + other.size()):
            return over
        with trace_span("algebra.concat") as span:
            self._current.assign_from(algebra.concat(self._current, other))
            if span:
                span.annotate("length", self._current.size())
        return ServiceResult(ok=True, op="concat", data=self._value())

    @traced
    def repeat(self, times: int) -> ServiceResult:
        """Tile the current sequence *times* times. Non-positive counts empty it."""
        if over := self._over_limit("repeat", self._current.size() * max(times, 0)):
            return over
        with trace_span("algebra.repeat") as span:
            self._current.assign_from(algebra.repeat(self._current, times))
            if span:
                span.annotate("length", self._current.size())
        return ServiceResult(ok=True, op="repeat", data=self._value())

    @traced
    def transform(self, name: str) -> ServiceResult:
        """Apply the registered transformer *name* in place."""
        try:
            transformer = get_transformer(name)
        except KeyError:
            available = list_transformers()
            return ServiceResult(
                ok=False,
                op="transform",
                error=ServiceError(
                    code="UNKNOWN_TRANSFORMER",
                    message=f"No transformer named {name!r}",
                    detail={"available": available},
                ),
            )
        return self._apply("transform", name, transformer)

    @traced
    def upper(self) -> ServiceResult:
        return self._apply("upper", "upper", ToUpperChar())

    def _apply(self, op: str, name: str, transformer: Transformer[Any]) -> ServiceResult:
        self._current.apply(transformer)
        data = self._value()
        data["transformer"] = name
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @traced
    def compare(self, other_text: str) -> ServiceResult:
        other = Sequence.from_text(other_text)
        return ServiceResult(
            ok=True,
            op="compare",
            data={
                "equal": algebra.equal(self._current, other),
                "less": algebra.less(self._current, other),
                "greater": algebra.greater(self._current, other),
            },
        )
