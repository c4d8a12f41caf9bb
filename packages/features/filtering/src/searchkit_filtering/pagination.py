"""PaginationParser — offset/limit from query params."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from .config import SearchEndpointConfig
from .exceptions import FilterParseError


class PaginationResult(NamedTuple):
    offset: int
    limit: int


class PaginationParser:
    """Parse offset/limit, clamping ``limit`` to ``[1, max_limit]`` and
    ``offset`` to ``>= 0``. Non-integer values raise ``FilterParseError``.
    """

    def __init__(self, config: SearchEndpointConfig | None = None) -> None:
        self.config = config or SearchEndpointConfig()

    def parse(self, query_params: Mapping[str, Any]) -> PaginationResult:
        cfg = self.config
        offset = self._int_param(query_params, cfg.offset_key)
        limit = self._int_param(query_params, cfg.limit_key)
        return PaginationResult(
            offset=0 if offset is None else max(0, offset),
            limit=(
                cfg.default_limit
                if limit is None
                else min(cfg.max_limit, max(1, limit))
            ),
        )

    @staticmethod
    def _int_param(query_params: Mapping[str, Any], key: str) -> int | None:
        raw = query_params.get(key)
        if raw is None or raw == "":
            return None
        try:
            return int(raw)
        except (TypeError, ValueError) as exc:
            raise FilterParseError({key: [f"must be an integer, got {raw!r}"]}) from exc
