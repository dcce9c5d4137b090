"""Click parameter types for UTILKIT commands."""

import json
import logging
from typing import Any

import click

from utilkit.date_utils import to_date

logger = logging.getLogger(__name__)


class JsonArray(click.ParamType):
    """A JSON array given on the command line, e.g. ``'[1, [2, 3]]'``."""

    name = "json-array"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> list:
        if isinstance(value, list):
            return value
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as e:
            self.fail(f"{value!r} is not valid JSON ({e.msg})", param, ctx)
        if not isinstance(parsed, list):
            self.fail(f"expected a JSON array, got {type(parsed).__name__}", param, ctx)
        return parsed


class DateTime(click.ParamType):
    """A date or datetime in any format `utilkit.date_utils.to_date` accepts."""

    name = "date"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        parsed = to_date(value)
        if parsed is None:
            self.fail(f"{value!r} is not a recognizable date", param, ctx)
        logger.debug("Read %r as %s", value, parsed.isoformat())
        return parsed


JSON_ARRAY = JsonArray()
DATE = DateTime()
