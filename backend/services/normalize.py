"""Convert raw Steam payloads into achievements and a percentage map."""

import logging

from pydantic import ValidationError

from errors import ParseError
from models import Achievement, GlobalPercentagesResponse, SchemaResponse

logger = logging.getLogger(__name__)


def parse_schema(body: bytes | str) -> list[Achievement]:
    """Build achievements from a GetSchemaForGame body.

    ``global_pct`` is left at 0.0; the merge step fills it in. Records
    without a key are dropped, and a repeated key keeps its first record,
    so the result never has empty or duplicate keys.
    """
    try:
        resp = SchemaResponse.model_validate_json(body)
    except ValidationError as e:
        raise ParseError("schema", _first_error(e)) from e

    out: list[Achievement] = []
    seen: set[str] = set()
    for raw in resp.game.available_game_stats.achievements:
        if not raw.name:
            logger.warning("Skipping schema achievement without a key: %r", raw.display_name)
            continue
        if raw.name in seen:
            logger.warning("Duplicate schema achievement key %s, keeping the first", raw.name)
            continue
        seen.add(raw.name)
        out.append(
            Achievement(
                api_name=raw.name,
                name=raw.display_name or "",
                description=raw.description or "",
                icon=raw.icon or "",
                icon_gray=raw.icon_gray or "",
                hidden=raw.hidden == 1,
            )
        )
    return out


def parse_global_percentages(body: bytes | str) -> dict[str, float]:
    """Build {api_name: percent} from a global percentages body.

    Last duplicate wins. A null percent counts as 0.0; entries without a key
    can never match an achievement and are skipped.
    """
    try:
        resp = GlobalPercentagesResponse.model_validate_json(body)
    except ValidationError as e:
        raise ParseError("global pct", _first_error(e)) from e

    return {
        a.name: a.percent or 0.0
        for a in resp.achievement_percentages.achievements
        if a.name
    }


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(p) for p in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]
