"""REST API and HTML page for fantasy position picks."""

from __future__ import annotations

from html import escape
from typing import Literal, Optional

import httpx
from fastapi import FastAPI, Form, HTTPException, Query
from fastapi.responses import HTMLResponse

from pyhoops.api.schemas import PlayerSummaryResponse, PositionSlotResponse, RecommendationResponse
from pyhoops.config import PERIOD_DAYS, Settings, load_settings
from pyhoops.display import BoardLine, format_failure, render_board
from pyhoops.recommend import RecommendationResult, RecommendationSuccess, recommend


PERIOD_CHOICES: list[tuple[str, str]] = [
    ("week", "Last 7 days"),
    ("month", "Last 30 days"),
]


def _line_to_slot(line: BoardLine) -> PositionSlotResponse:
    player = None
    if line.player is not None:
        player = PlayerSummaryResponse(
            player_id=line.player.player_id,
            name=line.player.name,
            team=line.player.team,
            position=line.player.position,
            score=line.player.score,
            games=line.player.games,
        )
    return PositionSlotResponse(position=line.position, player=player, display=line.as_text())


def success_to_response(result: RecommendationSuccess, period: Optional[str] = None) -> RecommendationResponse:
    return RecommendationResponse(
        period=period,
        start_date=result.start_date,
        end_date=result.end_date,
        records_fetched=result.records_fetched,
        players_ranked=result.players_ranked,
        slots=[_line_to_slot(line) for line in render_board(result.board)],
    )


def _render_page(body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>pyhoops Fantasy Picks</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 2rem; background: #f5f7fa; }}
        main {{ background: #fff; padding: 2rem; border-radius: 12px; box-shadow: 0 2px 6px rgba(0,0,0,0.08); }}
        nav a {{ margin-right: 1rem; color: #2563eb; text-decoration: none; }}
        form {{ display: flex; gap: 1rem; align-items: center; margin-bottom: 2rem; }}
        label {{ font-weight: 600; }}
        button {{ padding: 0.6rem 1.2rem; border-radius: 6px; border: none; background: #2563eb; color: #fff; cursor: pointer; }}
        .player {{ padding: 0.75rem 1rem; border: 1px solid #e2e8f0; border-radius: 8px; margin-bottom: 0.5rem; }}
        .window {{ color: #475569; }}
        .flash {{ padding: 1rem; border-radius: 6px; margin-bottom: 1rem; }}
        .flash.error {{ background: #fef2f2; color: #b91c1c; }}
    </style>
</head>
<body>
    <nav><a href=\"/ui\">Home</a></nav>
    <main>{body}</main>
</body>
</html>"""


def _render_form(selected: str) -> str:
    options = "".join(
        f"<label><input type=\"radio\" name=\"period\" value=\"{value}\"{' checked' if value == selected else ''}> {label}</label>"
        for value, label in PERIOD_CHOICES
    )
    return (
        "<h1>Best Player by Position</h1>"
        f"<form method=\"post\" action=\"/ui\">{options}"
        "<button type=\"submit\" id=\"getRecommendations\">Get Recommendations</button></form>"
    )


def _render_lines(lines: list[BoardLine]) -> str:
    parts: list[str] = []
    for line in lines:
        if line.headline is None:
            parts.append(f"<div class=\"player\"><strong>{line.position}:</strong> {escape(line.detail)}</div>")
        else:
            parts.append(
                f"<div class=\"player\"><strong>{line.position}:</strong> {escape(line.headline)}<br>"
                f"{escape(line.detail)}</div>"
            )
    return "".join(parts)


def _render_result(result: RecommendationResult) -> str:
    if not isinstance(result, RecommendationSuccess):
        return f"<p class=\"flash error\">{escape(format_failure(result.error))}</p>"
    window = (
        f"<p class=\"window\">{result.start_date.isoformat()} to {result.end_date.isoformat()}: "
        f"{result.records_fetched} box scores, {result.players_ranked} players ranked</p>"
    )
    return f"<div id=\"results\">{window}{_render_lines(render_board(result.board))}</div>"


def create_app(
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    app = FastAPI(title="pyhoops fantasy picks")
    app.state.settings = settings or load_settings()
    app.state.http_transport = transport

    async def _run(period: str) -> RecommendationResult:
        async with httpx.AsyncClient(transport=app.state.http_transport) as client:
            return await recommend(period, client=client, base_url=app.state.settings.stats_url)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/recommendations", response_model=RecommendationResponse)
    async def recommendations(period: Literal["week", "month"] = Query("week")):
        result = await _run(period)
        if not isinstance(result, RecommendationSuccess):
            raise HTTPException(status_code=502, detail=format_failure(result.error))
        return success_to_response(result, period)

    @app.get("/ui", response_class=HTMLResponse)
    async def ui_index():
        return HTMLResponse(_render_page(_render_form("week")))

    @app.post("/ui", response_class=HTMLResponse)
    async def ui_handle(period: str = Form("week")):
        if period not in PERIOD_DAYS:
            body = _render_form("week") + f"<p class=\"flash error\">Unknown period: {escape(period)}</p>"
            return HTMLResponse(_render_page(body), status_code=400)
        result = await _run(period)
        return HTMLResponse(_render_page(_render_form(period) + _render_result(result)))

    return app
