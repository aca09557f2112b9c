"""Web surface for the transfer dashboards."""

from __future__ import annotations

import json
import logging
import random
from dataclasses import asdict

from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import HTMLResponse, Response

from transferviz.api.pages import (
    LOAD_ERROR_MESSAGE,
    render_dashboard_page,
    render_error_page,
    render_scatter_page,
)
from transferviz.api.schemas import (
    CombinedPointResponse,
    DashboardResponse,
    DatasetResponse,
    LegendEntryResponse,
    NormalizeReportResponse,
    ScatterPointResponse,
    ScatterResponse,
    SeriesPointResponse,
    SummaryResponse,
    TeamOptionResponse,
    TeamYearStatsResponse,
    YearStatsResponse,
)
from transferviz.charts import DashboardView, build_view, scatter_legend, scatter_points
from transferviz.charts.export import export_yearly_to_csv
from transferviz.config import Settings, load_settings
from transferviz.filters import FilterCriteria
from transferviz.ingest import DatasetLoadError, NormalizeReport
from transferviz.persistence import DatasetRecord, DatasetStore


logger = logging.getLogger("uvicorn.error")


def _parse_year(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid year {raw!r}") from exc


def _parse_mapping(mapping_str: str | None) -> dict[str, str]:
    if not mapping_str:
        return {}
    try:
        mapping = json.loads(mapping_str)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid mapping JSON: {exc}") from exc
    if not isinstance(mapping, dict):
        raise HTTPException(status_code=400, detail="Mapping JSON must be an object")
    return {str(key): str(value) for key, value in mapping.items()}


async def _read_upload(upload: UploadFile | None) -> tuple[str, str]:
    if upload is None:
        raise HTTPException(status_code=400, detail="transfers file is required")
    contents = await upload.read()
    if not contents:
        raise HTTPException(status_code=400, detail="transfers file is empty")
    try:
        text = contents.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail="transfers file is not UTF-8 text") from exc
    return upload.filename or "upload.csv", text


def _report_to_response(report: NormalizeReport) -> NormalizeReportResponse:
    return NormalizeReportResponse(**asdict(report))


def dataset_to_response(dataset: DatasetRecord) -> DatasetResponse:
    return DatasetResponse(
        dataset_id=dataset.dataset_id,
        name=dataset.name,
        created_at=dataset.created_at,
        report=_report_to_response(dataset.report),
    )


def view_to_response(view: DashboardView, *, dataset_id: str) -> DashboardResponse:
    return DashboardResponse(
        dataset_id=dataset_id,
        state=view.state,
        team=view.team,
        year=view.criteria.year,
        summary=SummaryResponse(**view.summary.model_dump()) if view.summary else None,
        yearly=[YearStatsResponse(**item.model_dump()) for item in view.yearly],
        total_spend=[SeriesPointResponse(**asdict(point)) for point in view.total_spend],
        avg_fee=[SeriesPointResponse(**asdict(point)) for point in view.avg_fee],
        transfer_count=[SeriesPointResponse(**asdict(point)) for point in view.transfer_count],
        combined=[CombinedPointResponse(**asdict(point)) for point in view.combined],
        team_stats=(
            [TeamYearStatsResponse(**item.model_dump()) for item in view.team_stats]
            if view.team_stats is not None
            else None
        ),
        team_options=[TeamOptionResponse(**option.model_dump()) for option in view.team_options],
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="transferviz")
    store = DatasetStore(settings.data_path, max_datasets=settings.max_datasets)
    app.state.dataset_store = store
    app.state.settings = settings

    def _jitter_rng() -> random.Random:
        return random.Random(settings.jitter_seed) if settings.jitter_seed is not None else random.Random()

    def _fetch_dataset_or_404(dataset_id: str | None) -> DatasetRecord:
        try:
            dataset = store.get(dataset_id)
        except DatasetLoadError as exc:
            logger.warning("Default dataset unavailable: %s", exc)
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        if dataset is None:
            raise HTTPException(status_code=404, detail="Dataset not found")
        return dataset

    def _recent_uploads() -> list[tuple[str, str]]:
        return [(dataset.dataset_id, dataset.name) for dataset in store.list_uploads()]

    def _dashboard_html(
        dataset: DatasetRecord,
        criteria: FilterCriteria,
        *,
        show_report: bool = False,
    ) -> str:
        view = build_view(dataset.records, criteria)
        return render_dashboard_page(
            view,
            dataset_id=dataset.dataset_id,
            dataset_name=dataset.name,
            report=dataset.report if show_report else None,
            uploads=_recent_uploads(),
        )

    def _scatter_html(dataset: DatasetRecord, *, show_report: bool = False) -> str:
        points = scatter_points(dataset.records, jitter=settings.scatter_jitter, rng=_jitter_rng())
        return render_scatter_page(
            points,
            scatter_legend(dataset.records),
            dataset_name=dataset.name,
            report=dataset.report if show_report else None,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/ui", response_class=HTMLResponse)
    async def ui_dashboard(
        dataset: str | None = Query(None),
        team: str | None = Query(None),
        year: str | None = Query(None),
    ):
        try:
            record = _fetch_dataset_or_404(dataset)
        except HTTPException as exc:
            message = LOAD_ERROR_MESSAGE if dataset in (None, "", "default") else str(exc.detail)
            return HTMLResponse(render_error_page(message), status_code=exc.status_code)
        try:
            criteria = FilterCriteria.from_params(team, _parse_year(year))
        except HTTPException as exc:
            return HTMLResponse(render_error_page(str(exc.detail)), status_code=exc.status_code)
        return HTMLResponse(_dashboard_html(record, criteria))

    @app.post("/ui", response_class=HTMLResponse)
    async def ui_upload(transfers: UploadFile | None = File(None)):
        try:
            name, text = await _read_upload(transfers)
            dataset = store.save_upload(text, name=name)
        except HTTPException as exc:
            return HTMLResponse(render_error_page(str(exc.detail)), status_code=exc.status_code)
        except DatasetLoadError as exc:
            return HTMLResponse(render_error_page(str(exc)), status_code=400)
        return HTMLResponse(_dashboard_html(dataset, FilterCriteria(), show_report=True))

    @app.get("/ui/scatter", response_class=HTMLResponse)
    async def ui_scatter(dataset: str | None = Query(None)):
        try:
            record = _fetch_dataset_or_404(dataset)
        except HTTPException as exc:
            message = LOAD_ERROR_MESSAGE if dataset in (None, "", "default") else str(exc.detail)
            return HTMLResponse(
                render_error_page(message, upload_action="/ui/scatter"),
                status_code=exc.status_code,
            )
        return HTMLResponse(_scatter_html(record))

    @app.post("/ui/scatter", response_class=HTMLResponse)
    async def ui_scatter_upload(transfers: UploadFile | None = File(None)):
        try:
            name, text = await _read_upload(transfers)
            dataset = store.save_upload(text, name=name)
        except HTTPException as exc:
            return HTMLResponse(
                render_error_page(str(exc.detail), upload_action="/ui/scatter"),
                status_code=exc.status_code,
            )
        except DatasetLoadError as exc:
            return HTMLResponse(render_error_page(str(exc), upload_action="/ui/scatter"), status_code=400)
        return HTMLResponse(_scatter_html(dataset, show_report=True))

    @app.get("/api/dashboard", response_model=DashboardResponse)
    async def dashboard(
        dataset: str | None = Query(None),
        team: str | None = Query(None),
        year: str | None = Query(None),
    ) -> DashboardResponse:
        record = _fetch_dataset_or_404(dataset)
        criteria = FilterCriteria.from_params(team, _parse_year(year))
        view = build_view(record.records, criteria)
        return view_to_response(view, dataset_id=record.dataset_id)

    @app.post("/api/datasets", response_model=DatasetResponse)
    async def upload_dataset(
        transfers: UploadFile | None = File(None),
        mapping: str | None = Form(None),
    ) -> DatasetResponse:
        name, text = await _read_upload(transfers)
        try:
            dataset = store.save_upload(text, name=name, mapping=_parse_mapping(mapping) or None)
        except DatasetLoadError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return dataset_to_response(dataset)

    @app.get("/api/datasets/{dataset_id}", response_model=DatasetResponse)
    async def get_dataset(dataset_id: str) -> DatasetResponse:
        return dataset_to_response(_fetch_dataset_or_404(dataset_id))

    @app.get("/api/datasets/{dataset_id}/teams", response_model=list[TeamOptionResponse])
    async def dataset_teams(dataset_id: str) -> list[TeamOptionResponse]:
        record = _fetch_dataset_or_404(dataset_id)
        view = build_view(record.records)
        return [TeamOptionResponse(**option.model_dump()) for option in view.team_options]

    @app.get("/api/datasets/{dataset_id}/export.csv")
    async def export_dataset(
        dataset_id: str,
        team: str | None = Query(None),
        year: str | None = Query(None),
    ) -> Response:
        record = _fetch_dataset_or_404(dataset_id)
        view = build_view(record.records, FilterCriteria.from_params(team, _parse_year(year)))
        rows = view.team_stats if view.team_stats is not None else view.yearly
        filename = f"{record.dataset_id}-yearly.csv"
        return Response(
            content=export_yearly_to_csv(rows),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.get("/api/scatter", response_model=ScatterResponse)
    async def scatter(dataset: str | None = Query(None)) -> ScatterResponse:
        record = _fetch_dataset_or_404(dataset)
        points = scatter_points(record.records, jitter=settings.scatter_jitter, rng=_jitter_rng())
        return ScatterResponse(
            dataset_id=record.dataset_id,
            points=[ScatterPointResponse(**asdict(point)) for point in points],
            legend=[LegendEntryResponse(**asdict(entry)) for entry in scatter_legend(record.records)],
        )

    return app
