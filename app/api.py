"""
FastAPI routes for the ledger editor.
Thin HTTP layer over LedgerService and UploadService.
"""
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.responses import FileResponse, Response
from fastapi.staticfiles import StaticFiles

from core.config import get_settings
from core.exceptions import (
    DataNotFoundError,
    ExportError,
    ParsingError,
    TableReadError,
    TableWriteError,
    UploadError,
    ValidationError,
)
from core.logger import setup_logger
from core.schema import LedgerRows, LedgerSummary, LineItem, RowEdit, UploadResult
from services.ledger_service import LedgerService
from services.ledger_store import LocalTableStore
from services.upload_service import UploadService

logger = setup_logger(__name__)
settings = get_settings()

app = FastAPI(
    title="SOT Ledger",
    description="Edit auction purchase/resale line items and export the ledger CSV",
    version="1.0.0"
)

app.mount(settings.upload_url_prefix, StaticFiles(directory=settings.upload_dir), name="uploads")

_ledger_service: Optional[LedgerService] = None
_upload_service: Optional[UploadService] = None


def get_ledger_service() -> LedgerService:
    """Ledger service singleton backed by the configured CSV file."""
    global _ledger_service
    if _ledger_service is None:
        _ledger_service = LedgerService(LocalTableStore(settings.ledger_path))
    return _ledger_service


def get_upload_service() -> UploadService:
    global _upload_service
    if _upload_service is None:
        _upload_service = UploadService(settings.upload_dir, settings.upload_url_prefix)
    return _upload_service


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "sot_ledger",
        "version": "1.0.0"
    }


@app.get("/api/sot", response_model=LedgerRows)
def load_ledger(service: LedgerService = Depends(get_ledger_service)):
    """Reload the working set from the ledger file."""
    try:
        return LedgerRows(rows=service.load())
    except TableReadError as e:
        logger.error(f"Failed to load ledger: {e.message} {e.details}")
        raise HTTPException(status_code=500, detail=e.message)


@app.post("/api/sot/save")
def save_ledger(service: LedgerService = Depends(get_ledger_service)):
    """Persist the working set to the ledger file."""
    try:
        saved = service.save()
    except TableWriteError as e:
        logger.error(f"Failed to save ledger: {e.message} {e.details}")
        raise HTTPException(status_code=500, detail=e.message)
    return {"ok": True, "rows": saved}


@app.post("/api/sot/rows", response_model=LineItem, status_code=201)
def add_row(service: LedgerService = Depends(get_ledger_service)):
    """Insert a blank line at the top."""
    return service.add_row()


@app.patch("/api/sot/rows/{index}", response_model=LineItem)
def update_row(
    index: int,
    edit: RowEdit,
    service: LedgerService = Depends(get_ledger_service)
):
    """Edit one field and return the recomputed line."""
    try:
        return service.update_row(index, edit.field, edit.value)
    except DataNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)


@app.post("/api/sot/import")
async def import_csv(
    file: UploadFile = File(...),
    service: LedgerService = Depends(get_ledger_service)
):
    """Prepend rows from an uploaded CSV file."""
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Only CSV files are supported")

    content = await file.read()
    try:
        imported = service.import_csv(content, file.filename)
    except ParsingError as e:
        logger.error(f"Import failed for {file.filename}: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)

    return {
        "ok": True,
        "imported": imported,
        "message": f"Imported {imported} rows from {file.filename}"
    }


@app.get("/api/sot/export")
def export_ledger_csv(service: LedgerService = Depends(get_ledger_service)):
    """Download the working set as CSV."""
    return Response(
        content=service.export_csv(),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{settings.export_filename}"'}
    )


@app.get("/api/sot/export.xlsx")
def export_ledger_excel(service: LedgerService = Depends(get_ledger_service)):
    """Download the working set as a spreadsheet."""
    try:
        output_path = service.export_excel()
    except ExportError as e:
        logger.error(f"Spreadsheet export failed: {e.details}")
        raise HTTPException(status_code=500, detail=e.message)

    return FileResponse(
        path=output_path,
        filename=Path(output_path).name,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )


@app.get("/api/sot/summary", response_model=LedgerSummary)
def ledger_summary(
    q: Optional[str] = None,
    service: LedgerService = Depends(get_ledger_service)
):
    """Totals and ratios over the (optionally searched) working set."""
    return service.summary(q)


@app.post("/api/upload", response_model=UploadResult)
async def upload_attachment(
    file: UploadFile = File(...),
    service: UploadService = Depends(get_upload_service)
):
    """Store an attachment such as a scanned invoice PDF."""
    content = await file.read()
    try:
        return service.store(file.filename or "", content)
    except UploadError as e:
        status = 400 if not file.filename else 500
        raise HTTPException(status_code=status, detail=e.message)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
