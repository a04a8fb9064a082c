from typing import Any, Dict

# ✅ load environment variables
from pathlib import Path
from dotenv import load_dotenv
load_dotenv(Path(__file__).with_name(".env"), override=False)

import json

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from services.report_service import ReportGenerator, build_report_generator


app = FastAPI(
    title="TickerReport API",
    description="Market data in, Markdown stock report out.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"http://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

GENERIC_REPORT_ERROR = "An unexpected error occurred while generating the report."


class ReportRequest(BaseModel):
    data: str = Field(..., min_length=1, strict=True)


class ReportResponse(BaseModel):
    report: str


class ErrorResponse(BaseModel):
    error: str


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.on_event("startup")
def _startup() -> None:
    # ✅ one completion client per process
    app.state.report_generator = build_report_generator()


def get_report_generator(request: Request) -> ReportGenerator:
    generator = getattr(request.app.state, "report_generator", None)
    if generator is None:
        generator = build_report_generator()
        request.app.state.report_generator = generator
    return generator


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.api_route("/api/report", methods=ALL_METHODS)
async def generate_report(
    request: Request,
    generator: ReportGenerator = Depends(get_report_generator),
) -> Any:
    """
    Turn newline-delimited market data into a Markdown stock report.
    """
    if request.method != "POST":
        return _error(405, "Method Not Allowed")

    print("🚨 /api/report route hit")

    try:
        payload = json.loads(await request.body())

        try:
            body = ReportRequest.model_validate(payload)
        except ValidationError:
            return _error(400, "Invalid request body")

        report = await run_in_threadpool(generator.generate, body.data)
        return ReportResponse(report=report).model_dump()

    except Exception as e:
        print("[report] error:", repr(e))
        return _error(500, GENERIC_REPORT_ERROR)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
