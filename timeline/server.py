# timeline/server.py

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import asyncio
import json
import os
import logging
from typing import Optional

from timeline.lanes import InvalidIntervalError
from timeline.service import TimelineService
from timeline.sources import build_source

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)

app = FastAPI()

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # tighten for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

service = TimelineService(build_source())
WATCH_POLL_SECONDS = float(os.getenv("TIMELINE_WATCH_POLL_SECONDS", "1.0"))


@app.exception_handler(InvalidIntervalError)
async def invalid_interval_handler(request, exc: InvalidIntervalError):
    return JSONResponse(status_code=422, content={"error": str(exc), "event_id": exc.event_id})


@app.exception_handler(ValidationError)
async def validation_handler(request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"error": str(exc)})


@app.get("/lanes")
async def get_lanes():
    """
    Events grouped into non-overlapping lanes.
    """
    lanes = await service.lanes()
    return {"lanes": [[event.model_dump(mode="json") for event in lane] for lane in lanes]}


@app.get("/layout")
async def get_layout(width_per_day: Optional[float] = None):
    """
    Lanes mapped to offsets and widths at the requested zoom.
    """
    layout = await service.layout(width_per_day)
    return layout.model_dump(mode="json")


@app.get("/stats")
async def get_stats():
    return await service.stats()


@app.websocket("/ws/timeline")
async def timeline_ws(ws: WebSocket):
    await ws.accept()
    disconnected = asyncio.Event()

    async def listen():
        # the client sends nothing; this only notices when it goes away
        try:
            while True:
                await ws.receive_text()
        except WebSocketDisconnect:
            disconnected.set()

    listener = asyncio.create_task(listen())
    try:
        async for snapshot in service.watch(poll_seconds=WATCH_POLL_SECONDS, stop_flag=disconnected.is_set):
            await ws.send_text(json.dumps(snapshot))
    except InvalidIntervalError as e:
        await ws.send_text(json.dumps({"error": str(e), "event_id": e.event_id}))
    finally:
        listener.cancel()
        if not disconnected.is_set():
            await ws.close()
