"""
hx-calc — FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hxcalc.api.router import router
from hxcalc.config import CORS_ORIGINS

app = FastAPI(
    title="hx-calc API",
    description="Humid air states and air-handling processes for h-x diagram calculations",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "hx-calc"}
