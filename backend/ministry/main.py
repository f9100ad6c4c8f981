import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Ensure all SQLAlchemy models are imported so relationships resolve
import ministry.models  # noqa: F401

from ministry.api import member_care, members, mission_trips, scripture
from ministry.api.system import router as system_router

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

app = FastAPI(title="Ministry Backend")

# --- CORS for local frontend dev ---
_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in _origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers (each defines its own prefix)
app.include_router(system_router)          # /health, /version
app.include_router(members.router)         # /members
app.include_router(member_care.router)     # /member-care
app.include_router(mission_trips.router)   # /mission-trips
app.include_router(scripture.router)       # /scripture
