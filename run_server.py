#!/usr/bin/env python3
"""
FastAPI server runner for the WEGO planner API
"""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "wego_planner.main:app",
        host=os.getenv("WEGO_HOST", "0.0.0.0"),
        port=int(os.getenv("WEGO_PORT", "8000")),
        reload=True,  # auto-reload for development
        log_level="info"
    )
