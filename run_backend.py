#!/usr/bin/env python3
"""Start the Room Dimension Inference API server."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "roomdims.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["roomdims"],
        log_level="info",
    )
