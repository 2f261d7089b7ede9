#!/usr/bin/env python
"""Script to run the task manager API server."""
import uvicorn

from task_api import config

if __name__ == "__main__":
    uvicorn.run(
        "task_api.main:app",
        host="0.0.0.0",
        port=config.SERVER_PORT,
        reload=config.SERVER_TYPE == "development",
    )
