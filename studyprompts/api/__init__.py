"""FastAPI endpoints for the study prompts service.

Thin HTTP boundary around the pipeline.

Endpoints:
    - GET /health: Service health status
    - POST /upload: PDF upload returning the extracted text
    - POST /prompts: PDF upload returning text and generated prompts
"""

from studyprompts.api.app import app, create_app

__all__ = ["app", "create_app"]
