"""Test package for Study Prompts.

Structure:
    - unit/: Extractor, text stages, pipeline, and settings tests
    - integration/: HTTP upload tests against the FastAPI app

PDFs are generated in memory by the builder in conftest.py.
"""
