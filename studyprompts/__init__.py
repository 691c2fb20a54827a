"""Study Prompts - derive review questions from PDF documents.

Combines pypdf for text extraction, FastAPI for the upload service,
NiceGUI for the web page, and Pydantic for data validation.

Components:
    - parsing: PDF decoding and page text extraction
    - prompts: Normalization, segmentation, filtering, prompt synthesis
    - pipeline: Runs the stages in order for one document
    - api: HTTP upload endpoints
    - ui: Web page for uploading and reviewing prompts
    - models: Response schemas
"""

__version__ = "0.1.0"
