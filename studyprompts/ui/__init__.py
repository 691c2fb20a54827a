"""NiceGUI interface - thin display layer for uploads and prompts.

Responsibilities:
    - PDF upload control
    - Read-only display of the extracted text
    - Generated prompt list with an explicit empty state
    - Error display for failed uploads

Contains no pipeline logic. Delegates all processing to the API.
"""
