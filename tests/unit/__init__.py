"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: PDF decoding and page text extraction
    - prompts/: Normalization, segmentation, filtering, synthesis
    - pipeline: Stage chaining, async runs, timeouts
    - config: Settings validation
"""
