"""
Completion Simulator package.

Provides:
- Request validation for the text-completion API
- Synthetic completion responses sampled from a static text corpus
- FastAPI app and uvicorn entry point serving /v1/completions
"""
