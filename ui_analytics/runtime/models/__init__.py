"""
Pydantic / datamodels used by the UI Analytics runtime.

Split into:
- log_models: ElementType + LogRecord + ControlKind + ControlEvent
- api_models: HTTP request/response schemas
"""
