"""
Top-level re-export so `uvicorn app:app` keeps working.

The application lives in bmi_tracker/main.py:
- bmi_tracker/models/ - Pydantic models
- bmi_tracker/routes/ - API endpoints, one module per resource
- bmi_tracker/services/ - SQL for each table
- bmi_tracker/database/ - Engine lifecycle, sessions and schema bootstrap
- bmi_tracker/utils/ - URL and parameter helpers
"""

from bmi_tracker.main import app

from bmi_tracker.models.schemas import (
    WeightEntry,
    ChecklistEntry,
    WeightPayload,
    ChecklistPayload,
)

__all__ = ['app', 'WeightEntry', 'ChecklistEntry', 'WeightPayload', 'ChecklistPayload']
