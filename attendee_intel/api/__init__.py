# HTTP API - FastAPI app exposing the insights functions as JSON endpoints.
# Run: uvicorn attendee_intel.api.app:app --reload --port 8000
