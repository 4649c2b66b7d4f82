"""Main application entry point for the FastAPI application.

Run with ``uvicorn eventdesk.main:app``.
"""

from eventdesk.core.application import create_application
from eventdesk.core.initialization import initialize_application

# Initialize the application
initialize_application()

# Create the FastAPI application
app = create_application()
