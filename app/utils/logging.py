"""
Logging utilities for tracking visitor activity across the site.
"""

import logging

from flask import request
from app.models import LogEntry
from app import db

logger = logging.getLogger(__name__)


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.
    
    Args:
        project_name (str): The project identifier (e.g., 'calculator')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name
    visitor = request.remote_addr or 'unknown address'
    
    log_entry = LogEntry(
        project=project_name,
        category='Visit',
        description=f"Anonymous user ({visitor}) visited {display_name}"
    )
    db.session.add(log_entry)
    db.session.commit()
    logger.info(f"Visit to {project_name} from {visitor}")
