"""magics_api package init.

The FastAPI application object lives in `magics_api.app`; it is not
re-exported here so that importing submodules never builds the app.
"""

__all__ = []
