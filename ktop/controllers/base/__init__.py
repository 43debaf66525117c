"""Base controller classes."""

from ktop.controllers.base.base_controller import BaseController, WorkerResult

__all__ = ["BaseController", "WorkerResult"]
