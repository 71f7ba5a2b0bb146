"""Base controller classes."""

from podwatch.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
